from __future__ import annotations

import pytest

from kanjidic_records.errors import Component, DecodeError, DecodeErrorCode, ErrorCategory
from kanjidic_records.fields import decode_grade, decode_optional_grade
from kanjidic_records.models import Grade, GradeKind
from kanjidic_records.tree import parse_document

pytestmark = pytest.mark.unit


@pytest.mark.parametrize("year", [1, 2, 3, 4, 5, 6])
def test_kyouiku_school_years(year: int) -> None:
    node = parse_document(f"<grade>{year}</grade>")

    assert decode_grade(node) == Grade(kind=GradeKind.KYOUIKU, school_year=year)


@pytest.mark.parametrize(
    ("text", "kind"),
    [
        ("8", GradeKind.JOUYOU),
        ("9", GradeKind.JINMEIYOU),
        ("10", GradeKind.JINMEIYOU_JOUYOU_VARIANT),
    ],
)
def test_named_grades(text: str, kind: GradeKind) -> None:
    assert decode_grade(parse_document(f"<grade>{text}</grade>")) == Grade(kind=kind)


@pytest.mark.parametrize("text", ["0", "7", "11", "200"])
def test_unrecognized_grade_levels(text: str) -> None:
    with pytest.raises(DecodeError) as exc_info:
        decode_grade(parse_document(f"<grade>{text}</grade>"))

    assert exc_info.value.code == DecodeErrorCode.E_VARIANT_UNRECOGNIZED
    assert exc_info.value.category is ErrorCategory.UNRECOGNIZED_VARIANT
    assert exc_info.value.detail.input_text == text


@pytest.mark.parametrize("text", ["eight", "8a", "-1"])
def test_non_numeric_grade_is_a_scalar_error(text: str) -> None:
    with pytest.raises(DecodeError) as exc_info:
        decode_grade(parse_document(f"<grade>{text}</grade>"))

    assert exc_info.value.code == DecodeErrorCode.E_SCALAR_NOT_A_NUMBER
    assert exc_info.value.category is ErrorCategory.MALFORMED_SCALAR


def test_optional_grade_absent_and_wrapped() -> None:
    assert decode_optional_grade(parse_document("<misc><stroke_count>7</stroke_count></misc>")) is None

    with pytest.raises(DecodeError) as exc_info:
        decode_optional_grade(parse_document("<misc><grade>7</grade></misc>"))

    assert exc_info.value.components == (Component.GRADE,)
    assert str(exc_info.value.position) == "/misc[0]/grade[0]"
