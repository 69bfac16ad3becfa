from __future__ import annotations

import pytest

from kanjidic_records.errors import (
    ERROR_CATEGORY_BY_CODE,
    Component,
    DecodeError,
    DecodeErrorCode,
    DecodeErrorDetail,
    ErrorCategory,
    build_decode_error,
)
from kanjidic_records.position import NodePosition

pytestmark = pytest.mark.unit

_CHARACTER = NodePosition.root("kanjidic2").child("character", 3)


def test_position_renders_ancestor_chain() -> None:
    position = _CHARACTER.child("query_code", 0).child("q_code", 1)

    assert str(position) == "/kanjidic2[0]/character[3]/query_code[0]/q_code[1]"
    assert position.tag == "q_code"
    assert position.ordinal == 1


@pytest.mark.parametrize("path", [(), (("", 0),), (("character", -1),)])
def test_position_rejects_invalid_paths(path: tuple[tuple[str, int], ...]) -> None:
    with pytest.raises(ValueError):
        NodePosition(path)


def test_every_code_belongs_to_exactly_one_category() -> None:
    assert set(ERROR_CATEGORY_BY_CODE) == set(DecodeErrorCode)
    assert ERROR_CATEGORY_BY_CODE[DecodeErrorCode.E_TREE_TEXT_MISSING] is (
        ErrorCategory.MISSING_STRUCTURE
    )
    assert ERROR_CATEGORY_BY_CODE[DecodeErrorCode.E_SCALAR_OUT_OF_RANGE] is (
        ErrorCategory.MALFORMED_SCALAR
    )
    assert ERROR_CATEGORY_BY_CODE[DecodeErrorCode.E_FORMAT_SUFFIX_UNKNOWN] is (
        ErrorCategory.UNRECOGNIZED_VARIANT
    )
    assert ERROR_CATEGORY_BY_CODE[DecodeErrorCode.E_FORMAT_MALFORMED] is (
        ErrorCategory.MALFORMED_FORMAT
    )


def test_wrapping_prepends_components_and_fills_position_once() -> None:
    leaf = build_decode_error(
        DecodeErrorCode.E_FORMAT_MALFORMED,
        "expected a SKIP code",
        input_text="4-7",
        component=Component.SKIP,
    )
    inner_position = _CHARACTER.child("query_code", 0).child("q_code", 0)

    wrapped = leaf.wrapped(Component.QUERY_CODE, position=inner_position).wrapped(
        Component.CHARACTER, position=_CHARACTER
    )

    assert wrapped.components == (Component.CHARACTER, Component.QUERY_CODE, Component.SKIP)
    assert wrapped.position == inner_position
    assert wrapped.code == DecodeErrorCode.E_FORMAT_MALFORMED
    assert wrapped.category is ErrorCategory.MALFORMED_FORMAT
    assert leaf.components == (Component.SKIP,)
    assert leaf.position is None


def test_error_text_reads_outermost_first() -> None:
    error = build_decode_error(
        DecodeErrorCode.E_FORMAT_MALFORMED,
        "expected a SKIP code",
        input_text="4-7",
        position=_CHARACTER,
        component=Component.SKIP,
    ).wrapped(Component.CHARACTER)

    assert str(error) == (
        "character > skip: E_FORMAT_MALFORMED: expected a SKIP code (input '4-7')"
        " at /kanjidic2[0]/character[3]"
    )
    assert isinstance(error, ValueError)


def test_located_keeps_existing_position() -> None:
    error = build_decode_error(
        DecodeErrorCode.E_TREE_TEXT_MISSING, "no text", position=_CHARACTER
    )

    assert error.located(NodePosition.root("kanjidic2")).position == _CHARACTER


def test_detail_requires_code_and_message() -> None:
    with pytest.raises(ValueError):
        DecodeErrorDetail(code="", message="missing")
    with pytest.raises(ValueError):
        DecodeErrorDetail(code="E_TREE_TEXT_MISSING", message="")


def test_decode_error_is_catchable_from_detail() -> None:
    detail = DecodeErrorDetail(code="E_SCALAR_NOT_A_NUMBER", message="expected a number")

    with pytest.raises(DecodeError) as exc_info:
        raise DecodeError(detail)

    assert exc_info.value.detail is detail
    assert exc_info.value.components == ()
    assert exc_info.value.category is ErrorCategory.MALFORMED_SCALAR
