from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from kanjidic_records.errors import DecodeError, DecodeErrorCode
from kanjidic_records.formats import (
    format_kuten,
    format_moro_index,
    format_oneill,
    parse_kuten,
    parse_moro_index,
    parse_oneill,
    parse_uint,
)
from kanjidic_records.models import Kuten, MoroSuffix, Oneill, OneillSuffix

pytestmark = pytest.mark.property

_KUTEN = st.builds(
    Kuten,
    plane=st.integers(min_value=1, max_value=2),
    ku=st.integers(min_value=1, max_value=94),
    ten=st.integers(min_value=1, max_value=94),
)
_INDEX = st.integers(min_value=0, max_value=0xFFFF)


@given(kuten=_KUTEN)
def test_kuten_encoding_is_inverted_by_decoding(kuten: Kuten) -> None:
    assert parse_kuten(format_kuten(kuten)) == kuten


@given(kuten=_KUTEN)
def test_canonical_kuten_text_survives_decode_and_encode(kuten: Kuten) -> None:
    text = f"{kuten.plane}-{kuten.ku:02d}-{kuten.ten:02d}"

    assert format_kuten(parse_kuten(text)) == text


@given(index=_INDEX, suffix=st.sampled_from(MoroSuffix))
def test_moro_encoding_is_inverted_by_decoding(index: int, suffix: MoroSuffix) -> None:
    assert parse_moro_index(format_moro_index(index, suffix)) == (index, suffix)


@given(number=_INDEX, suffix=st.sampled_from(OneillSuffix))
def test_oneill_encoding_is_inverted_by_decoding(number: int, suffix: OneillSuffix) -> None:
    oneill = Oneill(number=number, suffix=suffix)

    assert parse_oneill(format_oneill(oneill)) == oneill


@given(text=st.text(max_size=8))
def test_uint_decoding_never_raises_anything_but_decode_error(text: str) -> None:
    try:
        value = parse_uint(text, maximum=0xFFFF)
    except DecodeError:
        return
    assert 0 <= value <= 0xFFFF
    assert value == int(text)


@given(
    zeros=st.integers(min_value=0, max_value=6000),
    digit=st.sampled_from("123456789"),
    width=st.integers(min_value=1, max_value=6000),
)
def test_long_digit_runs_decode_or_fail_as_decode_error(zeros: int, digit: str, width: int) -> None:
    text = "0" * zeros + digit * width
    try:
        value = parse_uint(text, maximum=0xFFFF)
    except DecodeError as exc:
        assert exc.code == DecodeErrorCode.E_SCALAR_OUT_OF_RANGE
        return
    assert 0 <= value <= 0xFFFF
