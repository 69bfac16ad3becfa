from __future__ import annotations

import pytest

from kanjidic_records.errors import Component, DecodeError, DecodeErrorCode
from kanjidic_records.formats import (
    format_kuten,
    parse_hex_uint,
    parse_kuten,
    parse_uint,
    parse_unicode_scalar,
)
from kanjidic_records.models import Kuten

pytestmark = pytest.mark.unit


def test_parse_uint_accepts_ascii_decimal_within_bounds() -> None:
    assert parse_uint("0525") == 525
    assert parse_uint("255", maximum=255) == 255
    assert parse_uint("1", minimum=1, maximum=4) == 1


@pytest.mark.parametrize("text", ["", "-1", "+3", " 7", "7 ", "1.5", "٣", "0x10"])
def test_parse_uint_rejects_non_decimal_text(text: str) -> None:
    with pytest.raises(DecodeError) as exc_info:
        parse_uint(text, component=Component.SKIP)

    assert exc_info.value.code == DecodeErrorCode.E_SCALAR_NOT_A_NUMBER
    assert exc_info.value.components == (Component.SKIP,)
    assert exc_info.value.position is None


def test_parse_uint_reports_range_violations() -> None:
    with pytest.raises(DecodeError) as too_big:
        parse_uint("256", maximum=255)
    with pytest.raises(DecodeError) as too_small:
        parse_uint("0", minimum=1)

    assert too_big.value.code == DecodeErrorCode.E_SCALAR_OUT_OF_RANGE
    assert too_small.value.code == DecodeErrorCode.E_SCALAR_OUT_OF_RANGE


def test_parse_hex_uint_and_unicode_scalar() -> None:
    assert parse_hex_uint("ff") == 255
    assert parse_unicode_scalar("4e9c") == 20124
    assert parse_unicode_scalar("4E9C") == 20124
    assert parse_unicode_scalar("10FFFF") == 0x10FFFF

    with pytest.raises(DecodeError) as too_big:
        parse_unicode_scalar("110000")
    with pytest.raises(DecodeError) as not_hex:
        parse_unicode_scalar("4g9c")

    assert too_big.value.code == DecodeErrorCode.E_SCALAR_OUT_OF_RANGE
    assert too_big.value.components == (Component.UNICODE,)
    assert not_hex.value.code == DecodeErrorCode.E_SCALAR_NOT_A_NUMBER


def test_parse_kuten_accepts_zero_padded_cells() -> None:
    assert parse_kuten("1-16-01") == Kuten(plane=1, ku=16, ten=1)
    assert parse_kuten("2-94-94") == Kuten(plane=2, ku=94, ten=94)


@pytest.mark.parametrize("text", ["1-16", "1-16-01-2", "1/16/01", "a-16-01", "", "1--01"])
def test_parse_kuten_rejects_malformed_triples(text: str) -> None:
    with pytest.raises(DecodeError) as exc_info:
        parse_kuten(text)

    assert exc_info.value.code == DecodeErrorCode.E_FORMAT_MALFORMED
    assert exc_info.value.components == (Component.KUTEN,)


@pytest.mark.parametrize("text", ["0-16-01", "3-16-01", "1-0-01", "1-95-01", "1-16-95"])
def test_parse_kuten_rejects_out_of_range_coordinates(text: str) -> None:
    with pytest.raises(DecodeError) as exc_info:
        parse_kuten(text)

    assert exc_info.value.code == DecodeErrorCode.E_SCALAR_OUT_OF_RANGE


def test_format_kuten_zero_pads_cells() -> None:
    assert format_kuten(Kuten(plane=1, ku=16, ten=1)) == "1-16-01"
    assert format_kuten(Kuten(plane=2, ku=5, ten=94)) == "2-05-94"


@pytest.mark.parametrize("text", ["1-16-01", "1-48-19", "2-01-01", "2-94-94"])
def test_format_kuten_reproduces_canonical_text(text: str) -> None:
    assert format_kuten(parse_kuten(text)) == text


def test_parse_uint_handles_digit_runs_longer_than_int_conversion_allows() -> None:
    assert parse_uint("0" * 5000 + "7", maximum=255) == 7
    assert parse_hex_uint("0" * 5000 + "ff", maximum=255) == 255

    with pytest.raises(DecodeError) as decimal:
        parse_uint("9" * 5000, component=Component.FREQUENCY)
    with pytest.raises(DecodeError) as hexadecimal:
        parse_unicode_scalar("f" * 5000)

    assert decimal.value.code == DecodeErrorCode.E_SCALAR_OUT_OF_RANGE
    assert decimal.value.components == (Component.FREQUENCY,)
    assert hexadecimal.value.code == DecodeErrorCode.E_SCALAR_OUT_OF_RANGE
    assert hexadecimal.value.components == (Component.UNICODE,)
