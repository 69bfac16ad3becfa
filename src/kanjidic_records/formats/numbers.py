from __future__ import annotations

import re

from kanjidic_records.errors import Component, DecodeError, DecodeErrorCode, build_decode_error

U8_MAX = 0xFF
U16_MAX = 0xFFFF
U32_MAX = 0xFFFF_FFFF

_DECIMAL_PATTERN = re.compile(r"[0-9]+", flags=re.ASCII)
_HEX_PATTERN = re.compile(r"[0-9A-Fa-f]+", flags=re.ASCII)


def parse_uint(
    input_text: str,
    *,
    maximum: int = U32_MAX,
    minimum: int = 0,
    component: Component | None = None,
) -> int:
    if _DECIMAL_PATTERN.fullmatch(input_text) is None:
        raise build_decode_error(
            DecodeErrorCode.E_SCALAR_NOT_A_NUMBER,
            "expected an unsigned decimal integer",
            input_text=input_text,
            component=component,
        )
    digits = _significant_digits(input_text, len(str(maximum)), minimum, maximum, component)
    return _bounded(int(digits), input_text, minimum, maximum, component)


def parse_hex_uint(
    input_text: str,
    *,
    maximum: int = U32_MAX,
    minimum: int = 0,
    component: Component | None = None,
) -> int:
    if _HEX_PATTERN.fullmatch(input_text) is None:
        raise build_decode_error(
            DecodeErrorCode.E_SCALAR_NOT_A_NUMBER,
            "expected an unsigned hexadecimal integer",
            input_text=input_text,
            component=component,
        )
    digits = _significant_digits(input_text, len(f"{maximum:x}"), minimum, maximum, component)
    return _bounded(int(digits, 16), input_text, minimum, maximum, component)


def _significant_digits(
    input_text: str,
    max_digits: int,
    minimum: int,
    maximum: int,
    component: Component | None,
) -> str:
    # int() rejects strings longer than sys.get_int_max_str_digits(), leading zeros included
    digits = input_text.lstrip("0") or "0"
    if len(digits) > max_digits:
        raise _out_of_range(input_text, minimum, maximum, component)
    return digits


def _out_of_range(
    input_text: str, minimum: int, maximum: int, component: Component | None
) -> DecodeError:
    return build_decode_error(
        DecodeErrorCode.E_SCALAR_OUT_OF_RANGE,
        f"value must be within [{minimum}, {maximum}]",
        input_text=input_text,
        component=component,
    )


def _bounded(
    value: int,
    input_text: str,
    minimum: int,
    maximum: int,
    component: Component | None,
) -> int:
    if value < minimum or value > maximum:
        raise _out_of_range(input_text, minimum, maximum, component)
    return value


def build_format_error(component: Component, expected: str, input_text: str) -> DecodeError:
    return build_decode_error(
        DecodeErrorCode.E_FORMAT_MALFORMED,
        f"expected {expected}",
        input_text=input_text,
        component=component,
    )


def build_unrecognized_error(component: Component, message: str, input_text: str) -> DecodeError:
    return build_decode_error(
        DecodeErrorCode.E_VARIANT_UNRECOGNIZED,
        message,
        input_text=input_text,
        component=component,
    )
