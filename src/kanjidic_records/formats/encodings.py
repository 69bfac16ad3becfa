from __future__ import annotations

import re

from kanjidic_records.errors import Component
from kanjidic_records.models import Kuten

from .numbers import build_format_error, parse_hex_uint, parse_uint

UNICODE_SCALAR_MAX = 0x10FFFF

_KUTEN_PATTERN = re.compile(r"([0-9]+)-([0-9]+)-([0-9]+)", flags=re.ASCII)


def parse_kuten(input_text: str) -> Kuten:
    """Decode a JIS ``plane-ku-ten`` triple such as ``1-16-01``."""
    match = _KUTEN_PATTERN.fullmatch(input_text)
    if match is None:
        raise build_format_error(Component.KUTEN, "a 'plane-ku-ten' triple", input_text)
    plane, ku, ten = match.groups()
    return Kuten(
        plane=parse_uint(plane, minimum=1, maximum=2, component=Component.KUTEN),
        ku=parse_uint(ku, minimum=1, maximum=94, component=Component.KUTEN),
        ten=parse_uint(ten, minimum=1, maximum=94, component=Component.KUTEN),
    )


def format_kuten(kuten: Kuten) -> str:
    return f"{kuten.plane}-{kuten.ku:02d}-{kuten.ten:02d}"


def parse_unicode_scalar(input_text: str) -> int:
    return parse_hex_uint(input_text, maximum=UNICODE_SCALAR_MAX, component=Component.UNICODE)
