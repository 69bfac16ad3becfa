from .encodings import format_kuten, parse_kuten, parse_unicode_scalar
from .indices import (
    format_moro_index,
    format_oneill,
    parse_busy_people,
    parse_moro_index,
    parse_oneill,
)
from .numbers import parse_hex_uint, parse_uint
from .query_codes import parse_de_roo, parse_four_corner, parse_sh_desc, parse_skip
from .readings import parse_kunyomi, parse_pin_yin

__all__ = [
    "format_kuten",
    "format_moro_index",
    "format_oneill",
    "parse_busy_people",
    "parse_de_roo",
    "parse_four_corner",
    "parse_hex_uint",
    "parse_kunyomi",
    "parse_kuten",
    "parse_moro_index",
    "parse_oneill",
    "parse_pin_yin",
    "parse_sh_desc",
    "parse_skip",
    "parse_uint",
    "parse_unicode_scalar",
]
