from __future__ import annotations

import re
from collections.abc import Mapping
from types import MappingProxyType

from kanjidic_records.errors import Component
from kanjidic_records.models import (
    DeRoo,
    ExtremeBottom,
    ExtremeTop,
    FourCorner,
    ShDesc,
    Skip,
    SkipEnclosure,
    SkipHorizontal,
    SkipSolid,
    SkipVertical,
    SolidSubpattern,
    Stroke,
)

from .numbers import U8_MAX, U16_MAX, build_format_error, build_unrecognized_error, parse_uint

_SKIP_PATTERN = re.compile(r"([0-9]+)-([0-9]+)-([0-9]+)", flags=re.ASCII)
_FOUR_CORNER_PATTERN = re.compile(r"([0-9])([0-9])([0-9])([0-9])(?:\.([0-9]))?", flags=re.ASCII)
_DE_ROO_PATTERN = re.compile(r"([0-9]{1,2})([0-9]{2})", flags=re.ASCII)
_SH_DESC_PATTERN = re.compile(r"([0-9]+)([a-z])([0-9]+)\.([0-9]+)", flags=re.ASCII)

_SOLID_SUBPATTERNS: Mapping[int, SolidSubpattern] = MappingProxyType(
    {subpattern.value: subpattern for subpattern in SolidSubpattern}
)
_EXTREME_TOPS: Mapping[int, ExtremeTop] = MappingProxyType({top.value: top for top in ExtremeTop})
_EXTREME_BOTTOMS: Mapping[int, ExtremeBottom] = MappingProxyType(
    {bottom.value: bottom for bottom in ExtremeBottom}
)


def parse_skip(input_text: str) -> Skip:
    """Decode a SKIP code ``pattern-first-second``.

    Patterns 1-3 split the character into two parts and count the strokes of
    each; pattern 4 (solid) carries the total stroke count and a subpattern.
    """
    parsed = _SKIP_PATTERN.fullmatch(input_text)
    if parsed is None:
        raise build_format_error(Component.SKIP, "a 'pattern-count-count' SKIP code", input_text)
    raw_pattern, raw_first, raw_second = parsed.groups()
    first = parse_uint(raw_first, maximum=U8_MAX, component=Component.SKIP)
    second = parse_uint(raw_second, maximum=U8_MAX, component=Component.SKIP)
    match raw_pattern:
        case "1":
            return SkipHorizontal(left=first, right=second)
        case "2":
            return SkipVertical(top=first, bottom=second)
        case "3":
            return SkipEnclosure(exterior=first, interior=second)
        case "4":
            subpattern = _SOLID_SUBPATTERNS.get(second)
            if subpattern is None:
                raise build_unrecognized_error(
                    Component.SKIP, f"unknown solid subpattern '{raw_second}'", input_text
                )
            return SkipSolid(total_stroke_count=first, solid_subpattern=subpattern)
        case _:
            raise build_unrecognized_error(
                Component.SKIP, f"unknown SKIP pattern '{raw_pattern}'", input_text
            )


def parse_four_corner(input_text: str) -> FourCorner:
    match = _FOUR_CORNER_PATTERN.fullmatch(input_text)
    if match is None:
        raise build_format_error(
            Component.FOUR_CORNER, "four corner digits with an optional '.digit'", input_text
        )
    top_left, top_right, bottom_left, bottom_right, fifth = match.groups()
    return FourCorner(
        top_left=Stroke(int(top_left)),
        top_right=Stroke(int(top_right)),
        bottom_left=Stroke(int(bottom_left)),
        bottom_right=Stroke(int(bottom_right)),
        fifth_corner=None if fifth is None else Stroke(int(fifth)),
    )


def parse_de_roo(input_text: str) -> DeRoo:
    """Decode a De Roo code: a one or two digit top code, then a two digit bottom code."""
    match = _DE_ROO_PATTERN.fullmatch(input_text)
    if match is None:
        raise build_format_error(Component.DE_ROO, "a three or four digit De Roo code", input_text)
    raw_top, raw_bottom = (int(group) for group in match.groups())
    top = _EXTREME_TOPS.get(raw_top)
    if top is None:
        raise build_unrecognized_error(
            Component.DE_ROO, f"unknown extreme top code {raw_top}", input_text
        )
    bottom = _EXTREME_BOTTOMS.get(raw_bottom)
    if bottom is None:
        raise build_unrecognized_error(
            Component.DE_ROO, f"unknown extreme bottom code {raw_bottom}", input_text
        )
    return DeRoo(top=top, bottom=bottom)


def parse_sh_desc(input_text: str) -> ShDesc:
    match = _SH_DESC_PATTERN.fullmatch(input_text)
    if match is None:
        raise build_format_error(Component.SH_DESC, "a descriptor like '0a7.14'", input_text)
    radical_strokes, radical, other_strokes, sequence = match.groups()
    return ShDesc(
        radical_strokes=parse_uint(radical_strokes, maximum=U8_MAX, component=Component.SH_DESC),
        radical=radical,
        other_strokes=parse_uint(other_strokes, maximum=U8_MAX, component=Component.SH_DESC),
        sequence=parse_uint(sequence, maximum=U16_MAX, component=Component.SH_DESC),
    )
