from __future__ import annotations

from kanjidic_records.errors import Component, DecodeError
from kanjidic_records.formats.numbers import U8_MAX, U16_MAX
from kanjidic_records.models import StrokeCount
from kanjidic_records.tree import (
    TreeNode,
    map_children,
    map_required_children,
    optional_child,
    required_text,
    text_as_uint,
)

_JLPT_LEVELS = (1, 4)


def _stroke_count(node: TreeNode) -> int:
    return text_as_uint(node, minimum=1, maximum=U8_MAX)


def decode_stroke_counts(misc: TreeNode) -> StrokeCount:
    """The first ``<stroke_count>`` is the accepted one; any others are common miscounts."""
    try:
        accepted, *miscounts = map_required_children(misc, "stroke_count", _stroke_count)
    except DecodeError as exc:
        raise exc.wrapped(Component.STROKE_COUNT) from exc
    return StrokeCount(accepted=accepted, miscounts=tuple(miscounts))


def decode_frequency(misc: TreeNode) -> int | None:
    node = optional_child(misc, "freq")
    if node is None:
        return None
    try:
        return text_as_uint(node, minimum=1, maximum=U16_MAX)
    except DecodeError as exc:
        raise exc.wrapped(Component.FREQUENCY) from exc


def decode_radical_names(misc: TreeNode) -> tuple[str, ...]:
    try:
        return map_children(misc, "rad_name", required_text)
    except DecodeError as exc:
        raise exc.wrapped(Component.RADICAL_NAME) from exc


def decode_jlpt(misc: TreeNode) -> int | None:
    node = optional_child(misc, "jlpt")
    if node is None:
        return None
    minimum, maximum = _JLPT_LEVELS
    try:
        return text_as_uint(node, minimum=minimum, maximum=maximum)
    except DecodeError as exc:
        raise exc.wrapped(Component.JLPT) from exc
