from __future__ import annotations

from collections.abc import Callable, Mapping
from types import MappingProxyType

from kanjidic_records.errors import Component, DecodeError
from kanjidic_records.formats import parse_busy_people, parse_moro_index, parse_oneill, parse_uint
from kanjidic_records.formats.numbers import U8_MAX, U16_MAX
from kanjidic_records.models import BusyPeople, Moro, Oneill, Reference, ReferenceKind
from kanjidic_records.tree import (
    TreeNode,
    attribute_as_uint,
    decode_text,
    map_children,
    optional_child,
)

from .common import select_kind


def _book_index(text: str) -> int:
    return parse_uint(text, maximum=U16_MAX)


TEXT_REFERENCE_DECODERS: Mapping[ReferenceKind, Callable[[str], int | Oneill | BusyPeople]] = (
    MappingProxyType(
        {
            ReferenceKind.ONEILL_NAMES: parse_oneill,
            ReferenceKind.BUSY_PEOPLE: parse_busy_people,
        }
    )
)


def decode_moro(node: TreeNode) -> Moro:
    """Morohashi references carry optional volume and page attributes beside the index."""
    index, suffix = decode_text(node, parse_moro_index)
    try:
        volume = attribute_as_uint(node, "m_vol", maximum=U8_MAX)
        page = attribute_as_uint(node, "m_page", maximum=U16_MAX)
    except DecodeError as exc:
        raise exc.wrapped(Component.MORO) from exc
    return Moro(index=index, suffix=suffix, volume=volume, page=page)


def decode_reference(node: TreeNode) -> Reference:
    kind = select_kind(node, "dr_type", ReferenceKind)
    if kind is ReferenceKind.MORO:
        return Reference(kind=kind, value=decode_moro(node))
    decoder = TEXT_REFERENCE_DECODERS.get(kind, _book_index)
    return Reference(kind=kind, value=decode_text(node, decoder))


def decode_references(character: TreeNode) -> tuple[Reference, ...]:
    """Dictionary references are optional; a character without ``<dic_number>`` has none."""
    group = optional_child(character, "dic_number")
    if group is None:
        return ()
    try:
        return map_children(group, "dic_ref", decode_reference)
    except DecodeError as exc:
        raise exc.wrapped(Component.REFERENCE) from exc
