from __future__ import annotations

from collections.abc import Callable, Mapping
from types import MappingProxyType

from kanjidic_records.errors import Component, DecodeError
from kanjidic_records.formats import parse_kuten, parse_unicode_scalar
from kanjidic_records.models import Codepoint, CodepointKind, Kuten
from kanjidic_records.tree import TreeNode, decode_text, map_required_children, required_child

from .common import select_kind

CODEPOINT_DECODERS: Mapping[CodepointKind, Callable[[str], int | Kuten]] = MappingProxyType(
    {
        CodepointKind.UNICODE: parse_unicode_scalar,
        CodepointKind.JIS208: parse_kuten,
        CodepointKind.JIS212: parse_kuten,
        CodepointKind.JIS213: parse_kuten,
    }
)


def decode_codepoint(node: TreeNode) -> Codepoint:
    kind = select_kind(node, "cp_type", CodepointKind)
    return Codepoint(kind=kind, value=decode_text(node, CODEPOINT_DECODERS[kind]))


def decode_codepoints(character: TreeNode) -> tuple[Codepoint, ...]:
    try:
        group = required_child(character, "codepoint")
        return map_required_children(group, "cp_value", decode_codepoint)
    except DecodeError as exc:
        raise exc.wrapped(Component.CODEPOINT) from exc
