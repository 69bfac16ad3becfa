from __future__ import annotations

from kanjidic_records.errors import Component, DecodeError
from kanjidic_records.models import KangXi, Radical, RadicalKind
from kanjidic_records.tree import TreeNode, map_required_children, required_child, text_as_uint

from .common import select_kind


def decode_radical(node: TreeNode) -> Radical:
    kind = select_kind(node, "rad_type", RadicalKind)
    index = text_as_uint(node, minimum=min(KangXi), maximum=max(KangXi))
    return Radical(kind=kind, radical=KangXi(index))


def decode_radicals(character: TreeNode) -> tuple[Radical, ...]:
    try:
        group = required_child(character, "radical")
        return map_required_children(group, "rad_value", decode_radical)
    except DecodeError as exc:
        raise exc.wrapped(Component.RADICAL) from exc
