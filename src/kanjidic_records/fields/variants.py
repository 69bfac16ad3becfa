from __future__ import annotations

from collections.abc import Callable, Mapping
from types import MappingProxyType

from kanjidic_records.errors import Component, DecodeError
from kanjidic_records.formats import (
    parse_de_roo,
    parse_kuten,
    parse_oneill,
    parse_sh_desc,
    parse_uint,
    parse_unicode_scalar,
)
from kanjidic_records.formats.numbers import U16_MAX
from kanjidic_records.models import DeRoo, Kuten, Oneill, ShDesc, Variant, VariantKind
from kanjidic_records.tree import TreeNode, decode_text, map_children

from .common import select_kind


def _dictionary_index(text: str) -> int:
    return parse_uint(text, maximum=U16_MAX)


VARIANT_DECODERS: Mapping[VariantKind, Callable[[str], Kuten | int | DeRoo | ShDesc | Oneill]] = (
    MappingProxyType(
        {
            VariantKind.JIS208: parse_kuten,
            VariantKind.JIS212: parse_kuten,
            VariantKind.JIS213: parse_kuten,
            VariantKind.UNICODE: parse_unicode_scalar,
            VariantKind.DE_ROO: parse_de_roo,
            VariantKind.HALPERN: _dictionary_index,
            VariantKind.SPAHN_HADAMITZKY: parse_sh_desc,
            VariantKind.NELSON: _dictionary_index,
            VariantKind.ONEILL: parse_oneill,
        }
    )
)


def decode_variant(node: TreeNode) -> Variant:
    kind = select_kind(node, "var_type", VariantKind)
    return Variant(kind=kind, value=decode_text(node, VARIANT_DECODERS[kind]))


def decode_variants(misc: TreeNode) -> tuple[Variant, ...]:
    try:
        return map_children(misc, "variant", decode_variant)
    except DecodeError as exc:
        raise exc.wrapped(Component.VARIANT) from exc
