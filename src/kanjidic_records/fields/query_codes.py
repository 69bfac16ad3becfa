from __future__ import annotations

from collections.abc import Callable, Mapping
from types import MappingProxyType

from kanjidic_records.errors import Component, DecodeError, DecodeErrorCode, build_decode_error
from kanjidic_records.formats import parse_de_roo, parse_four_corner, parse_sh_desc, parse_skip
from kanjidic_records.models import (
    DeRoo,
    FourCorner,
    MisclassificationKind,
    QueryCode,
    QueryCodeKind,
    ShDesc,
    Skip,
    SkipMisclassification,
)
from kanjidic_records.tree import TreeNode, decode_text, map_required_children, required_child

from .common import select_kind

QUERY_CODE_DECODERS: Mapping[QueryCodeKind, Callable[[str], Skip | ShDesc | FourCorner | DeRoo]] = (
    MappingProxyType(
        {
            QueryCodeKind.SKIP: parse_skip,
            QueryCodeKind.SPAHN_HADAMITZKY: parse_sh_desc,
            QueryCodeKind.FOUR_CORNER: parse_four_corner,
            QueryCodeKind.DE_ROO: parse_de_roo,
        }
    )
)


def decode_query_code(node: TreeNode) -> QueryCode:
    """Decode a ``<q_code>``; a SKIP code with ``skip_misclass`` is a misclassification."""
    kind = select_kind(node, "qc_type", QueryCodeKind)
    decoder = QUERY_CODE_DECODERS.get(kind)
    if decoder is None:
        # misclassifications are only spelled through the skip_misclass attribute
        raise build_decode_error(
            DecodeErrorCode.E_VARIANT_UNRECOGNIZED,
            f"unrecognized qc_type '{kind.value}'",
            input_text=kind.value,
            position=node.position,
        )
    if kind is QueryCodeKind.SKIP and node.attribute("skip_misclass") is not None:
        misclassification = select_kind(node, "skip_misclass", MisclassificationKind)
        return QueryCode(
            kind=QueryCodeKind.SKIP_MISCLASSIFICATION,
            value=SkipMisclassification(kind=misclassification, skip=decode_text(node, parse_skip)),
        )
    return QueryCode(kind=kind, value=decode_text(node, decoder))


def decode_query_codes(character: TreeNode) -> tuple[QueryCode, ...]:
    try:
        group = required_child(character, "query_code")
        return map_required_children(group, "q_code", decode_query_code)
    except DecodeError as exc:
        raise exc.wrapped(Component.QUERY_CODE) from exc
