from __future__ import annotations

from enum import StrEnum
from typing import TypeVar

from kanjidic_records.errors import DecodeErrorCode, build_decode_error
from kanjidic_records.tree import TreeNode, required_attribute

KindT = TypeVar("KindT", bound=StrEnum)


def select_kind(node: TreeNode, attribute: str, kinds: type[KindT]) -> KindT:
    """Map a tag-valued attribute onto its closed vocabulary; unknown values are errors."""
    raw = required_attribute(node, attribute)
    for kind in kinds:
        if kind.value == raw:
            return kind
    raise build_decode_error(
        DecodeErrorCode.E_VARIANT_UNRECOGNIZED,
        f"unrecognized {attribute} '{raw}'",
        input_text=raw,
        position=node.position,
    )
