from __future__ import annotations

from collections.abc import Callable
from typing import TypeVar

from kanjidic_records.errors import DecodeError, DecodeErrorCode, build_decode_error
from kanjidic_records.formats.numbers import U32_MAX, parse_uint

from .node import TreeNode

T = TypeVar("T")


def optional_child(node: TreeNode, tag: str) -> TreeNode | None:
    return next(node.children(tag), None)


def required_child(node: TreeNode, tag: str) -> TreeNode:
    child = optional_child(node, tag)
    if child is None:
        raise build_decode_error(
            DecodeErrorCode.E_TREE_CHILD_MISSING,
            f"expected a <{tag}> child of <{node.tag}>",
            position=node.position,
        )
    return child


def required_attribute(node: TreeNode, name: str) -> str:
    value = node.attribute(name)
    if value is None:
        raise build_decode_error(
            DecodeErrorCode.E_TREE_ATTRIBUTE_MISSING,
            f"expected attribute '{name}' on <{node.tag}>",
            position=node.position,
        )
    return value


def required_text(node: TreeNode) -> str:
    value = node.text
    if value is None:
        raise build_decode_error(
            DecodeErrorCode.E_TREE_TEXT_MISSING,
            f"expected text content in <{node.tag}>",
            position=node.position,
        )
    return value


def decode_text(node: TreeNode, parser: Callable[[str], T]) -> T:
    """Run a text-level decoder over the node's text, locating failures at the node."""
    text = required_text(node)
    try:
        return parser(text)
    except DecodeError as exc:
        raise exc.located(node.position) from exc


def text_as_uint(node: TreeNode, *, maximum: int = U32_MAX, minimum: int = 0) -> int:
    return decode_text(node, lambda text: parse_uint(text, maximum=maximum, minimum=minimum))


def attribute_as_uint(
    node: TreeNode,
    name: str,
    *,
    maximum: int = U32_MAX,
    minimum: int = 0,
) -> int | None:
    value = node.attribute(name)
    if value is None:
        return None
    try:
        return parse_uint(value, maximum=maximum, minimum=minimum)
    except DecodeError as exc:
        raise exc.located(node.position) from exc


def map_children(
    node: TreeNode,
    tag: str,
    decoder: Callable[[TreeNode], T],
) -> tuple[T, ...]:
    """Decode every ``tag`` child in document order; the first failure propagates."""
    return tuple(decoder(child) for child in node.children(tag))


def map_required_children(
    node: TreeNode,
    tag: str,
    decoder: Callable[[TreeNode], T],
) -> tuple[T, ...]:
    values = map_children(node, tag, decoder)
    if not values:
        raise build_decode_error(
            DecodeErrorCode.E_TREE_CHILD_MISSING,
            f"expected at least one <{tag}> child of <{node.tag}>",
            position=node.position,
        )
    return values
