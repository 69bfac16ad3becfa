from kanjidic_records.position import NodePosition

from .accessors import (
    attribute_as_uint,
    decode_text,
    map_children,
    map_required_children,
    optional_child,
    required_attribute,
    required_child,
    required_text,
    text_as_uint,
)
from .node import ElementTreeNode, TreeNode, load_document, parse_document

__all__ = [
    "ElementTreeNode",
    "NodePosition",
    "TreeNode",
    "attribute_as_uint",
    "decode_text",
    "load_document",
    "map_children",
    "map_required_children",
    "optional_child",
    "parse_document",
    "required_attribute",
    "required_child",
    "required_text",
    "text_as_uint",
]
