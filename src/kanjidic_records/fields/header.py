from __future__ import annotations

from kanjidic_records.errors import Component, DecodeError
from kanjidic_records.models import Header
from kanjidic_records.tree import TreeNode, optional_child, required_child, required_text, text_as_uint


def decode_header(root: TreeNode) -> Header | None:
    node = optional_child(root, "header")
    if node is None:
        return None
    try:
        return Header(
            file_version=text_as_uint(required_child(node, "file_version")),
            database_version=required_text(required_child(node, "database_version")),
            date_of_creation=required_text(required_child(node, "date_of_creation")),
        )
    except DecodeError as exc:
        raise exc.wrapped(Component.HEADER) from exc
