from __future__ import annotations

import gzip
import xml.etree.ElementTree as ET
from collections.abc import Iterator
from pathlib import Path
from typing import Protocol, runtime_checkable

from kanjidic_records.position import NodePosition

_GZIP_MAGIC = b"\x1f\x8b"


@runtime_checkable
class TreeNode(Protocol):
    """Read-only view of one element of an already-parsed markup tree."""

    @property
    def tag(self) -> str: ...

    @property
    def position(self) -> NodePosition: ...

    @property
    def text(self) -> str | None: ...

    def children(self, tag: str) -> Iterator[TreeNode]: ...

    def attribute(self, name: str) -> str | None: ...


class ElementTreeNode:
    __slots__ = ("_element", "_position")

    def __init__(self, element: ET.Element, position: NodePosition | None = None) -> None:
        self._element = element
        self._position = position if position is not None else NodePosition.root(element.tag)

    @property
    def tag(self) -> str:
        return self._element.tag

    @property
    def position(self) -> NodePosition:
        return self._position

    @property
    def text(self) -> str | None:
        # Empty elements report None, matching an absent text node.
        return self._element.text or None

    def children(self, tag: str) -> Iterator[ElementTreeNode]:
        for ordinal, element in enumerate(self._element.findall(tag)):
            yield ElementTreeNode(element, self._position.child(tag, ordinal))

    def attribute(self, name: str) -> str | None:
        return self._element.get(name)

    def __repr__(self) -> str:
        return f"ElementTreeNode({self._position})"


def parse_document(data: str | bytes) -> ElementTreeNode:
    return ElementTreeNode(ET.fromstring(data))


def load_document(path: str | Path) -> ElementTreeNode:
    raw = Path(path).read_bytes()
    if raw.startswith(_GZIP_MAGIC):
        raw = gzip.decompress(raw)
    return parse_document(raw)
