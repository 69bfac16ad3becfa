from __future__ import annotations

from dataclasses import dataclass


def _validate_step(tag: str, ordinal: int) -> None:
    if not tag:
        raise ValueError("position tag must be non-empty")
    if ordinal < 0:
        raise ValueError(f"position ordinal for '{tag}' must be >= 0")


@dataclass(frozen=True, slots=True)
class NodePosition:
    """Where a node sits in its document.

    ``path`` is the ancestor chain from the root down to the node itself, each
    step being ``(tag, ordinal)`` where ``ordinal`` counts preceding siblings
    with the same tag.
    """

    path: tuple[tuple[str, int], ...]

    def __post_init__(self) -> None:
        if not self.path:
            raise ValueError("position path must be non-empty")
        for tag, ordinal in self.path:
            _validate_step(tag, ordinal)

    @classmethod
    def root(cls, tag: str) -> NodePosition:
        return cls(((tag, 0),))

    def child(self, tag: str, ordinal: int) -> NodePosition:
        return NodePosition((*self.path, (tag, ordinal)))

    @property
    def tag(self) -> str:
        return self.path[-1][0]

    @property
    def ordinal(self) -> int:
        return self.path[-1][1]

    def __str__(self) -> str:
        return "".join(f"/{tag}[{ordinal}]" for tag, ordinal in self.path)
