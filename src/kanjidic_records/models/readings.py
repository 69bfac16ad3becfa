from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum, StrEnum


class Tone(IntEnum):
    """Mandarin tone, valued by the digit KANJIDIC appends to a pinyin reading."""

    HIGH = 1
    RISING = 2
    LOW = 3
    FALLING = 4
    NEUTRAL = 5


@dataclass(frozen=True, slots=True)
class PinYin:
    romanization: str
    tone: Tone

    def __post_init__(self) -> None:
        if not self.romanization:
            raise ValueError("pinyin romanization must be non-empty")


class KunyomiKind(StrEnum):
    NORMAL = "normal"
    PREFIX = "prefix"
    SUFFIX = "suffix"


@dataclass(frozen=True, slots=True)
class Kunyomi:
    """A Japanese reading split at its okurigana boundary (``つ.ぐ`` -> ``("つ", "ぐ")``)."""

    okurigana: tuple[str, ...]
    kind: KunyomiKind = KunyomiKind.NORMAL

    def __post_init__(self) -> None:
        if not self.okurigana:
            raise ValueError("kunyomi must have at least one part")
        for part in self.okurigana:
            if not part:
                raise ValueError("kunyomi parts must be non-empty")
