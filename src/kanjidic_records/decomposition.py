from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from functools import cache
from pathlib import Path
from types import MappingProxyType

KRADFILE_COMMENT = "#"
KRADFILE_SEPARATOR = ":"


class KradfileError(ValueError):
    def __init__(self, code: str, message: str) -> None:
        super().__init__(f"{code}: {message}")
        self.code = code
        self.message = message


@dataclass(frozen=True, slots=True)
class DecompositionTable:
    """Read-only mapping from a character to the radicals it is built from."""

    entries: Mapping[str, tuple[str, ...]] = field(default_factory=lambda: MappingProxyType({}))

    def __post_init__(self) -> None:
        object.__setattr__(
            self,
            "entries",
            MappingProxyType({literal: tuple(parts) for literal, parts in self.entries.items()}),
        )

    def lookup(self, literal: str) -> tuple[str, ...]:
        return self.entries.get(literal, ())

    def __contains__(self, literal: object) -> bool:
        return literal in self.entries

    def __iter__(self) -> Iterator[str]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)


EMPTY_DECOMPOSITIONS = DecompositionTable()


def parse_kradfile(text: str) -> DecompositionTable:
    """Parse KRADFILE lines of the form ``亜 : ｜ 一 口``.

    Blank lines and lines starting with ``#`` are ignored. Radicals keep their
    listed order, duplicates included. A character listed twice keeps its
    first decomposition.
    """
    entries: dict[str, tuple[str, ...]] = {}
    for line_number, raw_line in enumerate(text.splitlines(), start=1):
        line = raw_line.strip()
        if not line or line.startswith(KRADFILE_COMMENT):
            continue
        literal, separator, radicals = line.partition(KRADFILE_SEPARATOR)
        literal = literal.strip()
        if not separator or len(literal) != 1:
            raise KradfileError(
                "E_KRADFILE_LINE_MALFORMED",
                f"line {line_number}: expected '<kanji> : <radical> ...'",
            )
        entries.setdefault(literal, tuple(radicals.split()))
    return DecompositionTable(entries)


@cache
def _load_kradfile_cached(resolved_path: str, encoding: str) -> DecompositionTable:
    path = Path(resolved_path)
    try:
        text = path.read_text(encoding=encoding)
    except OSError as exc:
        raise KradfileError("E_KRADFILE_READ", f"unable to read '{path}': {exc}") from exc
    except UnicodeDecodeError as exc:
        raise KradfileError(
            "E_KRADFILE_ENCODING", f"'{path}' is not valid {encoding}: {exc.reason}"
        ) from exc
    return parse_kradfile(text)


def load_kradfile(path: Path | str, *, encoding: str = "utf-8") -> DecompositionTable:
    return _load_kradfile_cached(str(Path(path).resolve()), encoding)
