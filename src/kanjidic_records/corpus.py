from __future__ import annotations

import logging
from dataclasses import dataclass

from kanjidic_records.decomposition import EMPTY_DECOMPOSITIONS, DecompositionTable
from kanjidic_records.diagnostics import DecodeDiagnostic, build_decode_diagnostic
from kanjidic_records.errors import DecodeError
from kanjidic_records.fields import decode_header
from kanjidic_records.models import Character, Header
from kanjidic_records.record import decode_character
from kanjidic_records.tree import TreeNode, optional_child

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class DecodeReport:
    header: Header | None
    records: tuple[Character, ...]
    diagnostics: tuple[DecodeDiagnostic, ...]
    record_count: int

    @property
    def skipped_count(self) -> int:
        return len(self.diagnostics)

    @property
    def ok(self) -> bool:
        return not self.diagnostics


def _readable_literal(character: TreeNode) -> str | None:
    node = optional_child(character, "literal")
    return None if node is None else node.text


def decode_document(
    root: TreeNode,
    *,
    decompositions: DecompositionTable = EMPTY_DECOMPOSITIONS,
    fail_fast: bool = False,
) -> DecodeReport:
    """Decode every ``<character>`` under a ``<kanjidic2>`` root.

    A record that fails to decode is skipped and reported as a diagnostic,
    unless ``fail_fast`` is set, in which case its error propagates. A
    malformed header always propagates.
    """
    header = decode_header(root)
    records: list[Character] = []
    diagnostics: list[DecodeDiagnostic] = []
    record_count = 0
    for record_index, node in enumerate(root.children("character")):
        record_count += 1
        try:
            character = decode_character(node, decompositions=decompositions)
        except DecodeError as exc:
            if fail_fast:
                raise
            logger.warning("skipping record %d: %s", record_index, exc)
            diagnostics.append(
                build_decode_diagnostic(
                    exc, record_index=record_index, literal=_readable_literal(node)
                )
            )
            continue
        logger.debug("decoded record %d '%s'", record_index, character.literal)
        records.append(character)
    logger.info(
        "decoded %d of %d records (%d skipped)",
        len(records),
        record_count,
        len(diagnostics),
    )
    return DecodeReport(
        header=header,
        records=tuple(records),
        diagnostics=tuple(diagnostics),
        record_count=record_count,
    )
