from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from kanjidic_records.decomposition import DecompositionTable
from kanjidic_records.errors import DecodeError, DecodeErrorCode
from kanjidic_records.fields import decode_grade
from kanjidic_records.record import decode_character
from kanjidic_records.serialize import canonical_record_json
from kanjidic_records.tree import TreeNode, parse_document

pytestmark = pytest.mark.property

_GRADE_LEVELS = {1, 2, 3, 4, 5, 6, 8, 9, 10}


@given(repeats=st.integers(min_value=2, max_value=4))
def test_decoding_the_same_node_is_deterministic(
    sample_character: TreeNode, sample_decompositions: DecompositionTable, repeats: int
) -> None:
    decoded = [
        decode_character(sample_character, decompositions=sample_decompositions)
        for _ in range(repeats)
    ]

    assert all(record == decoded[0] for record in decoded)
    assert len({canonical_record_json(record) for record in decoded}) == 1


@given(level=st.integers(min_value=0, max_value=255))
def test_grade_levels_outside_the_vocabulary_are_unrecognized(level: int) -> None:
    node = parse_document(f"<grade>{level}</grade>")
    if level in _GRADE_LEVELS:
        decode_grade(node)
        return
    with pytest.raises(DecodeError) as exc_info:
        decode_grade(node)
    assert exc_info.value.code == DecodeErrorCode.E_VARIANT_UNRECOGNIZED
