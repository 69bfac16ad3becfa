from __future__ import annotations

from pathlib import Path

import pytest
from hypothesis import HealthCheck, settings

from kanjidic_records.decomposition import DecompositionTable, load_kradfile
from kanjidic_records.tree import TreeNode, load_document

_FIXTURES = Path(__file__).resolve().parents[1] / "fixtures"

settings.register_profile(
    "kanjidic_records_property_ci",
    derandomize=True,
    max_examples=50,
    deadline=None,
    print_blob=True,
    suppress_health_check=(HealthCheck.too_slow,),
)
settings.load_profile("kanjidic_records_property_ci")


@pytest.fixture(scope="session")
def sample_character() -> TreeNode:
    return next(load_document(_FIXTURES / "kanjidic2_sample.xml").children("character"))


@pytest.fixture(scope="session")
def sample_decompositions() -> DecompositionTable:
    return load_kradfile(_FIXTURES / "kradfile_sample.txt")
