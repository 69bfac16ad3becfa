from __future__ import annotations

import json
from pathlib import Path

import pytest

from kanjidic_records.corpus import decode_document
from kanjidic_records.models import Character
from kanjidic_records.serialize import canonical_record_json, hash_record, record_payload
from kanjidic_records.tree import load_document

pytestmark = pytest.mark.unit

_FIXTURES = Path(__file__).resolve().parents[1] / "fixtures"


def _record() -> Character:
    return decode_document(load_document(_FIXTURES / "kanjidic2_sample.xml")).records[0]


def test_record_payload_is_plain_json_data() -> None:
    payload = record_payload(_record())

    assert payload["literal"] == "亜"
    assert payload["codepoints"] == [
        {"kind": "ucs", "value": 20124},
        {"kind": "jis208", "value": {"plane": 1, "ku": 16, "ten": 1}},
    ]
    assert payload["radicals"] == [
        {"kind": "classical", "radical": 7},
        {"kind": "nelson_c", "radical": 1},
    ]
    assert payload["grade"] == {"kind": "jouyou", "school_year": None}
    assert payload["query_codes"][0] == {
        "kind": "skip",
        "value": {"total_stroke_count": 7, "solid_subpattern": 1, "kind": "solid"},
    }
    assert payload["translations"]["fr"] == ["Asie", "suivant", "sub-", "sous-"]
    assert payload["decomposition"] == []


def test_canonical_json_is_deterministic_and_sorted() -> None:
    first = canonical_record_json(_record())
    second = canonical_record_json(_record())

    assert first == second
    assert json.loads(first) == record_payload(_record())
    assert first.startswith('{"codepoints":')
    assert hash_record(_record()) == hash_record(_record())
    assert len(hash_record(_record())) == 64
