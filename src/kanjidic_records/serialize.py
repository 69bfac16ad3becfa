from __future__ import annotations

import hashlib
import json
from collections.abc import Mapping
from dataclasses import fields, is_dataclass
from enum import Enum, IntEnum
from typing import cast

from kanjidic_records.models import Character, Header


def _payload_value(value: object) -> object:
    if isinstance(value, IntEnum):
        return int(value)
    if isinstance(value, Enum):
        return value.value
    if is_dataclass(value) and not isinstance(value, type):
        return {item.name: _payload_value(getattr(value, item.name)) for item in fields(value)}
    if isinstance(value, Mapping):
        return {str(key): _payload_value(item) for key, item in value.items()}
    if isinstance(value, tuple | list):
        return [_payload_value(item) for item in value]
    return value


def record_payload(character: Character) -> dict[str, object]:
    """Plain JSON-ready view of a record: enums by value, tuples as lists."""
    return cast(dict[str, object], _payload_value(character))


def header_payload(header: Header) -> dict[str, object]:
    return {
        "database_version": header.database_version,
        "date_of_creation": header.date_of_creation,
        "file_version": header.file_version,
    }


def canonical_record_json(character: Character) -> str:
    return json.dumps(
        record_payload(character),
        sort_keys=True,
        separators=(",", ":"),
        ensure_ascii=True,
        allow_nan=False,
    )


def hash_record(character: Character, algo: str = "sha256") -> str:
    hasher = hashlib.new(algo)
    hasher.update(canonical_record_json(character).encode("utf-8"))
    return hasher.hexdigest()
