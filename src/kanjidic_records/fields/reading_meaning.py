from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from kanjidic_records.errors import Component, DecodeError
from kanjidic_records.formats import parse_kunyomi, parse_pin_yin
from kanjidic_records.models import Kunyomi, PinYin, Reading, ReadingKind
from kanjidic_records.tree import (
    TreeNode,
    decode_text,
    map_children,
    optional_child,
    required_child,
    required_text,
)

from .common import select_kind

DEFAULT_LANGUAGE = "en"

READING_DECODERS: Mapping[ReadingKind, Callable[[str], PinYin | Kunyomi]] = MappingProxyType(
    {
        ReadingKind.PIN_YIN: parse_pin_yin,
        ReadingKind.KUNYOMI: parse_kunyomi,
    }
)


@dataclass(frozen=True, slots=True)
class ReadingMeaning:
    readings: tuple[Reading, ...] = ()
    translations: Mapping[str, tuple[str, ...]] = field(
        default_factory=lambda: MappingProxyType({})
    )
    nanori: tuple[str, ...] = ()


def decode_reading(node: TreeNode) -> Reading:
    kind = select_kind(node, "r_type", ReadingKind)
    decoder = READING_DECODERS.get(kind)
    if decoder is None:
        return Reading(kind=kind, value=required_text(node))
    return Reading(kind=kind, value=decode_text(node, decoder))


def decode_translations(rmgroup: TreeNode) -> Mapping[str, tuple[str, ...]]:
    """Group ``<meaning>`` glosses by language, keeping document order within each."""
    glosses: dict[str, list[str]] = {}
    for node in rmgroup.children("meaning"):
        language = node.attribute("m_lang") or DEFAULT_LANGUAGE
        glosses.setdefault(language, []).append(required_text(node))
    return MappingProxyType({language: tuple(texts) for language, texts in glosses.items()})


def _decode_rmgroup(reading_meaning: TreeNode) -> ReadingMeaning:
    rmgroup = required_child(reading_meaning, "rmgroup")
    try:
        readings = map_children(rmgroup, "reading", decode_reading)
    except DecodeError as exc:
        raise exc.wrapped(Component.READING) from exc
    try:
        translations = decode_translations(rmgroup)
    except DecodeError as exc:
        raise exc.wrapped(Component.TRANSLATION) from exc
    try:
        nanori = map_children(reading_meaning, "nanori", required_text)
    except DecodeError as exc:
        raise exc.wrapped(Component.NANORI) from exc
    return ReadingMeaning(readings=readings, translations=translations, nanori=nanori)


def decode_reading_meaning(character: TreeNode) -> ReadingMeaning:
    """A character without ``<reading_meaning>`` has no readings, glosses or nanori."""
    node = optional_child(character, "reading_meaning")
    if node is None:
        return ReadingMeaning()
    try:
        return _decode_rmgroup(node)
    except DecodeError as exc:
        raise exc.wrapped(Component.READING_MEANING) from exc
