from __future__ import annotations

import re
from collections.abc import Mapping
from types import MappingProxyType

from kanjidic_records.errors import Component, DecodeError, DecodeErrorCode, build_decode_error
from kanjidic_records.models import BusyPeople, MoroSuffix, Oneill, OneillSuffix

from .numbers import U8_MAX, U16_MAX, build_format_error, parse_uint

# Digits first, then any run of ASCII letters; the letters are vetted per book.
_INDEX_PATTERN = re.compile(r"([0-9]+)([A-Za-z]*)", flags=re.ASCII)
_BUSY_PEOPLE_PATTERN = re.compile(r"([0-9]+)\.([0-9]+|A)", flags=re.ASCII)

MORO_SUFFIXES: Mapping[str, MoroSuffix] = MappingProxyType(
    {suffix.value: suffix for suffix in MoroSuffix}
)
ONEILL_SUFFIXES: Mapping[str, OneillSuffix] = MappingProxyType(
    {suffix.value: suffix for suffix in OneillSuffix}
)


def _split_index(component: Component, input_text: str) -> tuple[int, str]:
    match = _INDEX_PATTERN.fullmatch(input_text)
    if match is None:
        raise build_format_error(
            component, "an index number with an optional letter suffix", input_text
        )
    digits, suffix = match.groups()
    return parse_uint(digits, maximum=U16_MAX, component=component), suffix


def _unknown_suffix(component: Component, suffix: str, input_text: str) -> DecodeError:
    return build_decode_error(
        DecodeErrorCode.E_FORMAT_SUFFIX_UNKNOWN,
        f"unknown index suffix '{suffix}'",
        input_text=input_text,
        component=component,
    )


def parse_moro_index(input_text: str) -> tuple[int, MoroSuffix]:
    """Decode the text of a Morohashi reference, e.g. ``272`` or ``1234PX``."""
    index, raw_suffix = _split_index(Component.MORO, input_text)
    suffix = MORO_SUFFIXES.get(raw_suffix)
    if suffix is None:
        raise _unknown_suffix(Component.MORO, raw_suffix, input_text)
    return index, suffix


def format_moro_index(index: int, suffix: MoroSuffix) -> str:
    return f"{index}{suffix.value}"


def parse_oneill(input_text: str) -> Oneill:
    number, raw_suffix = _split_index(Component.ONEILL, input_text)
    suffix = ONEILL_SUFFIXES.get(raw_suffix)
    if suffix is None:
        raise _unknown_suffix(Component.ONEILL, raw_suffix, input_text)
    return Oneill(number=number, suffix=suffix)


def format_oneill(oneill: Oneill) -> str:
    return f"{oneill.number}{oneill.suffix.value}"


def parse_busy_people(input_text: str) -> BusyPeople:
    match = _BUSY_PEOPLE_PATTERN.fullmatch(input_text)
    if match is None:
        raise build_format_error(
            Component.BUSY_PEOPLE, "'volume.chapter' with a chapter number or 'A'", input_text
        )
    volume, chapter = match.groups()
    return BusyPeople(
        volume=parse_uint(volume, maximum=U8_MAX, component=Component.BUSY_PEOPLE),
        chapter=(
            None
            if chapter == "A"
            else parse_uint(chapter, maximum=U8_MAX, component=Component.BUSY_PEOPLE)
        ),
    )
