from __future__ import annotations

import re
from collections.abc import Mapping
from types import MappingProxyType

from kanjidic_records.errors import Component
from kanjidic_records.models import Kunyomi, KunyomiKind, PinYin, Tone

from .numbers import build_format_error, build_unrecognized_error

_PIN_YIN_PATTERN = re.compile(r"([^0-9]+)([0-9])")
_TONES: Mapping[str, Tone] = MappingProxyType({str(tone.value): tone for tone in Tone})
_OKURIGANA_SEPARATOR = "."
_AFFIX_MARKER = "-"


def parse_pin_yin(input_text: str) -> PinYin:
    """Decode a pinyin reading with a trailing tone digit, e.g. ``ya4``."""
    match = _PIN_YIN_PATTERN.fullmatch(input_text)
    if match is None:
        raise build_format_error(
            Component.PIN_YIN, "a romanization followed by a tone digit", input_text
        )
    romanization, raw_tone = match.groups()
    tone = _TONES.get(raw_tone)
    if tone is None:
        raise build_unrecognized_error(Component.PIN_YIN, f"unknown tone '{raw_tone}'", input_text)
    return PinYin(romanization=romanization, tone=tone)


def parse_kunyomi(input_text: str) -> Kunyomi:
    """Decode a kun reading.

    A leading ``-`` marks a suffix reading and a trailing ``-`` a prefix
    reading; a reading marked both ways is treated as a suffix. ``.`` separates
    the stem from its okurigana.
    """
    body = input_text
    kind = KunyomiKind.NORMAL
    if body.endswith(_AFFIX_MARKER):
        body = body[: -len(_AFFIX_MARKER)]
        kind = KunyomiKind.PREFIX
    if body.startswith(_AFFIX_MARKER):
        body = body[len(_AFFIX_MARKER) :]
        kind = KunyomiKind.SUFFIX
    parts = tuple(body.split(_OKURIGANA_SEPARATOR))
    if not all(parts):
        raise build_format_error(
            Component.KUNYOMI, "non-empty reading parts separated by '.'", input_text
        )
    return Kunyomi(okurigana=parts, kind=kind)
