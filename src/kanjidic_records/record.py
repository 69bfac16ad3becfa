from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from kanjidic_records.decomposition import EMPTY_DECOMPOSITIONS, DecompositionTable
from kanjidic_records.errors import Component, DecodeError, DecodeErrorCode, build_decode_error
from kanjidic_records.fields import (
    decode_codepoints,
    decode_frequency,
    decode_jlpt,
    decode_optional_grade,
    decode_query_codes,
    decode_radical_names,
    decode_radicals,
    decode_reading_meaning,
    decode_references,
    decode_stroke_counts,
    decode_variants,
)
from kanjidic_records.models import (
    Character,
    Codepoint,
    Grade,
    QueryCode,
    Radical,
    Reading,
    Reference,
    StrokeCount,
    Variant,
)
from kanjidic_records.tree import TreeNode, required_child, required_text


@dataclass(slots=True)
class CharacterBuilder:
    """Mutable staging area for one record; ``build`` consumes it exactly once."""

    literal: str | None = None
    codepoints: tuple[Codepoint, ...] = ()
    radicals: tuple[Radical, ...] = ()
    grade: Grade | None = None
    stroke_counts: StrokeCount | None = None
    variants: tuple[Variant, ...] = ()
    frequency: int | None = None
    radical_names: tuple[str, ...] = ()
    jlpt: int | None = None
    references: tuple[Reference, ...] = ()
    query_codes: tuple[QueryCode, ...] = ()
    readings: tuple[Reading, ...] = ()
    translations: Mapping[str, tuple[str, ...]] = field(
        default_factory=lambda: MappingProxyType({})
    )
    nanori: tuple[str, ...] = ()
    decomposition: tuple[str, ...] = ()
    _consumed: bool = field(default=False, init=False, repr=False)

    def build(self) -> Character:
        if self._consumed:
            raise RuntimeError("character builder has already been consumed")
        if self.literal is None:
            raise ValueError("character builder requires a literal")
        if self.stroke_counts is None:
            raise ValueError(f"character '{self.literal}' requires a stroke count")
        self._consumed = True
        return Character(
            literal=self.literal,
            codepoints=self.codepoints,
            radicals=self.radicals,
            stroke_counts=self.stroke_counts,
            query_codes=self.query_codes,
            grade=self.grade,
            variants=self.variants,
            frequency=self.frequency,
            radical_names=self.radical_names,
            jlpt=self.jlpt,
            references=self.references,
            readings=self.readings,
            translations=self.translations,
            nanori=self.nanori,
            decomposition=self.decomposition,
        )


def decode_literal(character: TreeNode) -> str:
    try:
        node = required_child(character, "literal")
        text = required_text(node)
        if len(text) != 1:
            raise build_decode_error(
                DecodeErrorCode.E_SCALAR_NOT_A_CHARACTER,
                "literal must be exactly one character",
                input_text=text,
                position=node.position,
            )
    except DecodeError as exc:
        raise exc.wrapped(Component.LITERAL) from exc
    return text


def _stage_misc(builder: CharacterBuilder, character: TreeNode) -> None:
    try:
        misc = required_child(character, "misc")
    except DecodeError as exc:
        raise exc.wrapped(Component.MISC) from exc
    builder.grade = decode_optional_grade(misc)
    builder.stroke_counts = decode_stroke_counts(misc)
    builder.variants = decode_variants(misc)
    builder.frequency = decode_frequency(misc)
    builder.radical_names = decode_radical_names(misc)
    builder.jlpt = decode_jlpt(misc)


def decode_character(
    node: TreeNode,
    *,
    decompositions: DecompositionTable = EMPTY_DECOMPOSITIONS,
) -> Character:
    """Decode one ``<character>`` node into a record.

    Field groups are decoded in document-schema order and the first failure
    is re-raised tagged with the character component; no partial record is
    returned.
    """
    builder = CharacterBuilder()
    try:
        builder.literal = decode_literal(node)
        builder.codepoints = decode_codepoints(node)
        builder.radicals = decode_radicals(node)
        _stage_misc(builder, node)
        builder.references = decode_references(node)
        builder.query_codes = decode_query_codes(node)
        reading_meaning = decode_reading_meaning(node)
    except DecodeError as exc:
        raise exc.wrapped(Component.CHARACTER, position=node.position) from exc
    builder.readings = reading_meaning.readings
    builder.translations = reading_meaning.translations
    builder.nanori = reading_meaning.nanori
    builder.decomposition = decompositions.lookup(builder.literal)
    return builder.build()
