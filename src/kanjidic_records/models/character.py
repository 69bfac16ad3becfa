from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import StrEnum
from types import MappingProxyType

from .codes import (
    BusyPeople,
    DeRoo,
    FourCorner,
    Kuten,
    Moro,
    Oneill,
    ShDesc,
    SkipEnclosure,
    SkipHorizontal,
    SkipMisclassification,
    SkipSolid,
    SkipVertical,
)
from .radicals import KangXi
from .readings import Kunyomi, PinYin

_SKIP_TYPES: tuple[type, ...] = (SkipHorizontal, SkipVertical, SkipEnclosure, SkipSolid)


def _validate_payload(
    owner: str,
    kind: StrEnum,
    value: object,
    payload_types: Mapping[StrEnum, tuple[type, ...]],
) -> None:
    expected = payload_types[kind]
    # bool is an int subclass but never a valid payload.
    if isinstance(value, bool) or not isinstance(value, expected):
        names = ", ".join(payload_type.__name__ for payload_type in expected)
        raise ValueError(f"{owner} '{kind.value}' payload must be one of: {names}")


class CodepointKind(StrEnum):
    UNICODE = "ucs"
    JIS208 = "jis208"
    JIS212 = "jis212"
    JIS213 = "jis213"


_CODEPOINT_PAYLOADS: Mapping[StrEnum, tuple[type, ...]] = MappingProxyType(
    {
        CodepointKind.UNICODE: (int,),
        CodepointKind.JIS208: (Kuten,),
        CodepointKind.JIS212: (Kuten,),
        CodepointKind.JIS213: (Kuten,),
    }
)


@dataclass(frozen=True, slots=True)
class Codepoint:
    kind: CodepointKind
    value: int | Kuten

    def __post_init__(self) -> None:
        _validate_payload("codepoint", self.kind, self.value, _CODEPOINT_PAYLOADS)


class RadicalKind(StrEnum):
    CLASSICAL = "classical"
    NELSON = "nelson_c"


@dataclass(frozen=True, slots=True)
class Radical:
    kind: RadicalKind
    radical: KangXi


class GradeKind(StrEnum):
    KYOUIKU = "kyouiku"
    JOUYOU = "jouyou"
    JINMEIYOU = "jinmeiyou"
    JINMEIYOU_JOUYOU_VARIANT = "jinmeiyou_jouyou_variant"


@dataclass(frozen=True, slots=True)
class Grade:
    """School grade; only Kyouiku kanji carry the year (1-6) they are taught in."""

    kind: GradeKind
    school_year: int | None = None

    def __post_init__(self) -> None:
        if self.kind is GradeKind.KYOUIKU:
            if self.school_year is None or not 1 <= self.school_year <= 6:
                raise ValueError("kyouiku grade requires a school_year within [1, 6]")
        elif self.school_year is not None:
            raise ValueError(f"grade '{self.kind.value}' does not carry a school_year")


@dataclass(frozen=True, slots=True)
class StrokeCount:
    accepted: int
    miscounts: tuple[int, ...] = ()


class VariantKind(StrEnum):
    JIS208 = "jis208"
    JIS212 = "jis212"
    JIS213 = "jis213"
    UNICODE = "ucs"
    DE_ROO = "deroo"
    HALPERN = "njecd"
    SPAHN_HADAMITZKY = "s_h"
    NELSON = "nelson_c"
    ONEILL = "oneill"


_VARIANT_PAYLOADS: Mapping[StrEnum, tuple[type, ...]] = MappingProxyType(
    {
        VariantKind.JIS208: (Kuten,),
        VariantKind.JIS212: (Kuten,),
        VariantKind.JIS213: (Kuten,),
        VariantKind.UNICODE: (int,),
        VariantKind.DE_ROO: (DeRoo,),
        VariantKind.HALPERN: (int,),
        VariantKind.SPAHN_HADAMITZKY: (ShDesc,),
        VariantKind.NELSON: (int,),
        VariantKind.ONEILL: (Oneill,),
    }
)


@dataclass(frozen=True, slots=True)
class Variant:
    """A cross-reference to a variant character, or an alternative index of this one."""

    kind: VariantKind
    value: Kuten | int | DeRoo | ShDesc | Oneill

    def __post_init__(self) -> None:
        _validate_payload("variant", self.kind, self.value, _VARIANT_PAYLOADS)


class ReferenceKind(StrEnum):
    NELSON_CLASSIC = "nelson_c"
    NELSON_NEW = "nelson_n"
    NJECD = "halpern_njecd"
    KKD = "halpern_kkd"
    KKLD = "halpern_kkld"
    KKLD_2ED = "halpern_kkld_2ed"
    HEISIG = "heisig"
    HEISIG6 = "heisig6"
    GAKKEN = "gakken"
    ONEILL_NAMES = "oneill_names"
    ONEILL_KK = "oneill_kk"
    MORO = "moro"
    HENSHALL = "henshall"
    SH_KK = "sh_kk"
    SH_KK2 = "sh_kk2"
    SAKADE = "sakade"
    JF_CARDS = "jf_cards"
    HENSHALL3 = "henshall3"
    TUTTLE_CARDS = "tutt_cards"
    CROWLEY = "crowley"
    KANJI_IN_CONTEXT = "kanji_in_context"
    BUSY_PEOPLE = "busy_people"
    KODANSHA_COMPACT = "kodansha_compact"
    MANIETTE = "maniette"


_STRUCTURED_REFERENCE_PAYLOADS: Mapping[ReferenceKind, type] = MappingProxyType(
    {
        ReferenceKind.ONEILL_NAMES: Oneill,
        ReferenceKind.MORO: Moro,
        ReferenceKind.BUSY_PEOPLE: BusyPeople,
    }
)
_REFERENCE_PAYLOADS: Mapping[StrEnum, tuple[type, ...]] = MappingProxyType(
    {kind: (_STRUCTURED_REFERENCE_PAYLOADS.get(kind, int),) for kind in ReferenceKind}
)


@dataclass(frozen=True, slots=True)
class Reference:
    """An index into one of the reference books KANJIDIC tracks."""

    kind: ReferenceKind
    value: int | Oneill | Moro | BusyPeople

    def __post_init__(self) -> None:
        _validate_payload("reference", self.kind, self.value, _REFERENCE_PAYLOADS)


class QueryCodeKind(StrEnum):
    SKIP = "skip"
    SPAHN_HADAMITZKY = "sh_desc"
    FOUR_CORNER = "four_corner"
    DE_ROO = "deroo"
    SKIP_MISCLASSIFICATION = "skip_misclass"


_QUERY_CODE_PAYLOADS: Mapping[StrEnum, tuple[type, ...]] = MappingProxyType(
    {
        QueryCodeKind.SKIP: _SKIP_TYPES,
        QueryCodeKind.SPAHN_HADAMITZKY: (ShDesc,),
        QueryCodeKind.FOUR_CORNER: (FourCorner,),
        QueryCodeKind.DE_ROO: (DeRoo,),
        QueryCodeKind.SKIP_MISCLASSIFICATION: (SkipMisclassification,),
    }
)


@dataclass(frozen=True, slots=True)
class QueryCode:
    kind: QueryCodeKind
    value: (
        SkipHorizontal
        | SkipVertical
        | SkipEnclosure
        | SkipSolid
        | ShDesc
        | FourCorner
        | DeRoo
        | SkipMisclassification
    )

    def __post_init__(self) -> None:
        _validate_payload("query code", self.kind, self.value, _QUERY_CODE_PAYLOADS)


class ReadingKind(StrEnum):
    PIN_YIN = "pinyin"
    KOREAN_ROMANIZED = "korean_r"
    KOREAN_HANGUL = "korean_h"
    VIETNAM = "vietnam"
    ONYOMI = "ja_on"
    KUNYOMI = "ja_kun"


_READING_PAYLOADS: Mapping[StrEnum, tuple[type, ...]] = MappingProxyType(
    {
        ReadingKind.PIN_YIN: (PinYin,),
        ReadingKind.KOREAN_ROMANIZED: (str,),
        ReadingKind.KOREAN_HANGUL: (str,),
        ReadingKind.VIETNAM: (str,),
        ReadingKind.ONYOMI: (str,),
        ReadingKind.KUNYOMI: (Kunyomi,),
    }
)


@dataclass(frozen=True, slots=True)
class Reading:
    kind: ReadingKind
    value: str | PinYin | Kunyomi

    def __post_init__(self) -> None:
        _validate_payload("reading", self.kind, self.value, _READING_PAYLOADS)


@dataclass(frozen=True, slots=True)
class Header:
    file_version: int
    database_version: str
    date_of_creation: str


def _freeze_translations(
    translations: Mapping[str, tuple[str, ...]],
) -> Mapping[str, tuple[str, ...]]:
    frozen: dict[str, tuple[str, ...]] = {}
    for language, glosses in translations.items():
        if not language:
            raise ValueError("translation language must be non-empty")
        frozen[language] = tuple(glosses)
    return MappingProxyType(frozen)


@dataclass(frozen=True, slots=True)
class Character:
    """One fully decoded KANJIDIC character entry."""

    literal: str
    codepoints: tuple[Codepoint, ...]
    radicals: tuple[Radical, ...]
    stroke_counts: StrokeCount
    query_codes: tuple[QueryCode, ...]
    grade: Grade | None = None
    variants: tuple[Variant, ...] = ()
    frequency: int | None = None
    radical_names: tuple[str, ...] = ()
    jlpt: int | None = None
    references: tuple[Reference, ...] = ()
    readings: tuple[Reading, ...] = ()
    translations: Mapping[str, tuple[str, ...]] = field(
        default_factory=lambda: MappingProxyType({})
    )
    nanori: tuple[str, ...] = ()
    decomposition: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if len(self.literal) != 1:
            raise ValueError("character literal must be exactly one character")
        if not self.codepoints:
            raise ValueError(f"character '{self.literal}' requires at least one codepoint")
        if not self.radicals:
            raise ValueError(f"character '{self.literal}' requires at least one radical")
        if not self.query_codes:
            raise ValueError(f"character '{self.literal}' requires at least one query code")
        if self.jlpt is not None and not 1 <= self.jlpt <= 4:
            raise ValueError("jlpt level must be within [1, 4]")
        object.__setattr__(self, "translations", _freeze_translations(self.translations))

    def __hash__(self) -> int:
        return hash(
            (
                self.literal,
                self.codepoints,
                self.radicals,
                self.stroke_counts,
                self.query_codes,
                self.grade,
                self.variants,
                self.frequency,
                self.radical_names,
                self.jlpt,
                self.references,
                self.readings,
                frozenset(self.translations.items()),
                self.nanori,
                self.decomposition,
            )
        )
