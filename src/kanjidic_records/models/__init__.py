from .character import (
    Character,
    Codepoint,
    CodepointKind,
    Grade,
    GradeKind,
    Header,
    QueryCode,
    QueryCodeKind,
    Radical,
    RadicalKind,
    Reading,
    ReadingKind,
    Reference,
    ReferenceKind,
    StrokeCount,
    Variant,
    VariantKind,
)
from .codes import (
    BusyPeople,
    DeRoo,
    ExtremeBottom,
    ExtremeTop,
    FourCorner,
    Kuten,
    MisclassificationKind,
    Moro,
    MoroSuffix,
    Oneill,
    OneillSuffix,
    ShDesc,
    Skip,
    SkipEnclosure,
    SkipHorizontal,
    SkipMisclassification,
    SkipSolid,
    SkipVertical,
    SolidSubpattern,
    Stroke,
)
from .radicals import KangXi
from .readings import Kunyomi, KunyomiKind, PinYin, Tone

__all__ = [
    "BusyPeople",
    "Character",
    "Codepoint",
    "CodepointKind",
    "DeRoo",
    "ExtremeBottom",
    "ExtremeTop",
    "FourCorner",
    "Grade",
    "GradeKind",
    "Header",
    "KangXi",
    "Kunyomi",
    "KunyomiKind",
    "Kuten",
    "MisclassificationKind",
    "Moro",
    "MoroSuffix",
    "Oneill",
    "OneillSuffix",
    "PinYin",
    "QueryCode",
    "QueryCodeKind",
    "Radical",
    "RadicalKind",
    "Reading",
    "ReadingKind",
    "Reference",
    "ReferenceKind",
    "ShDesc",
    "Skip",
    "SkipEnclosure",
    "SkipHorizontal",
    "SkipMisclassification",
    "SkipSolid",
    "SkipVertical",
    "SolidSubpattern",
    "Stroke",
    "StrokeCount",
    "Tone",
    "Variant",
    "VariantKind",
]
