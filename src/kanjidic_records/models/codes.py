from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum, StrEnum


def _validate_range(field_name: str, value: int, minimum: int, maximum: int) -> None:
    if value < minimum or value > maximum:
        raise ValueError(f"{field_name} must be within [{minimum}, {maximum}]")


@dataclass(frozen=True, slots=True)
class Kuten:
    """A plane/row/cell coordinate in one of the JIS X 0208/0212/0213 planes."""

    plane: int
    ku: int
    ten: int

    def __post_init__(self) -> None:
        _validate_range("kuten plane", self.plane, 1, 2)
        _validate_range("kuten ku", self.ku, 1, 94)
        _validate_range("kuten ten", self.ten, 1, 94)


class MoroSuffix(StrEnum):
    NONE = ""
    X = "X"
    P = "P"
    PX = "PX"


@dataclass(frozen=True, slots=True)
class Moro:
    """An entry in Morohashi's Daikanwajiten."""

    index: int
    suffix: MoroSuffix = MoroSuffix.NONE
    volume: int | None = None
    page: int | None = None


class OneillSuffix(StrEnum):
    NONE = ""
    A = "A"


@dataclass(frozen=True, slots=True)
class Oneill:
    """An entry in P.G. O'Neill's Japanese Names."""

    number: int
    suffix: OneillSuffix = OneillSuffix.NONE


@dataclass(frozen=True, slots=True)
class BusyPeople:
    """A lesson in Japanese for Busy People; ``chapter`` is None for the appendix ("A")."""

    volume: int
    chapter: int | None


class SolidSubpattern(IntEnum):
    TOP_LINE = 1
    BOTTOM_LINE = 2
    THROUGH_LINE = 3
    OTHERS = 4


@dataclass(frozen=True, slots=True)
class SkipHorizontal:
    left: int
    right: int
    kind: str = "horizontal"


@dataclass(frozen=True, slots=True)
class SkipVertical:
    top: int
    bottom: int
    kind: str = "vertical"


@dataclass(frozen=True, slots=True)
class SkipEnclosure:
    exterior: int
    interior: int
    kind: str = "enclosure"


@dataclass(frozen=True, slots=True)
class SkipSolid:
    total_stroke_count: int
    solid_subpattern: SolidSubpattern
    kind: str = "solid"


Skip = SkipHorizontal | SkipVertical | SkipEnclosure | SkipSolid


class MisclassificationKind(StrEnum):
    POSITION = "posn"
    STROKE_COUNT = "stroke_count"
    STROKE_AND_POSITION = "stroke_and_posn"
    STROKE_DIFFERENCE = "stroke_diff"


@dataclass(frozen=True, slots=True)
class SkipMisclassification:
    """A SKIP code that learners commonly arrive at by mistake."""

    kind: MisclassificationKind
    skip: Skip


class Stroke(IntEnum):
    """Four-Corner stroke shape, keyed by its digit."""

    LID = 0
    LINE_HORIZONTAL = 1
    LINE_VERTICAL = 2
    DOT = 3
    CROSS = 4
    SKEWER = 5
    BOX = 6
    ANGLE = 7
    HACHI = 8
    CHIISAI = 9


@dataclass(frozen=True, slots=True)
class FourCorner:
    top_left: Stroke
    top_right: Stroke
    bottom_left: Stroke
    bottom_right: Stroke
    fifth_corner: Stroke | None = None


class ExtremeTop(IntEnum):
    DOT = 1
    TWO_DOTS = 2
    THREE_DOTS = 3
    RECLINER = 4
    EAVES = 5
    TOP_CORNER = 6
    HAT = 7
    HAT_WITH_CHIMNEY = 8
    HORNS = 9
    HORIZONTAL = 10
    TWO_HORIZONTALS = 11
    CROSS = 12
    CROSS_WITH_BAR = 13
    GRASS = 14
    BAMBOO = 15
    TREE_TOP = 16
    EARTH_TOP = 17
    SUN_TOP = 18
    MOUTH_TOP = 19
    VERTICAL = 20
    TWO_VERTICALS = 21
    SCEPTER = 22
    HOOKED_VERTICAL = 23
    STANDING_MAN = 24
    PERSON_LEFT = 25
    KNIFE_TOP = 26
    STRENGTH_TOP = 27
    CLIFF = 28
    DOTTED_CLIFF = 29
    FLAT_ROOF = 30
    CROWN = 31
    BALD = 32
    LID_BOX = 33
    GATE_TOP = 34
    FENCE = 35
    EYE_TOP = 36
    FIELD_TOP = 37
    RAIN_TOP = 38
    WEST_TOP = 39
    LEFT_SLANT = 40
    RIGHT_SLANT = 41
    CROSSED_SLANTS = 42
    EIGHT_TOP = 43
    CLAW = 44
    ANGLE_TOP = 45
    HOOK_TOP = 46
    BOW_TOP = 47
    WOMAN_TOP = 48
    THREAD_TOP = 49


class ExtremeBottom(IntEnum):
    DOT_BOTTOM = 50
    TWO_DOTS_BOTTOM = 51
    FOUR_DOTS = 52
    HEART_BOTTOM = 53
    WATER_BOTTOM = 54
    SMALL = 55
    HORIZONTAL_BOTTOM = 56
    FLOOR = 57
    EARTH_BOTTOM = 58
    MOUNTAIN_BOTTOM = 59
    MOUTH_BOTTOM = 60
    SUN_BOTTOM = 61
    EYE_BOTTOM = 62
    DISH = 63
    BOX_BOTTOM = 64
    VERTICAL_BOTTOM = 65
    HOOKED_BOTTOM = 66
    SCEPTER_BOTTOM = 67
    TREE_BOTTOM = 68
    RICE_BOTTOM = 69
    WOOD_LEGS = 70
    LEGS = 71
    EIGHT_BOTTOM = 72
    STANDING_BOTTOM = 73
    SEAT = 74
    BIG_BOTTOM = 75
    WOMAN_BOTTOM = 76
    CHILD_BOTTOM = 77
    KNIFE_BOTTOM = 78
    STRENGTH_BOTTOM = 79
    LEFT_SLANT_BOTTOM = 80
    RIGHT_SLANT_BOTTOM = 81
    TAIL = 82
    HOOK_BOTTOM = 83
    BOW_BOTTOM = 84
    SWORD_BOTTOM = 85
    INCH = 86
    STOP_BOTTOM = 87
    BIRD_BOTTOM = 88
    SHELL_BOTTOM = 89
    SEE_BOTTOM = 90
    SPEECH_BOTTOM = 91
    GATE_BOTTOM = 92
    THREAD_BOTTOM = 93
    GRAIN_BOTTOM = 94
    FIRE_BOTTOM = 95
    HAND_BOTTOM = 96
    WALK_BOTTOM = 97
    CLOTHES_BOTTOM = 98
    ENCLOSED = 99


@dataclass(frozen=True, slots=True)
class DeRoo:
    """Father Joseph De Roo's extreme-top/extreme-bottom code from "2001 Kanji"."""

    top: ExtremeTop
    bottom: ExtremeBottom


@dataclass(frozen=True, slots=True)
class ShDesc:
    """Spahn-Hadamitzky descriptor, e.g. ``0a7.14``."""

    radical_strokes: int
    radical: str
    other_strokes: int
    sequence: int

    def __post_init__(self) -> None:
        if len(self.radical) != 1 or not ("a" <= self.radical <= "z"):
            raise ValueError("descriptor radical must be a single lowercase letter")
