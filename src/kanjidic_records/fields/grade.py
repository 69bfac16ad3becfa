from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from kanjidic_records.errors import Component, DecodeError, DecodeErrorCode, build_decode_error
from kanjidic_records.formats.numbers import U8_MAX
from kanjidic_records.models import Grade, GradeKind
from kanjidic_records.tree import TreeNode, optional_child, required_text, text_as_uint

_NAMED_GRADES: Mapping[int, GradeKind] = MappingProxyType(
    {
        8: GradeKind.JOUYOU,
        9: GradeKind.JINMEIYOU,
        10: GradeKind.JINMEIYOU_JOUYOU_VARIANT,
    }
)
_KYOUIKU_YEARS = range(1, 7)


def decode_grade(node: TreeNode) -> Grade:
    """Decode a ``<grade>`` node.

    1-6 are the Kyouiku school years, 8 general-use Jouyou, 9 Jinmeiyou and
    10 a Jinmeiyou variant of a Jouyou kanji. Text that is not a number fails
    as a malformed scalar; any other number is an unrecognized grade.
    """
    level = text_as_uint(node, maximum=U8_MAX)
    if level in _KYOUIKU_YEARS:
        return Grade(kind=GradeKind.KYOUIKU, school_year=level)
    kind = _NAMED_GRADES.get(level)
    if kind is None:
        raise build_decode_error(
            DecodeErrorCode.E_VARIANT_UNRECOGNIZED,
            f"grade {level} is not a recognized grade level",
            input_text=required_text(node),
            position=node.position,
        )
    return Grade(kind=kind)


def decode_optional_grade(misc: TreeNode) -> Grade | None:
    node = optional_child(misc, "grade")
    if node is None:
        return None
    try:
        return decode_grade(node)
    except DecodeError as exc:
        raise exc.wrapped(Component.GRADE) from exc
