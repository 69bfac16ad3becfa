from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, replace
from enum import StrEnum
from types import MappingProxyType

from kanjidic_records.position import NodePosition


class ErrorCategory(StrEnum):
    MISSING_STRUCTURE = "missing_structure"
    MALFORMED_SCALAR = "malformed_scalar"
    UNRECOGNIZED_VARIANT = "unrecognized_variant"
    MALFORMED_FORMAT = "malformed_format"


class DecodeErrorCode(StrEnum):
    E_TREE_CHILD_MISSING = "E_TREE_CHILD_MISSING"
    E_TREE_ATTRIBUTE_MISSING = "E_TREE_ATTRIBUTE_MISSING"
    E_TREE_TEXT_MISSING = "E_TREE_TEXT_MISSING"
    E_SCALAR_NOT_A_NUMBER = "E_SCALAR_NOT_A_NUMBER"
    E_SCALAR_OUT_OF_RANGE = "E_SCALAR_OUT_OF_RANGE"
    E_SCALAR_NOT_A_CHARACTER = "E_SCALAR_NOT_A_CHARACTER"
    E_VARIANT_UNRECOGNIZED = "E_VARIANT_UNRECOGNIZED"
    E_FORMAT_MALFORMED = "E_FORMAT_MALFORMED"
    E_FORMAT_SUFFIX_UNKNOWN = "E_FORMAT_SUFFIX_UNKNOWN"


ERROR_CATEGORY_BY_CODE: Mapping[DecodeErrorCode, ErrorCategory] = MappingProxyType(
    {
        DecodeErrorCode.E_TREE_CHILD_MISSING: ErrorCategory.MISSING_STRUCTURE,
        DecodeErrorCode.E_TREE_ATTRIBUTE_MISSING: ErrorCategory.MISSING_STRUCTURE,
        DecodeErrorCode.E_TREE_TEXT_MISSING: ErrorCategory.MISSING_STRUCTURE,
        DecodeErrorCode.E_SCALAR_NOT_A_NUMBER: ErrorCategory.MALFORMED_SCALAR,
        DecodeErrorCode.E_SCALAR_OUT_OF_RANGE: ErrorCategory.MALFORMED_SCALAR,
        DecodeErrorCode.E_SCALAR_NOT_A_CHARACTER: ErrorCategory.MALFORMED_SCALAR,
        DecodeErrorCode.E_VARIANT_UNRECOGNIZED: ErrorCategory.UNRECOGNIZED_VARIANT,
        DecodeErrorCode.E_FORMAT_MALFORMED: ErrorCategory.MALFORMED_FORMAT,
        DecodeErrorCode.E_FORMAT_SUFFIX_UNKNOWN: ErrorCategory.UNRECOGNIZED_VARIANT,
    }
)


class Component(StrEnum):
    """Decoding layer that re-raised an error, outermost first in a chain."""

    CHARACTER = "character"
    HEADER = "header"
    LITERAL = "literal"
    CODEPOINT = "codepoint"
    RADICAL = "radical"
    MISC = "misc"
    GRADE = "grade"
    STROKE_COUNT = "stroke_count"
    VARIANT = "variant"
    FREQUENCY = "frequency"
    RADICAL_NAME = "radical_name"
    JLPT = "jlpt"
    REFERENCE = "reference"
    QUERY_CODE = "query_code"
    READING_MEANING = "reading_meaning"
    READING = "reading"
    TRANSLATION = "translation"
    NANORI = "nanori"
    KUTEN = "kuten"
    UNICODE = "unicode"
    MORO = "moro"
    ONEILL = "oneill"
    BUSY_PEOPLE = "busy_people"
    SKIP = "skip"
    FOUR_CORNER = "four_corner"
    DE_ROO = "de_roo"
    SH_DESC = "sh_desc"
    PIN_YIN = "pin_yin"
    KUNYOMI = "kunyomi"


@dataclass(frozen=True, slots=True)
class DecodeErrorDetail:
    code: str
    message: str
    input_text: str | None = None
    position: NodePosition | None = None

    def __post_init__(self) -> None:
        if not self.code:
            raise ValueError("decode error code must be non-empty")
        if not self.message:
            raise ValueError("decode error message must be non-empty")

    @property
    def category(self) -> ErrorCategory:
        return ERROR_CATEGORY_BY_CODE[DecodeErrorCode(self.code)]


class DecodeError(ValueError):
    def __init__(
        self,
        detail: DecodeErrorDetail,
        components: tuple[Component, ...] = (),
    ) -> None:
        super().__init__(_render(detail, components))
        self.detail = detail
        self.components = components

    def wrapped(
        self,
        component: Component,
        *,
        position: NodePosition | None = None,
    ) -> DecodeError:
        """Return a copy with ``component`` as the outermost layer.

        ``position`` only fills the detail when the failure was raised without
        one (micro-format decoders see text, not nodes).
        """
        located = self.located(position) if position is not None else self
        return DecodeError(located.detail, (component, *located.components))

    def located(self, position: NodePosition) -> DecodeError:
        if self.detail.position is not None:
            return self
        return DecodeError(replace(self.detail, position=position), self.components)

    @property
    def code(self) -> str:
        return self.detail.code

    @property
    def category(self) -> ErrorCategory:
        return self.detail.category

    @property
    def position(self) -> NodePosition | None:
        return self.detail.position


def _render(detail: DecodeErrorDetail, components: tuple[Component, ...]) -> str:
    text = f"{detail.code}: {detail.message}"
    if detail.input_text is not None:
        text = f"{text} (input {detail.input_text!r})"
    if detail.position is not None:
        text = f"{text} at {detail.position}"
    if components:
        chain = " > ".join(component.value for component in components)
        text = f"{chain}: {text}"
    return text


def build_decode_error(
    code: DecodeErrorCode,
    message: str,
    *,
    input_text: str | None = None,
    position: NodePosition | None = None,
    component: Component | None = None,
) -> DecodeError:
    return DecodeError(
        DecodeErrorDetail(
            code=code.value,
            message=message,
            input_text=input_text,
            position=position,
        ),
        () if component is None else (component,),
    )
