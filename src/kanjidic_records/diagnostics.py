from __future__ import annotations

from collections.abc import Iterable, Mapping
from types import MappingProxyType

from pydantic import BaseModel, ConfigDict, Field, model_validator

from kanjidic_records.errors import (
    ERROR_CATEGORY_BY_CODE,
    Component,
    DecodeError,
    DecodeErrorCode,
    ErrorCategory,
)

SUGGESTED_ACTION_BY_CATEGORY: Mapping[ErrorCategory, str] = MappingProxyType(
    {
        ErrorCategory.MISSING_STRUCTURE: "add the missing element, attribute or text to the record",
        ErrorCategory.MALFORMED_SCALAR: "correct the numeric or character value",
        ErrorCategory.UNRECOGNIZED_VARIANT: "use a value from the scheme's vocabulary",
        ErrorCategory.MALFORMED_FORMAT: "correct the code to match its notation",
    }
)


class DecodeDiagnostic(BaseModel):
    """Serializable report of one record that could not be decoded."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    code: DecodeErrorCode
    category: ErrorCategory
    message: str = Field(min_length=1)
    suggested_action: str = Field(min_length=1)
    components: tuple[Component, ...] = ()
    position: str | None = None
    input_text: str | None = None
    record_index: int = Field(ge=0)
    literal: str | None = None

    @model_validator(mode="after")
    def _validate_category(self) -> DecodeDiagnostic:
        if ERROR_CATEGORY_BY_CODE[self.code] is not self.category:
            raise ValueError(f"category '{self.category}' does not match code '{self.code}'")
        return self


def build_decode_diagnostic(
    error: DecodeError,
    *,
    record_index: int,
    literal: str | None = None,
) -> DecodeDiagnostic:
    detail = error.detail
    return DecodeDiagnostic(
        code=detail.code,
        category=detail.category,
        message=detail.message,
        suggested_action=SUGGESTED_ACTION_BY_CATEGORY[detail.category],
        components=error.components,
        position=None if detail.position is None else str(detail.position),
        input_text=detail.input_text,
        record_index=record_index,
        literal=literal,
    )


def diagnostic_sort_key(diagnostic: DecodeDiagnostic) -> tuple[int, str, str, str]:
    return (
        diagnostic.record_index,
        diagnostic.position or "",
        diagnostic.code,
        diagnostic.message,
    )


def sort_diagnostics(diagnostics: Iterable[DecodeDiagnostic]) -> list[DecodeDiagnostic]:
    return sorted(diagnostics, key=diagnostic_sort_key)
