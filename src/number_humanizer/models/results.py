"""Results passed between pipeline stages and back to the form.

None of these are persisted: each one lives for a single recompute.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict


class ErrorKind(StrEnum):
    EMPTY_INPUT = "empty_input"
    LEADING_ZERO = "leading_zero"
    NOT_A_NUMBER = "not_a_number"
    NON_POSITIVE = "non_positive"
    TOO_LARGE = "too_large"
    FORMATTING_FAILURE = "formatting_failure"


class FormStatus(StrEnum):
    EMPTY = "empty"
    VALID = "valid"
    INVALID = "invalid"


class ValidationResult(BaseModel):
    """Either ``Ok(value)`` or ``Err(error)``.

    Sanitizer checks succeed without a value; the bounds checker fills it in.
    """

    model_config = ConfigDict(frozen=True)

    value: int | None = None
    error: ErrorKind | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: int | None = None) -> ValidationResult:
        return cls(value=value)

    @classmethod
    def failure(cls, error: ErrorKind) -> ValidationResult:
        return cls(error=error)


class FormattedOutput(BaseModel):
    """Compact and currency renderings of the same value."""

    model_config = ConfigDict(frozen=True)

    compact: str
    currency: str

    @property
    def text(self) -> str:
        return f"{self.compact} | {self.currency}"


class AbbreviatedOutput(BaseModel):
    """Word/suffix abbreviation of a value."""

    model_config = ConfigDict(frozen=True)

    abbreviated: str

    @property
    def text(self) -> str:
        return self.abbreviated


class PipelineResult(BaseModel):
    """Outcome of one pipeline run, ready for display."""

    model_config = ConfigDict(frozen=True)

    status: FormStatus
    output: FormattedOutput | AbbreviatedOutput | None = None
    error: ErrorKind | None = None
    message: str = ""

    @classmethod
    def empty(cls) -> PipelineResult:
        return cls(status=FormStatus.EMPTY)

    @classmethod
    def valid(cls, output: FormattedOutput | AbbreviatedOutput) -> PipelineResult:
        return cls(status=FormStatus.VALID, output=output)

    @classmethod
    def invalid(cls, error: ErrorKind, message: str) -> PipelineResult:
        return cls(status=FormStatus.INVALID, error=error, message=message)
