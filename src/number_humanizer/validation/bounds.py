"""Parse sanitized digit strings and enforce per-pipeline size limits.

The compact/currency form caps the numeric value, the abbreviation form caps
the number of digits. The two policies are kept separate on purpose: each
matches the input box it backs.
"""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from ..models.results import ErrorKind, ValidationResult


class BoundsPolicy(BaseModel):
    """Size limits for one pipeline."""

    model_config = ConfigDict(frozen=True)

    name: str
    max_value: int | None = None
    max_digit_length: int | None = Field(default=None, gt=0)
    # Mirrors the text box maxLength; raw keystrokes are cut to this.
    input_length_cap: int = Field(gt=0)


COMPACT_CURRENCY_BOUNDS = BoundsPolicy(
    name="compact_currency",
    max_value=10**17,
    max_digit_length=17,
    input_length_cap=17,
)

ABBREVIATION_BOUNDS = BoundsPolicy(
    name="abbreviation",
    max_value=None,
    max_digit_length=23,
    input_length_cap=23,
)


def parse_and_bound(digits: str, max_value: int | None, max_digit_length: int | None) -> ValidationResult:
    """Parse ``digits`` to an int and check it against the limits.

    Length is checked before parsing. ``None`` disables a limit.
    """
    if max_digit_length is not None and len(digits) > max_digit_length:
        return ValidationResult.failure(ErrorKind.TOO_LARGE)

    try:
        value = int(digits)
    except ValueError:
        return ValidationResult.failure(ErrorKind.NOT_A_NUMBER)

    if value <= 0:
        return ValidationResult.failure(ErrorKind.NON_POSITIVE)
    if max_value is not None and value > max_value:
        return ValidationResult.failure(ErrorKind.TOO_LARGE)

    return ValidationResult.success(value)


def check_bounds(digits: str, policy: BoundsPolicy) -> ValidationResult:
    """Apply ``parse_and_bound`` with the limits of ``policy``."""
    return parse_and_bound(digits, policy.max_value, policy.max_digit_length)
