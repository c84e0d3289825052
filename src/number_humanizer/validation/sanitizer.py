"""Strip typed input down to digits and reject malformed digit strings."""
from __future__ import annotations
import re

from ..models.results import ErrorKind, ValidationResult

_NON_DIGIT = re.compile(r'[^0-9]')


def sanitize(raw: str) -> str:
    """Remove every character that is not an ASCII digit."""
    return _NON_DIGIT.sub('', raw)


def validate_digit_string(digits: str) -> ValidationResult:
    """Reject empty strings and any leading zero, including a lone "0"."""
    if not digits:
        return ValidationResult.failure(ErrorKind.EMPTY_INPUT)
    if digits.startswith('0'):
        return ValidationResult.failure(ErrorKind.LEADING_ZERO)
    return ValidationResult.success()
