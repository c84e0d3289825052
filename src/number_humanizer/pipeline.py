"""Pipelines: sanitize → bound → resolve locale → format → sanitize for display."""
from __future__ import annotations
from abc import ABC, abstractmethod

import structlog

from .formatting.abbreviation import abbreviate
from .formatting.compact_currency import format_value
from .formatting.display import sanitize_for_display
from .international.dialects import DEFAULT_FORMAT, FORMAT_OPTIONS, resolve_dialect
from .international.locale_table import COUNTRY_OPTIONS, DEFAULT_COUNTRY, resolve
from .models.results import (
    AbbreviatedOutput,
    ErrorKind,
    FormattedOutput,
    PipelineResult,
)
from .validation.bounds import (
    ABBREVIATION_BOUNDS,
    COMPACT_CURRENCY_BOUNDS,
    BoundsPolicy,
    check_bounds,
)
from .validation.sanitizer import sanitize, validate_digit_string

logger = structlog.get_logger(__name__)

COMPACT_CURRENCY_MESSAGES: dict[ErrorKind, str] = {
    ErrorKind.EMPTY_INPUT: "Please enter a valid number (only digits, no leading zeros)",
    ErrorKind.LEADING_ZERO: "Please enter a valid number (only digits, no leading zeros)",
    ErrorKind.NOT_A_NUMBER: "Please enter a positive number",
    ErrorKind.NON_POSITIVE: "Please enter a positive number",
    ErrorKind.TOO_LARGE: "Number too large (max 100,000,000,000,000,000)",
    ErrorKind.FORMATTING_FAILURE: "Error processing number",
}

ABBREVIATION_MESSAGES: dict[ErrorKind, str] = {
    ErrorKind.EMPTY_INPUT: "Invalid input (only numbers, no leading zeros)",
    ErrorKind.LEADING_ZERO: "Invalid input (only numbers, no leading zeros)",
    ErrorKind.NOT_A_NUMBER: "Invalid number input",
    ErrorKind.NON_POSITIVE: "Invalid number input",
    ErrorKind.TOO_LARGE: "Number too large (max 23 digits)",
    ErrorKind.FORMATTING_FAILURE: "Error processing number",
}


class NumberPipeline(ABC):
    """Shared validation and error handling; subclasses only format."""

    name: str
    bounds: BoundsPolicy
    messages: dict[ErrorKind, str]
    default_selector: str
    selector_options: tuple[str, ...]

    def run(self, raw: str, selector: str) -> PipelineResult:
        """Recompute everything from ``raw`` and ``selector``.

        An empty ``raw`` is the idle state, not an error.
        """
        if not raw:
            return PipelineResult.empty()

        digits = sanitize(raw)
        checked = validate_digit_string(digits)
        if not checked.ok:
            return self._fail(checked.error, raw_length=len(raw))

        bounded = check_bounds(digits, self.bounds)
        if not bounded.ok:
            return self._fail(bounded.error, raw_length=len(raw))

        try:
            output = self.format(bounded.value, selector)
        except Exception as e:
            logger.error("formatting_failed", pipeline=self.name, selector=selector,
                         digits=len(digits), error=str(e), exc_info=True)
            return self._fail(ErrorKind.FORMATTING_FAILURE)

        logger.debug("pipeline_run", pipeline=self.name, selector=selector, digits=len(digits))
        return PipelineResult.valid(output)

    def _fail(self, error: ErrorKind, **context) -> PipelineResult:
        logger.debug("validation_failed", pipeline=self.name, error=str(error), **context)
        return PipelineResult.invalid(error, self.messages[error])

    @abstractmethod
    def format(self, value: int, selector: str) -> FormattedOutput | AbbreviatedOutput:
        """Render a validated value; may raise on formatter failure."""
        ...


class CompactCurrencyPipeline(NumberPipeline):
    """Country selector → compact notation plus symbol-prefixed currency."""

    name = "compact_currency"
    bounds = COMPACT_CURRENCY_BOUNDS
    messages = COMPACT_CURRENCY_MESSAGES
    default_selector = DEFAULT_COUNTRY
    selector_options = COUNTRY_OPTIONS

    def format(self, value: int, selector: str) -> FormattedOutput:
        formatted = format_value(value, resolve(selector))
        return FormattedOutput(
            compact=sanitize_for_display(formatted.compact),
            currency=sanitize_for_display(formatted.currency),
        )


class AbbreviationPipeline(NumberPipeline):
    """Format code → abbreviated word/suffix form."""

    name = "abbreviation"
    bounds = ABBREVIATION_BOUNDS
    messages = ABBREVIATION_MESSAGES
    default_selector = DEFAULT_FORMAT
    selector_options = FORMAT_OPTIONS

    def format(self, value: int, selector: str) -> AbbreviatedOutput:
        text = abbreviate(value, resolve_dialect(selector))
        return AbbreviatedOutput(abbreviated=sanitize_for_display(text))


def run_compact_currency(raw: str, country: str = DEFAULT_COUNTRY) -> PipelineResult:
    return CompactCurrencyPipeline().run(raw, country)


def run_abbreviation(raw: str, format_code: str = DEFAULT_FORMAT) -> PipelineResult:
    return AbbreviationPipeline().run(raw, format_code)
