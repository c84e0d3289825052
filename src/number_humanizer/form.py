"""Form state holder: the single writer of input, selector and result.

The compact/currency form recomputes on every keystroke. The abbreviation form
debounces keystrokes and recomputes immediately on a selector change.
"""
from __future__ import annotations
import asyncio
from typing import Any, Callable

import structlog

from .config import Settings
from .models.results import FormStatus, PipelineResult
from .pipeline import AbbreviationPipeline, CompactCurrencyPipeline, NumberPipeline

logger = structlog.get_logger(__name__)

PLACEHOLDER = "Enter a number to see the result"


class Debouncer:
    """Trailing-edge debounce on the running asyncio loop.

    Scheduling again before the delay elapses cancels the pending call.
    """

    def __init__(self, delay: float, loop: asyncio.AbstractEventLoop | None = None):
        self.delay = delay
        self._loop = loop
        self._handle: asyncio.TimerHandle | None = None

    def schedule(self, fn: Callable[..., Any], *args: Any) -> None:
        if self._handle is not None and not self._handle.cancelled():
            self._handle.cancel()
            logger.debug("debounce_rescheduled", delay=self.delay)
        loop = self._loop or asyncio.get_running_loop()
        self._handle = loop.call_later(self.delay, self._fire, fn, args)

    def _fire(self, fn: Callable[..., Any], args: tuple) -> None:
        self._handle = None
        fn(*args)

    def cancel(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    @property
    def pending(self) -> bool:
        return self._handle is not None and not self._handle.cancelled()


class NumberForm:
    """Holds the current input, selector and latest result for one pipeline."""

    def __init__(
        self,
        pipeline: NumberPipeline,
        selector: str | None = None,
        debouncer: Debouncer | None = None,
    ):
        self.pipeline = pipeline
        self.raw_input = ""
        self.selector = selector or pipeline.default_selector
        self.result = PipelineResult.empty()
        self._debouncer = debouncer

    def on_input_change(self, raw: str) -> None:
        self.raw_input = raw[: self.pipeline.bounds.input_length_cap]
        if self._debouncer is None:
            self.recompute()
        else:
            self._debouncer.schedule(self.recompute)

    def on_selector_change(self, selector: str) -> None:
        self.selector = selector
        if self._debouncer is not None:
            self._debouncer.cancel()
        self.recompute()

    def recompute(self) -> PipelineResult:
        # Always read the current state; a debounced run may fire after a selector change.
        self.result = self.pipeline.run(self.raw_input, self.selector)
        return self.result

    @property
    def error_message(self) -> str:
        return self.result.message

    @property
    def display_text(self) -> str:
        if self.result.status is FormStatus.VALID:
            return self.result.output.text
        if self.result.status is FormStatus.INVALID:
            return self.result.message
        return PLACEHOLDER


def compact_currency_form(settings: Settings | None = None) -> NumberForm:
    if settings is None:
        settings = Settings()
    return NumberForm(CompactCurrencyPipeline(), selector=settings.default_country)


def abbreviation_form(settings: Settings | None = None) -> NumberForm:
    if settings is None:
        settings = Settings()
    return NumberForm(
        AbbreviationPipeline(),
        selector=settings.default_format,
        debouncer=Debouncer(settings.debounce_seconds),
    )
