"""Locale and dialect records used to render validated numbers.

``LocaleConfig`` drives the compact + currency pipeline; ``AbbreviationDialect``
drives the word/suffix abbreviation pipeline. Both are immutable and live in
static lookup tables under ``number_humanizer.international``.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class LocaleConfig(BaseModel):
    """Formatting locale and currency for one country selector."""

    model_config = ConfigDict(frozen=True)

    locale_id: str
    currency_code: str = Field(min_length=3, max_length=3)
    currency_symbol: str


class AbbreviationUnit(BaseModel):
    """One rung of an abbreviation ladder, e.g. ``1_000_000 -> "M"``."""

    model_config = ConfigDict(frozen=True)

    value: int = Field(gt=0)
    suffix: str


class AbbreviationDialect(BaseModel):
    """Suffix vocabulary and rounding rule for one format code.

    ``units`` must be sorted ascending by ``value``.
    """

    model_config = ConfigDict(frozen=True)

    code: str
    decimal_separator: str = "."
    suffix_separator: str = ""
    fraction_digits: int = Field(default=1, ge=0)
    units: tuple[AbbreviationUnit, ...]
