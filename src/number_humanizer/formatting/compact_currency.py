"""Locale-aware compact and currency renderings via Babel (CLDR data).

Babel's exact output is locale data, not something this module controls. The
currency string is post-processed so that only digits and the locale's own
separators survive, then re-prefixed with the configured symbol.
"""
from __future__ import annotations
import copy
import re

from babel import Locale
from babel.numbers import (
    format_compact_decimal,
    format_currency as babel_format_currency,
    get_decimal_symbol,
    get_group_symbol,
)

from ..models.locale import LocaleConfig
from ..models.results import FormattedOutput

COMPACT_FRACTION_DIGITS = 1
CURRENCY_FRACTION_DIGITS = (0, 2)


def format_compact(value: int, locale_id: str) -> str:
    """Short compact notation, e.g. 1234567 -> "1.2M" for en_US."""
    return format_compact_decimal(
        value,
        format_type="short",
        locale=locale_id,
        fraction_digits=COMPACT_FRACTION_DIGITS,
    )


def _currency_pattern(locale: Locale):
    # Locale patterns are shared cached objects; never mutate them in place.
    pattern = copy.copy(locale.currency_formats["standard"])
    pattern.frac_prec = CURRENCY_FRACTION_DIGITS
    return pattern


def format_currency(value: int, cfg: LocaleConfig) -> str:
    """Return ``"<symbol> <digits-and-separators>"`` for ``value``.

    Whatever symbol placement or ISO code the locale produces is discarded.
    """
    locale = Locale.parse(cfg.locale_id)
    rendered = babel_format_currency(
        value,
        cfg.currency_code,
        format=_currency_pattern(locale),
        locale=locale,
        currency_digits=False,
    )
    separators = re.escape(get_group_symbol(locale) + get_decimal_symbol(locale))
    numeric = re.sub(rf'[^0-9{separators}]', '', rendered).strip()
    return f"{cfg.currency_symbol} {numeric}"


def format_value(value: int, cfg: LocaleConfig) -> FormattedOutput:
    """Render both strings from the same validated value."""
    return FormattedOutput(
        compact=format_compact(value, cfg.locale_id),
        currency=format_currency(value, cfg),
    )
