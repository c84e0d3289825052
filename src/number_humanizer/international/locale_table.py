"""Country selector → formatting locale and currency."""
from __future__ import annotations

from ..models.locale import LocaleConfig

COUNTRY_LOCALES: dict[str, LocaleConfig] = {
    "US": LocaleConfig(locale_id="en_US", currency_code="USD", currency_symbol="$"),
    "IN": LocaleConfig(locale_id="en_IN", currency_code="INR", currency_symbol="₹"),
    "GB": LocaleConfig(locale_id="en_GB", currency_code="GBP", currency_symbol="£"),
    "DE": LocaleConfig(locale_id="de_DE", currency_code="EUR", currency_symbol="€"),
    "FR": LocaleConfig(locale_id="fr_FR", currency_code="EUR", currency_symbol="€"),
    "ES": LocaleConfig(locale_id="es_ES", currency_code="EUR", currency_symbol="€"),
    "IT": LocaleConfig(locale_id="it_IT", currency_code="EUR", currency_symbol="€"),
    "SE": LocaleConfig(locale_id="sv_SE", currency_code="SEK", currency_symbol="kr"),
    "JP": LocaleConfig(locale_id="ja_JP", currency_code="JPY", currency_symbol="¥"),
    "CN": LocaleConfig(locale_id="zh_CN", currency_code="CNY", currency_symbol="¥"),
    "CA": LocaleConfig(locale_id="en_CA", currency_code="CAD", currency_symbol="$"),
    "AU": LocaleConfig(locale_id="en_AU", currency_code="AUD", currency_symbol="$"),
    "BR": LocaleConfig(locale_id="pt_BR", currency_code="BRL", currency_symbol="R$"),
    "CH": LocaleConfig(locale_id="de_CH", currency_code="CHF", currency_symbol="CHF"),
}

DEFAULT_COUNTRY = "US"

COUNTRY_OPTIONS: tuple[str, ...] = tuple(COUNTRY_LOCALES)


def resolve(
    selector: str,
    table: dict[str, LocaleConfig] | None = None,
    fallback: LocaleConfig | None = None,
) -> LocaleConfig:
    """Look up ``selector``; unknown codes get ``fallback`` (the US entry by default)."""
    if table is None:
        table = COUNTRY_LOCALES
    if fallback is None:
        fallback = COUNTRY_LOCALES[DEFAULT_COUNTRY]
    return table.get(selector, fallback)
