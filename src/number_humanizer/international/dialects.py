"""Abbreviation dialects per format code.

Each ladder lists its units ascending. Above the top unit the top suffix is
reused with a larger multiplier.
"""
from __future__ import annotations

from ..models.locale import AbbreviationDialect, AbbreviationUnit


def _ladder(*rungs: tuple[int, str]) -> tuple[AbbreviationUnit, ...]:
    return tuple(AbbreviationUnit(value=value, suffix=suffix) for value, suffix in rungs)


# Short scale: thousand through sextillion
_SHORT_SCALE = (10**3, 10**6, 10**9, 10**12, 10**15, 10**18, 10**21)


def _short_scale(*suffixes: str) -> tuple[AbbreviationUnit, ...]:
    return _ladder(*zip(_SHORT_SCALE, suffixes))


ABBREVIATION_DIALECTS: dict[str, AbbreviationDialect] = {
    "en": AbbreviationDialect(
        code="en",
        units=_short_scale("K", "M", "B", "T", "Q", "Qi", "Sx"),
    ),
    # Indian numbering: lakh = 1e5, crore = 1e7, then every 100x
    "in": AbbreviationDialect(
        code="in",
        suffix_separator=" ",
        fraction_digits=2,
        units=_ladder(
            (10**3, "K"),
            (10**5, "L"),
            (10**7, "Cr"),
            (10**9, "Arab"),
            (10**11, "Kharab"),
            (10**13, "Neel"),
            (10**15, "Padma"),
            (10**17, "Shankh"),
        ),
    ),
    "de": AbbreviationDialect(
        code="de",
        decimal_separator=",",
        suffix_separator=" ",
        units=_short_scale("Tsd.", "Mio.", "Mrd.", "Bio.", "Brd.", "Trio.", "Trd."),
    ),
    "fr": AbbreviationDialect(
        code="fr",
        decimal_separator=",",
        suffix_separator=" ",
        units=_short_scale("k", "M", "Md", "Bn", "Bd", "Tn", "Td"),
    ),
    "es": AbbreviationDialect(
        code="es",
        decimal_separator=",",
        suffix_separator=" ",
        units=_short_scale("mil", "M", "mil M", "B", "mil B", "T", "mil T"),
    ),
    "it": AbbreviationDialect(
        code="it",
        decimal_separator=",",
        suffix_separator=" ",
        units=_short_scale("k", "Mln", "Mld", "Bln", "Bld", "Tln", "Tld"),
    ),
    "se": AbbreviationDialect(
        code="se",
        decimal_separator=",",
        suffix_separator=" ",
        units=_short_scale("tn", "mn", "md", "bn", "bd", "trn", "trd"),
    ),
}

DEFAULT_FORMAT = "en"

# Selector order shown to users
FORMAT_OPTIONS: tuple[str, ...] = ("en", "in", "de", "fr", "es", "it", "se")


def resolve_dialect(code: str) -> AbbreviationDialect:
    """Look up a format code, falling back to ``en``."""
    return ABBREVIATION_DIALECTS.get(code, ABBREVIATION_DIALECTS[DEFAULT_FORMAT])
