"""Word/suffix abbreviation of positive integers, e.g. 1234567 -> "1.2M"."""
from __future__ import annotations
from decimal import ROUND_HALF_UP, Decimal

from ..models.locale import AbbreviationDialect, AbbreviationUnit


def _scaled(value: int, unit: AbbreviationUnit, fraction_digits: int) -> Decimal:
    quantum = Decimal(1).scaleb(-fraction_digits)
    return (Decimal(value) / Decimal(unit.value)).quantize(quantum, rounding=ROUND_HALF_UP)


def _render(scaled: Decimal, decimal_separator: str) -> str:
    text = format(scaled, "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text.replace(".", decimal_separator)


def abbreviate(value: int, dialect: AbbreviationDialect) -> str:
    """Abbreviate ``value`` with the largest unit of ``dialect`` not above it.

    Values below the smallest unit come back as plain digits. When rounding
    reaches the next unit (999_999 -> "1000K") the next unit is used instead.
    """
    if value <= 0:
        raise ValueError(f"Cannot abbreviate non-positive value: {value}")

    units = dialect.units
    index = None
    for i, unit in enumerate(units):
        if value >= unit.value:
            index = i
    if index is None:
        return str(value)

    scaled = _scaled(value, units[index], dialect.fraction_digits)
    while index + 1 < len(units) and scaled * units[index].value >= units[index + 1].value:
        index += 1
        scaled = _scaled(value, units[index], dialect.fraction_digits)

    number = _render(scaled, dialect.decimal_separator)
    return f"{number}{dialect.suffix_separator}{units[index].suffix}"
