"""Test unit-ladder abbreviation per dialect."""
import pytest
from number_humanizer.formatting.abbreviation import abbreviate
from number_humanizer.international.dialects import resolve_dialect
from number_humanizer.models.locale import AbbreviationDialect, AbbreviationUnit


class TestEnglish:
    @pytest.mark.parametrize("value,expected", [
        (500, "500"),
        (999, "999"),
        (1000, "1K"),
        (1500, "1.5K"),
        (1234567, "1.2M"),
        (3_400_000_000, "3.4B"),
        (7 * 10**12, "7T"),
    ])
    def test_ladder(self, value, expected):
        assert abbreviate(value, resolve_dialect("en")) == expected

    def test_rounds_half_up(self):
        assert abbreviate(1250, resolve_dialect("en")) == "1.3K"

    def test_rounding_promotes_to_next_unit(self):
        assert abbreviate(999_999, resolve_dialect("en")) == "1M"

    def test_largest_23_digit_value(self):
        assert abbreviate(10**23 - 1, resolve_dialect("en")) == "100Sx"


class TestOtherDialects:
    def test_indian_lakh(self):
        assert abbreviate(1_234_567, resolve_dialect("in")) == "12.35 L"

    def test_indian_crore(self):
        assert abbreviate(25_000_000, resolve_dialect("in")) == "2.5 Cr"

    def test_indian_promotes_to_lakh(self):
        assert abbreviate(99_999, resolve_dialect("in")) == "1 L"

    def test_german_comma_decimal(self):
        assert abbreviate(1_234_567, resolve_dialect("de")) == "1,2 Mio."

    def test_french_milliard(self):
        assert abbreviate(2_500_000_000, resolve_dialect("fr")) == "2,5 Md"

    def test_spanish_mil_millones(self):
        assert abbreviate(4_000_000_000, resolve_dialect("es")) == "4 mil M"

    def test_italian(self):
        assert abbreviate(1_500, resolve_dialect("it")) == "1,5 k"

    def test_swedish(self):
        assert abbreviate(3_000_000, resolve_dialect("se")) == "3 mn"


class TestCustomDialect:
    def test_zero_fraction_digits(self):
        dialect = AbbreviationDialect(
            code="x",
            fraction_digits=0,
            units=(AbbreviationUnit(value=1000, suffix="k"),),
        )
        assert abbreviate(1600, dialect) == "2k"

    def test_beyond_top_unit_reuses_it(self):
        dialect = AbbreviationDialect(code="x", units=(AbbreviationUnit(value=1000, suffix="k"),))
        assert abbreviate(5_000_000, dialect) == "5000k"

    def test_non_positive_raises(self):
        with pytest.raises(ValueError):
            abbreviate(0, resolve_dialect("en"))
