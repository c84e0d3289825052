"""Test result models."""
import pytest
from pydantic import ValidationError
from number_humanizer.models.locale import AbbreviationUnit, LocaleConfig
from number_humanizer.models.results import (
    AbbreviatedOutput,
    ErrorKind,
    FormattedOutput,
    FormStatus,
    PipelineResult,
    ValidationResult,
)


class TestValidationResult:
    def test_success(self):
        r = ValidationResult.success(42)
        assert r.ok
        assert r.value == 42

    def test_failure(self):
        r = ValidationResult.failure(ErrorKind.TOO_LARGE)
        assert not r.ok
        assert r.value is None


class TestPipelineResult:
    def test_empty(self):
        r = PipelineResult.empty()
        assert r.status == FormStatus.EMPTY
        assert r.output is None
        assert r.message == ""

    def test_valid_keeps_output_type(self):
        r = PipelineResult.valid(AbbreviatedOutput(abbreviated="1K"))
        assert isinstance(r.output, AbbreviatedOutput)
        assert r.output.text == "1K"

    def test_valid_formatted(self):
        r = PipelineResult.valid(FormattedOutput(compact="1.2M", currency="$ 1,234,567"))
        assert isinstance(r.output, FormattedOutput)
        assert r.output.text == "1.2M | $ 1,234,567"

    def test_invalid(self):
        r = PipelineResult.invalid(ErrorKind.LEADING_ZERO, "bad")
        assert r.status == FormStatus.INVALID
        assert r.error == ErrorKind.LEADING_ZERO
        assert r.output is None


class TestLocaleModels:
    def test_currency_code_length(self):
        with pytest.raises(ValidationError):
            LocaleConfig(locale_id="en_US", currency_code="US", currency_symbol="$")

    def test_unit_must_be_positive(self):
        with pytest.raises(ValidationError):
            AbbreviationUnit(value=0, suffix="K")
