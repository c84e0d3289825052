"""Shared test fixtures."""
import pytest
from number_humanizer.config import Settings
from number_humanizer.pipeline import AbbreviationPipeline, CompactCurrencyPipeline


@pytest.fixture
def settings():
    """Settings with a short debounce so async tests stay fast."""
    return Settings(log_level="DEBUG", debounce_ms=10, default_country="US", default_format="en")


@pytest.fixture
def compact_pipeline():
    return CompactCurrencyPipeline()


@pytest.fixture
def abbreviation_pipeline():
    return AbbreviationPipeline()
