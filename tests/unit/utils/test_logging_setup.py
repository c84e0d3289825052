"""Test structlog configuration."""
import json
import pytest
import structlog
from number_humanizer.utils.logging import get_logger, setup_logging


@pytest.fixture(autouse=True)
def reset_structlog():
    yield
    structlog.reset_defaults()


class TestSetupLogging:
    def test_json_to_stderr(self, capsys):
        setup_logging("INFO")
        get_logger("test").info("pipeline_run", pipeline="abbreviation", digits=4)

        captured = capsys.readouterr()
        assert captured.out == ""
        record = json.loads(captured.err.strip())
        assert record["event"] == "pipeline_run"
        assert record["level"] == "info"
        assert record["digits"] == 4
        assert "timestamp" in record

    def test_level_filtering(self, capsys):
        setup_logging("WARNING")
        get_logger("test").info("dropped")
        assert capsys.readouterr().err == ""

    def test_console_renderer(self, capsys):
        setup_logging("debug", json_output=False)
        get_logger("test").debug("validation_failed", error="too_large")
        assert "validation_failed" in capsys.readouterr().err
