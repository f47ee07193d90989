"""Unit tests for renovation.core settings, logging and exceptions."""

import pytest

from renovation.core import logging as renovation_logging
from renovation.core.exceptions import (
    ConfigurationError,
    InvalidPlanError,
    RenovationError,
    ScenarioNotFoundError,
)
from renovation.core.settings import RenovationSettings


class TestSettings:

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("RENOVATION_LOG_LEVEL", raising=False)
        settings = RenovationSettings(_env_file=None)
        assert settings.log_level == "INFO"
        assert settings.json_logs is False
        assert settings.debug_mode is False

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("RENOVATION_LOG_LEVEL", "debug")
        monkeypatch.setenv("RENOVATION_JSON_LOGS", "true")
        settings = RenovationSettings(_env_file=None)
        assert settings.log_level == "DEBUG"
        assert settings.json_logs is True


class TestLogging:

    def test_unknown_level_rejected(self, monkeypatch):
        monkeypatch.setattr(renovation_logging, "_configured", False)
        with pytest.raises(ConfigurationError):
            renovation_logging.configure_logging(level="verbose")

    def test_get_logger_binds_name(self):
        log = renovation_logging.get_logger("tests")
        assert log is not None


class TestExceptions:

    def test_hierarchy(self):
        assert issubclass(InvalidPlanError, RenovationError)
        assert issubclass(ScenarioNotFoundError, RenovationError)
        assert issubclass(ConfigurationError, RenovationError)

    def test_scenario_not_found_message(self):
        err = ScenarioNotFoundError("missing")
        assert err.name == "missing"
        assert "missing" in str(err)

    def test_invalid_plan_default_errors(self):
        assert InvalidPlanError("bad").errors == []
