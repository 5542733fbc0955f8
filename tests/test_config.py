"""Tests for minicurl/config.py."""

import pytest
from pydantic import ValidationError

from minicurl.config import Settings


class TestSettings:
    def test_default_level(self) -> None:
        assert Settings.from_env({}).log_level == "WARNING"

    def test_level_from_env(self) -> None:
        assert Settings.from_env({"MINICURL_LOG_LEVEL": " debug "}).log_level == "DEBUG"

    def test_empty_value_uses_default(self) -> None:
        assert Settings.from_env({"MINICURL_LOG_LEVEL": ""}).log_level == "WARNING"

    def test_unknown_level(self) -> None:
        with pytest.raises(ValidationError, match="unknown log level"):
            Settings.from_env({"MINICURL_LOG_LEVEL": "chatty"})
