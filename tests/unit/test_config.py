"""Test environment-driven settings."""
import pytest
from pydantic import ValidationError

from numberflow.config import Settings, get_settings


class TestSettings:
    def test_defaults(self, monkeypatch):
        for name in ("DEFAULT_LOCALE", "FORMAT", "MAX_LENGTH", "LCS_MAX_LENGTH"):
            monkeypatch.delenv(f"NUMBERFLOW_{name}", raising=False)
        s = Settings()
        assert s.default_locale == "en-US"
        assert s.format is False
        assert s.max_length is None
        assert s.lcs_max_length == 64

    def test_env_prefix(self, monkeypatch):
        monkeypatch.setenv("NUMBERFLOW_DEFAULT_LOCALE", "de-DE")
        monkeypatch.setenv("NUMBERFLOW_FORMAT", "true")
        monkeypatch.setenv("NUMBERFLOW_MAX_LENGTH", "12")
        s = Settings()
        assert s.default_locale == "de-DE"
        assert s.format is True
        assert s.max_length == 12

    def test_invalid_lcs_limit(self):
        with pytest.raises(ValidationError):
            Settings(lcs_max_length=0)

    def test_get_settings_reads_current_environment(self, monkeypatch):
        monkeypatch.setenv("NUMBERFLOW_LOG_LEVEL", "WARNING")
        assert get_settings().log_level == "WARNING"
        monkeypatch.setenv("NUMBERFLOW_LOG_LEVEL", "DEBUG")
        assert get_settings().log_level == "DEBUG"
