"""Tests for the legacy property name check."""

import pytest

from core.config import AppSettings
from core.services import is_valid_property


class TestIsValidProperty:
    """Tests for is_valid_property."""

    def test_member(self) -> None:
        """Should accept a name present in the set."""
        assert is_valid_property("username", {"title", "username", "password"}) is True

    def test_not_member(self) -> None:
        """Should reject a name absent from the set."""
        assert is_valid_property("url", {"title", "username", "password"}) is False

    def test_exact_match_only(self) -> None:
        """Should not match on case or substrings."""
        names = ["username"]

        assert is_valid_property("Username", names) is False
        assert is_valid_property("user", names) is False

    def test_empty_set(self) -> None:
        """Should reject everything when no names are known."""
        assert is_valid_property("username", set()) is False

    def test_absent_set(self) -> None:
        """Should reject every name when no set is given."""
        assert is_valid_property("title") is False
        assert is_valid_property("username") is False


class TestAppSettings:
    """Tests for AppSettings defaults and env overrides."""

    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Should have sensible defaults."""
        for name in (
            "ENTRY_FACADE_DEFAULT_URL_PREFERENCE",
            "ENTRY_FACADE_LOG_LEVEL",
        ):
            monkeypatch.delenv(name, raising=False)

        settings = AppSettings(_env_file=None)

        assert settings.default_url_preference.value == "any"
        assert settings.log_level == "WARNING"

    def test_env_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Should read prefixed environment variables."""
        monkeypatch.setenv("ENTRY_FACADE_DEFAULT_URL_PREFERENCE", "login")

        settings = AppSettings(_env_file=None)

        assert settings.default_url_preference.value == "login"

    def test_rejects_unknown_preference(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Should validate the configured preference."""
        monkeypatch.setenv("ENTRY_FACADE_DEFAULT_URL_PREFERENCE", "favicon")

        with pytest.raises(ValueError):
            AppSettings(_env_file=None)

    def test_log_level_is_normalized(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Should accept log levels in any case."""
        monkeypatch.setenv("ENTRY_FACADE_LOG_LEVEL", " debug ")

        settings = AppSettings(_env_file=None)

        assert settings.log_level == "DEBUG"

    def test_rejects_unknown_log_level(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Should reject names the logging module does not know."""
        monkeypatch.setenv("ENTRY_FACADE_LOG_LEVEL", "verbose")

        with pytest.raises(ValueError):
            AppSettings(_env_file=None)
