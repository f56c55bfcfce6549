"""Tests for log level selection."""

from identity.utils.logging import current_environment, get_log_level


class TestLogLevel:
    def test_environment_defaults(self, monkeypatch):
        monkeypatch.delenv("LOG_LEVEL", raising=False)
        monkeypatch.delenv("ENVIRONMENT", raising=False)
        for env, level in [("production", "INFO"), ("test", "WARNING"), ("development", "DEBUG")]:
            monkeypatch.setenv("PROTEAN_ENV", env)
            assert get_log_level() == level

    def test_explicit_level_wins(self, monkeypatch):
        monkeypatch.setenv("PROTEAN_ENV", "production")
        monkeypatch.setenv("LOG_LEVEL", "debug")
        assert get_log_level() == "DEBUG"

    def test_environment_variable_takes_precedence(self, monkeypatch):
        monkeypatch.setenv("ENVIRONMENT", "Staging")
        monkeypatch.setenv("PROTEAN_ENV", "test")
        assert current_environment() == "staging"
