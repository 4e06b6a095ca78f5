"""Tests for configuration settings."""

from config import Settings


class TestSettings:
    """Test environment-driven settings."""

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("BPM_JSON_INDENT", raising=False)
        monkeypatch.delenv("BPM_LOG_LEVEL", raising=False)
        monkeypatch.delenv("BPM_BEARER_TOKEN_TYPE", raising=False)
        s = Settings(_env_file=None)
        assert s.json_indent is None
        assert s.bearer_token_type == "Bearer"
        assert s.log_level == "WARNING"

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("BPM_JSON_INDENT", "2")
        monkeypatch.setenv("BPM_LOG_LEVEL", "DEBUG")
        s = Settings(_env_file=None)
        assert s.json_indent == 2
        assert s.log_level == "DEBUG"

    def test_unprefixed_vars_ignored(self, monkeypatch):
        monkeypatch.setenv("JSON_INDENT", "8")
        monkeypatch.delenv("BPM_JSON_INDENT", raising=False)
        assert Settings(_env_file=None).json_indent is None
