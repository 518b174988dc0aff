"""Tests for StopwatchConfig."""

import pytest
from pydantic import ValidationError

from stopwatch_tui.config import StopwatchConfig


class TestStopwatchConfig:
    """Tests for defaults, env loading and overrides."""

    def test_defaults(self):
        config = StopwatchConfig.fromEnv()
        assert config.refresh_interval == 0.01
        assert config.title == "Stopwatch"
        assert config.log_level == "WARNING"

    def test_env_values(self, monkeypatch):
        monkeypatch.setenv("STOPWATCH_REFRESH_INTERVAL", "0.05")
        monkeypatch.setenv("STOPWATCH_TITLE", "Laps")
        monkeypatch.setenv("STOPWATCH_LOG_LEVEL", "debug")
        config = StopwatchConfig.fromEnv()
        assert config.refresh_interval == 0.05
        assert config.title == "Laps"
        assert config.log_level == "DEBUG"

    def test_dotenv_file(self, tmp_path):
        (tmp_path / ".env").write_text("STOPWATCH_TITLE=From file\n")
        config = StopwatchConfig.fromEnv()
        assert config.title == "From file"

    def test_dotenv_unrelated_keys_ignored(self, tmp_path):
        (tmp_path / ".env").write_text(
            "OTHER_TOOL_TOKEN=abc\nSTOPWATCH_REFRESH_INTERVAL=0.2\n"
        )
        config = StopwatchConfig.fromEnv()
        assert config.refresh_interval == 0.2

    def test_env_beats_dotenv(self, tmp_path, monkeypatch):
        (tmp_path / ".env").write_text("STOPWATCH_TITLE=From file\n")
        monkeypatch.setenv("STOPWATCH_TITLE", "From env")
        assert StopwatchConfig.fromEnv().title == "From env"

    def test_overrides_win(self, monkeypatch):
        monkeypatch.setenv("STOPWATCH_TITLE", "Env")
        config = StopwatchConfig.fromEnv(title="Flag", refresh_interval=None)
        assert config.title == "Flag"
        assert config.refresh_interval == 0.01

    def test_non_positive_interval_rejected(self):
        with pytest.raises(ValidationError):
            StopwatchConfig(refresh_interval=0)

    def test_unknown_log_level_rejected(self):
        with pytest.raises(ValidationError):
            StopwatchConfig(log_level="chatty")

    def test_frozen(self):
        config = StopwatchConfig()
        with pytest.raises(ValidationError):
            config.title = "other"
