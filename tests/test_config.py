"""
Tests for settings loading.
"""
import pytest
from pydantic import ValidationError

from garden_round.config import Settings


class TestSettings:
    """Tests for Settings class."""

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("GARDEN_INITIAL_MONEY", raising=False)
        settings = Settings()
        assert settings.grid_rows == 8
        assert settings.grid_cols == 8
        assert settings.initial_money == 50
        assert settings.round_duration_ms == 180_000
        assert settings.refill_interval_ms == 30_000
        assert settings.refill_stock == 15
        assert settings.leaderboard_size == 10
        assert settings.max_name_length == 20

    def test_environment_override(self, monkeypatch):
        monkeypatch.setenv("GARDEN_INITIAL_MONEY", "1000")
        monkeypatch.setenv("GARDEN_ROUND_DURATION_MS", "60000")
        settings = Settings()
        assert settings.initial_money == 1000
        assert settings.round_duration_ms == 60_000

    def test_env_prefix(self):
        assert Settings.model_config["env_prefix"] == "GARDEN_"

    def test_invalid_value(self):
        with pytest.raises(ValidationError):
            Settings(grid_rows=0)
