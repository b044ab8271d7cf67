"""Tests for cadence_config settings and logging setup."""

import logging
from decimal import Decimal

import pytest
from pydantic import ValidationError

from cadence_config import (
    Settings,
    clear_settings_cache,
    configure_logging,
    get_config_dir,
    get_settings,
)


class TestSettings:
    def test_defaults(self):
        settings = Settings()

        assert settings.detection_window_days == 5
        assert settings.detection_min_occurrences == 3
        assert settings.detection_amount_bucket == Decimal("0.01")
        assert settings.materialize_lookahead_days == 0
        assert settings.max_occurrences_per_run == 1000
        assert settings.default_currency == "EUR"
        assert settings.log_level == "INFO"

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("CADENCE_DETECTION_WINDOW_DAYS", "10")
        monkeypatch.setenv("CADENCE_DETECTION_AMOUNT_BUCKET", "0.50")
        monkeypatch.setenv("CADENCE_LOG_LEVEL", "debug")

        settings = Settings()

        assert settings.detection_window_days == 10
        assert settings.detection_amount_bucket == Decimal("0.50")
        assert settings.log_level == "DEBUG"

    def test_env_file(self, tmp_path):
        env_file = tmp_path / ".env"
        env_file.write_text("CADENCE_DETECTION_MIN_OCCURRENCES=4\n")

        settings = Settings(_env_file=env_file)

        assert settings.detection_min_occurrences == 4

    def test_currency_is_normalized(self):
        assert Settings(default_currency=" usd ").default_currency == "USD"

    @pytest.mark.parametrize(
        "overrides",
        [
            {"default_currency": "EURO"},
            {"detection_window_days": 0},
            {"detection_window_days": 400},
            {"detection_min_occurrences": 1},
            {"detection_amount_bucket": "0"},
            {"log_level": "verbose"},
        ],
    )
    def test_invalid_values(self, overrides):
        with pytest.raises(ValidationError):
            Settings(**overrides)

    def test_get_settings_is_cached(self, monkeypatch):
        first = get_settings()
        monkeypatch.setenv("CADENCE_DETECTION_WINDOW_DAYS", "8")

        assert get_settings() is first

        clear_settings_cache()
        assert get_settings().detection_window_days == 8

    def test_config_dir(self):
        assert get_config_dir().name == "config"


class TestConfigureLogging:
    @pytest.fixture(autouse=True)
    def restore_levels(self):
        yield
        logging.getLogger("cadence").setLevel(logging.NOTSET)
        logging.getLogger("cadence_config").setLevel(logging.NOTSET)

    def test_explicit_level(self):
        configure_logging("debug")

        assert logging.getLogger("cadence").level == logging.DEBUG
        assert logging.getLogger("cadence_config").level == logging.DEBUG

    def test_level_from_settings(self, monkeypatch):
        monkeypatch.setenv("CADENCE_LOG_LEVEL", "WARNING")

        configure_logging()

        assert logging.getLogger("cadence").level == logging.WARNING
