"""
Unit tests for LoggingManager.
"""

import logging

import pytest

from discord_game_muter.infrastructure.logging_manager import (
    Environment,
    LoggingManager,
    NOISY_LOGGERS,
)


class TestLoggingManager:
    """Test cases for environment-aware logging."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "value, expected",
        [
            ("prod", Environment.PRODUCTION),
            ("Production", Environment.PRODUCTION),
            ("stage", Environment.STAGING),
            ("anything", Environment.DEVELOPMENT),
        ],
    )
    def test_environment_detection(self, monkeypatch, value, expected):
        monkeypatch.setenv("ENVIRONMENT", value)

        assert LoggingManager().get_environment() is expected

    @pytest.mark.unit
    def test_production_overrides_spare_discord_loggers(self, monkeypatch):
        monkeypatch.setenv("ENVIRONMENT", "production")
        manager = LoggingManager()
        config = {
            "root": {"level": "DEBUG"},
            "loggers": {"game_muter": {"level": "DEBUG"}, "discord.http": {"level": "ERROR"}},
            "handlers": {"file_game_muter": {"level": "DEBUG"}, "console": {"level": "DEBUG"}},
        }

        result = manager._apply_production_overrides(config)

        assert result["root"]["level"] == "WARNING"
        assert result["loggers"]["game_muter"]["level"] == "WARNING"
        assert result["loggers"]["discord.http"]["level"] == "ERROR"
        assert result["handlers"]["file_game_muter"]["level"] == "WARNING"
        assert result["handlers"]["console"]["level"] == "DEBUG"

    @pytest.mark.unit
    def test_fallback_without_yaml(self, monkeypatch, tmp_path):
        monkeypatch.setenv("ENVIRONMENT", "development")
        manager = LoggingManager(config_path=tmp_path / "missing.yaml")
        log_file = tmp_path / "logs" / "component.log"

        logger = manager.setup_logging("fallback_component", log_file=str(log_file))

        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 2
        assert log_file.parent.exists()
        for name in NOISY_LOGGERS:
            assert logging.getLogger(name).level == logging.WARNING
        for handler in logger.handlers:
            handler.close()
        logger.handlers.clear()

    @pytest.mark.unit
    def test_set_production_mode(self, monkeypatch):
        monkeypatch.setenv("ENVIRONMENT", "development")
        manager = LoggingManager()

        manager.set_production_mode(True)

        assert manager.is_production()
        assert manager._get_environment_log_level() == "WARNING"

    @pytest.mark.unit
    def test_reload_config_drops_cache(self, tmp_path):
        config_path = tmp_path / "logging.yaml"
        config_path.write_text("version: 1\n")
        manager = LoggingManager(config_path=config_path)
        assert manager._load_yaml_config() == {"version": 1}

        config_path.write_text("version: 1\ndisable_existing_loggers: false\n")
        manager.reload_config()

        assert manager._load_yaml_config()["disable_existing_loggers"] is False
