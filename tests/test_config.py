"""
Tests for settings and logging setup.
"""

import logging
import pytest
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from src.utils.config import Settings, get_settings, reload_settings
from src.utils.logging import setup_logging


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


class TestSettings:
    """Tests for Settings."""

    def test_defaults(self):
        settings = Settings(_env_file=None)
        assert settings.app_title == "Drug Harm Rankings"
        assert settings.default_study == "uk2010"
        assert settings.comparison_reference_study == "uk2010"
        assert settings.chart_height == 600
        assert settings.comparison_min_height == 800
        assert settings.log_file is None

    def test_environment_override(self, monkeypatch):
        monkeypatch.setenv("CHART_HEIGHT", "700")
        monkeypatch.setenv("default_study", "australia2019")
        settings = reload_settings()
        assert settings.chart_height == 700
        assert settings.default_study == "australia2019"
        assert get_settings() is settings
        monkeypatch.undo()
        reload_settings()

    def test_get_settings_is_shared(self):
        assert get_settings() is get_settings()


class TestLoggingSetup:
    """Tests for setup_logging()."""

    def test_level_and_handler(self, restore_root_logger):
        setup_logging("DEBUG")
        assert restore_root_logger.level == logging.DEBUG
        assert len(restore_root_logger.handlers) == 1
        assert logging.getLogger("streamlit").level == logging.WARNING

    def test_file_handler(self, restore_root_logger, tmp_path):
        log_file = tmp_path / "dashboard.log"
        setup_logging("INFO", str(log_file))
        assert len(restore_root_logger.handlers) == 2
        logging.getLogger("tests.config").info("hello")
        for handler in restore_root_logger.handlers:
            handler.flush()
        assert "hello" in log_file.read_text()

    def test_unknown_level_falls_back_to_info(self, restore_root_logger):
        setup_logging("CHATTY")
        assert restore_root_logger.level == logging.INFO
