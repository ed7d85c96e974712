"""Tests for logging setup."""

import importlib
from unittest.mock import patch

import pytest


@pytest.mark.unit
class TestLogging:
    def test_setup_logging_uses_level(self):
        from log_config import setup_logging

        with patch("log_config.logging.basicConfig") as basic_config:
            setup_logging("debug")

        assert basic_config.call_args.kwargs["level"] == "DEBUG"

    def test_app_import_configures_logging(self):
        import app as app_module
        from youtube_related.settings import get_settings

        with patch("log_config.setup_logging") as setup_logging:
            importlib.reload(app_module)

        setup_logging.assert_called_once_with(get_settings().log_level)
