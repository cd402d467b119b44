"""Tests for catalogue configuration and logging setup.

These tests demonstrate:
1. Default values
2. Environment variable loading
3. Validation
4. The configuration singleton
5. Logging configured from settings
"""

import logging
import os
import sys
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from library_catalogue.config import CatalogueConfig, get_config, reset_config
from library_catalogue.logging_config import configure_logging


class TestCatalogueConfig:
    """Configuration behaviour."""

    def test_default_configuration(self):
        config = CatalogueConfig()

        assert config.library_name == "library-catalogue"
        assert config.log_level == "INFO"
        assert "%(message)s" in config.log_format
        assert config.debug is False
        assert config.is_development is False

    def test_environment_variable_loading(self):
        env_vars = {
            "LIBRARY_CATALOGUE_LIBRARY_NAME": "branch-library",
            "LIBRARY_CATALOGUE_LOG_LEVEL": "warning",
            "LIBRARY_CATALOGUE_DEBUG": "true",
        }

        with patch.dict(os.environ, env_vars):
            config = CatalogueConfig()

            assert config.library_name == "branch-library"
            assert config.log_level == "WARNING"
            assert config.debug is True

    def test_env_file_loading(self, tmp_path):
        """The autouse fixture runs every test inside tmp_path."""
        (tmp_path / ".env").write_text("LIBRARY_CATALOGUE_LOG_LEVEL=ERROR\n")

        assert CatalogueConfig().log_level == "ERROR"

    def test_library_name_validation(self):
        for name in ["main-branch", "lib-42", "abc"]:
            assert CatalogueConfig(library_name=name).library_name == name

        invalid_names = [
            "Main_Branch",  # Uppercase and underscore
            "main branch",  # Spaces
            "ab",           # Too short
            "a" * 51,       # Too long
        ]
        for name in invalid_names:
            with pytest.raises(ValidationError):
                CatalogueConfig(library_name=name)

    def test_log_level_validation(self):
        with pytest.raises(ValidationError):
            CatalogueConfig(log_level="TRACE")

    def test_computed_properties(self):
        assert CatalogueConfig(debug=True).is_development is True
        assert CatalogueConfig(log_level="DEBUG").is_development is True
        assert CatalogueConfig(debug=True, log_level="ERROR").effective_log_level == "DEBUG"
        assert CatalogueConfig(log_level="ERROR").effective_log_level == "ERROR"


class TestConfigSingleton:
    """get_config / reset_config."""

    def test_same_instance_returned(self):
        assert get_config() is get_config()

    def test_reset_reloads_environment(self):
        first = get_config()
        with patch.dict(os.environ, {"LIBRARY_CATALOGUE_LIBRARY_NAME": "other-library"}):
            reset_config()
            second = get_config()

        assert second is not first
        assert second.library_name == "other-library"


@pytest.mark.usefixtures("restore_root_logging")
class TestConfigureLogging:
    """Root logger setup."""

    def test_level_and_stderr_handler(self):
        configure_logging(CatalogueConfig(log_level="WARNING"))

        root = logging.getLogger()
        assert root.level == logging.WARNING
        assert len(root.handlers) == 1
        assert root.handlers[0].stream is sys.stderr

    def test_debug_overrides_level(self):
        configure_logging(CatalogueConfig(debug=True, log_level="ERROR"))
        assert logging.getLogger().level == logging.DEBUG

    def test_uses_global_config_by_default(self):
        with patch.dict(os.environ, {"LIBRARY_CATALOGUE_LOG_LEVEL": "ERROR"}):
            configure_logging()
        assert logging.getLogger().level == logging.ERROR

    def test_custom_format(self):
        configure_logging(CatalogueConfig(log_format="%(levelname)s|%(message)s"))
        assert logging.getLogger().handlers[0].formatter._fmt == "%(levelname)s|%(message)s"
