"""Unit tests for configuration management."""

import os
from unittest.mock import patch

import pytest

from lexenv.core.config import LexenvConfig, get_config, reload_config


class TestLexenvConfig:
    """Tests for LexenvConfig."""

    def test_default_values(self) -> None:
        """Test default configuration values."""
        # Clear env and disable .env file loading
        with patch.dict(os.environ, {}, clear=True):
            config = LexenvConfig(_env_file=None)

            assert config.max_scope_depth == 1000
            assert config.max_bindings_per_scope == 10_000
            assert config.thread_safe is True
            assert config.value_repr_limit == 200
            assert config.log_level == "WARNING"

    def test_env_override(self) -> None:
        """Test environment variable override."""
        with patch.dict(
            os.environ,
            {
                "LEXENV_MAX_SCOPE_DEPTH": "50",
                "LEXENV_MAX_BINDINGS_PER_SCOPE": "7",
                "LEXENV_THREAD_SAFE": "false",
                "LEXENV_LOG_LEVEL": "DEBUG",
            },
        ):
            config = LexenvConfig(_env_file=None)
            assert config.max_scope_depth == 50
            assert config.max_bindings_per_scope == 7
            assert config.thread_safe is False
            assert config.log_level == "DEBUG"

    def test_validation_scope_depth(self) -> None:
        """Test scope depth bounds."""
        with patch.dict(os.environ, {"LEXENV_MAX_SCOPE_DEPTH": "0"}):
            with pytest.raises(ValueError):
                LexenvConfig(_env_file=None)

        with patch.dict(os.environ, {"LEXENV_MAX_SCOPE_DEPTH": "1000000"}):
            with pytest.raises(ValueError):
                LexenvConfig(_env_file=None)

    def test_validation_repr_limit(self) -> None:
        """Test repr limit minimum."""
        with patch.dict(os.environ, {"LEXENV_VALUE_REPR_LIMIT": "3"}):
            with pytest.raises(ValueError):
                LexenvConfig(_env_file=None)

    def test_validation_log_level(self) -> None:
        """Test unknown log levels are rejected."""
        with patch.dict(os.environ, {"LEXENV_LOG_LEVEL": "LOUD"}):
            with pytest.raises(ValueError):
                LexenvConfig(_env_file=None)


class TestConfigCaching:
    """Tests for configuration caching."""

    def test_get_config_cached(self) -> None:
        """Test that get_config returns cached instance."""
        reload_config()  # Clear cache first
        config1 = get_config()
        config2 = get_config()
        assert config1 is config2

    def test_reload_config_clears_cache(self) -> None:
        """Test that reload_config clears cache."""
        config1 = get_config()
        config2 = reload_config()
        config3 = get_config()

        assert config1 is not config2
        assert config2 is config3

    def test_reload_picks_up_environment(self) -> None:
        with patch.dict(os.environ, {"LEXENV_MAX_SCOPE_DEPTH": "12"}):
            assert reload_config().max_scope_depth == 12
