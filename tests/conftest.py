"""Shared pytest fixtures for lexenv tests."""

import os
from unittest.mock import patch

import pytest
from hypothesis import settings

from lexenv.core.config import LexenvConfig, reload_config
from lexenv.environment import Runtime, Scope, create_scope

# Configure hypothesis for property-based testing
settings.register_profile("ci", max_examples=100, deadline=None)
settings.register_profile("dev", max_examples=20, deadline=None)
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


@pytest.fixture(autouse=True)
def clean_config():
    """Isolate tests from LEXENV_* variables and the cached config."""
    env = {k: v for k, v in os.environ.items() if not k.startswith("LEXENV_")}
    with patch.dict(os.environ, env, clear=True):
        reload_config()
        yield
    reload_config()


@pytest.fixture
def config() -> LexenvConfig:
    """Provide a default configuration that ignores any .env file."""
    return LexenvConfig(_env_file=None)


@pytest.fixture
def root(config: LexenvConfig) -> Scope:
    """Provide an empty root scope."""
    return create_scope(None, label="global", config=config)


@pytest.fixture
def runtime(config: LexenvConfig) -> Runtime:
    """Provide a runtime with an empty global scope."""
    return Runtime(config=config)
