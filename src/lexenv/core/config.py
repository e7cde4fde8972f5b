"""Global configuration for lexenv.

This module provides centralized configuration management with support for
environment variables and sensible defaults.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings


class LexenvConfig(BaseSettings):
    """lexenv configuration settings.

    Values can be overridden via environment variables with LEXENV_ prefix.
    Example: LEXENV_MAX_SCOPE_DEPTH=50 overrides max_scope_depth.
    """

    # Resource limits
    max_scope_depth: int = Field(
        default=1000,
        ge=1,
        le=100_000,
        description="Maximum number of ancestors a scope may have",
    )
    max_bindings_per_scope: int = Field(
        default=10_000,
        ge=1,
        le=1_000_000,
        description="Maximum number of distinct names declared in one scope",
    )

    # Concurrency
    thread_safe: bool = Field(
        default=True,
        description="Serialize declare/assign on each scope with a per-scope lock",
    )

    # Inspection
    value_repr_limit: int = Field(
        default=200,
        ge=16,
        le=10_000,
        description="Maximum length of a value repr recorded in snapshots",
    )

    # Logging
    log_level: str = Field(
        default="WARNING",
        pattern=r"^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$",
        description="Log level used by the CLI",
    )

    model_config = {
        "env_prefix": "LEXENV_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


@lru_cache
def get_config() -> LexenvConfig:
    """Get cached configuration instance.

    Returns:
        LexenvConfig singleton instance.
    """
    return LexenvConfig()


def reload_config() -> LexenvConfig:
    """Reload configuration (clears cache).

    Returns:
        Fresh LexenvConfig instance.
    """
    get_config.cache_clear()
    return get_config()
