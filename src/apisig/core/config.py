"""Global configuration for apisig.

This module provides centralized configuration management with support for
environment variables and sensible defaults.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings


class ApisigConfig(BaseSettings):
    """apisig configuration settings.

    Values can be overridden via environment variables with APISIG_ prefix.
    Example: APISIG_DUPLICATE_POLICY=error makes duplicate methods fatal.
    """

    # Type resolution
    default_namespace: str = Field(
        default="java.lang",
        min_length=1,
        description="Namespace tried for unqualified type names that do not resolve directly",
    )

    # Canonicalization
    duplicate_policy: Literal["warn", "error"] = Field(
        default="warn",
        description="How to treat methods that are indistinguishable by name and argument names",
    )

    # Source scanning
    source_glob: str = Field(
        default="*.java",
        description="Glob used to find source files when building a type catalog",
    )

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="WARNING",
        description="Log level used by the CLI",
    )

    model_config = {
        "env_prefix": "APISIG_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


@lru_cache
def get_config() -> ApisigConfig:
    """Get cached configuration instance.

    Returns:
        ApisigConfig singleton instance.
    """
    return ApisigConfig()


def reload_config() -> ApisigConfig:
    """Reload configuration (clears cache).

    Returns:
        Fresh ApisigConfig instance.
    """
    get_config.cache_clear()
    return get_config()
