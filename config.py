"""
Harness configuration module.

This module defines configuration classes for the environments the suite
runs against (local development, CI, staging). Values are loaded from
environment variables with sensible defaults, so the same checkout can
target any environment by changing only the environment.

The configuration classes are read-only after import and are safe to read
from every worker thread.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

# Base directory of the project
BASE_DIR = Path(__file__).resolve().parent

logger = logging.getLogger(__name__)

_TRUTHY = {"true", "1", "yes", "on"}


def _env_bool(name: str, default: bool) -> bool:
    """Read a boolean flag from the environment; blank means unset."""
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    return raw.lower() in _TRUTHY


def _env_int(name: str, default: int) -> int:
    """Read an integer from the environment, falling back on bad input."""
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning("Invalid integer for %s=%r; using default: %s", name, raw, default)
        return default


class Config:
    """Base configuration with default settings."""

    # Application under test
    BASE_URL: str = os.environ.get("BASE_URL", "https://www.saucedemo.com")

    # Browser launch options
    BROWSER_TYPE: str = os.environ.get("BROWSER_TYPE", "chromium")
    HEADLESS: bool = _env_bool("HEADLESS", True)

    # Timeouts in milliseconds
    DEFAULT_TIMEOUT_MS: int = _env_int("TIMEOUT_DEFAULT", 30000)
    WAIT_TIMEOUT_MS: int = _env_int("TIMEOUT_WAIT", 10000)

    # REST API under test
    API_BASE_URL: str = os.environ.get(
        "API_BASE_URL", "https://jsonplaceholder.typicode.com"
    )
    API_TIMEOUT_MS: int = _env_int("API_TIMEOUT", 10000)
    API_MAX_RETRIES: int = _env_int("API_MAX_RETRIES", 3)

    LOG_LEVEL: str = os.environ.get("LOG_LEVEL", "INFO").upper()

    # Failure artifacts
    SCREENSHOT_DIR: str = os.environ.get(
        "SCREENSHOT_DIR", str(BASE_DIR / "test-results" / "screenshots")
    )

    @classmethod
    def get(cls, key: str, default: Any = None) -> Any:
        """
        Look up a setting by name.

        Args:
            key: Attribute name, case-insensitive (``browser_type`` works).
            default: Value returned when the setting is not defined.

        Returns:
            The configured value or ``default``.
        """
        value = getattr(cls, key.upper(), None)
        if value is None or callable(value):
            logger.debug("Config key '%s' not found; using default: %r", key, default)
            return default
        return value


class DevConfig(Config):
    """Local development: headed runs are allowed via HEADLESS=false."""


class CIConfig(Config):
    """Continuous integration: never open a visible browser window."""

    HEADLESS: bool = True


class StagingConfig(Config):
    """Staging environment configuration."""

    BASE_URL: str = os.environ.get("STAGING_BASE_URL", Config.BASE_URL)


# Configuration mapping for easy access
config = {
    "dev": DevConfig,
    "ci": CIConfig,
    "staging": StagingConfig,
    "default": DevConfig,
}


def get_config(env: str | None = None) -> type[Config]:
    """
    Get the configuration class for the specified environment.

    Args:
        env: Environment name (dev, ci, staging).
             If None, uses the TEST_ENV environment variable.

    Returns:
        Configuration class for the specified environment.
    """
    if env is None:
        env = os.environ.get("TEST_ENV", "").strip() or "dev"
    return config.get(env.lower(), config["default"])
