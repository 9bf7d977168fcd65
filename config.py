"""
Suite configuration module.

This module defines configuration classes for the environments the
user scenarios run in (live, testing). Values are loaded from
environment variables with sensible defaults.
"""

from __future__ import annotations

import os


def _optional_float(value: str | None) -> float | None:
    """Convert an optional environment string to a float, keeping None as None."""
    if value is None or value == "":
        return None
    return float(value)


class Config:
    """Base configuration with default settings."""

    # Root of the public user API; every request path is appended to it.
    BASE_URL: str = os.environ.get("REQRES_BASE_URL", "https://reqres.in/api")

    # Seconds to wait for a response.  None leaves the HTTP client's
    # default in place (wait until the server answers or the socket fails).
    REQUEST_TIMEOUT: float | None = _optional_float(os.environ.get("REQRES_REQUEST_TIMEOUT"))


class LiveConfig(Config):
    """Configuration for running the scenarios against the real service."""


class TestingConfig(Config):
    """Offline testing configuration."""

    __test__ = False

    # Non-routable host so unit tests never leak real HTTP requests.
    BASE_URL: str = os.environ.get("TEST_REQRES_BASE_URL", "http://reqres.test/api")
    REQUEST_TIMEOUT: float | None = 1.0


# Configuration mapping for easy access
config = {
    "live": LiveConfig,
    "testing": TestingConfig,
    "default": LiveConfig,
}


def get_config(env: str | None = None) -> type[Config]:
    """
    Get the configuration class for the specified environment.

    Args:
        env: Environment name (live, testing).
             If None, uses REQRES_ENV environment variable.

    Returns:
        Configuration class for the specified environment.
    """
    if env is None:
        env = os.environ.get("REQRES_ENV", "live")
    return config.get(env, config["default"])
