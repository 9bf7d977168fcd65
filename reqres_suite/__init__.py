"""
Reqres user-suite package factory.

This module wires configuration and logging together and builds the
``UsersApi`` client the scenarios talk through, using the factory
pattern so tests and live runs each get an independently configured
client.
"""

from __future__ import annotations

import logging

from config import get_config
from reqres_suite.api import UsersApi

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def create_client(config_name: str | None = None) -> UsersApi:
    """
    Create a ``UsersApi`` client for the given environment.

    Args:
        config_name: Configuration environment name ("live", "testing").
                     If None, uses REQRES_ENV environment variable.

    Returns:
        Client bound to the configured base URL and timeout.
    """
    config_class = get_config(config_name)
    logger.info("Creating users API client with config: %s", config_class.__name__)
    return UsersApi(config_class.BASE_URL, timeout=config_class.REQUEST_TIMEOUT)
