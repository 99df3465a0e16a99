"""Configuration module for AUA client connection settings.

This module provides a Pydantic-based configuration class with support for
YAML file loading and validation.
"""

from aua.config.client_config import DEFAULT_USER_AGENT, ClientConfig

__all__ = [
    "ClientConfig",
    "DEFAULT_USER_AGENT",
]
