"""
Configuration validation utilities.

Provides helpers for reading required environment variables with clear error messages.
Secret values are never included in the messages.
"""

import os
from typing import Mapping, Optional


class ConfigurationError(Exception):
    """Raised when required configuration is missing or invalid."""
    pass


def require_env(name: str, description: Optional[str] = None,
                environ: Optional[Mapping[str, str]] = None) -> str:
    """
    Require an environment variable to be set.

    Args:
        name: Environment variable name
        description: Optional description of what the variable is used for
        environ: Mapping to read from instead of the process environment

    Returns:
        The value of the environment variable

    Raises:
        ConfigurationError: If the environment variable is not set or empty
    """
    source = os.environ if environ is None else environ
    value = source.get(name)

    if not value:
        desc_msg = f" ({description})" if description else ""
        raise ConfigurationError(f"Missing required environment variable: {name}{desc_msg}.")

    return value


def get_env_or_default(name: str, default: str,
                       environ: Optional[Mapping[str, str]] = None) -> str:
    """
    Get an environment variable with a default value.

    Args:
        name: Environment variable name
        default: Default value if not set or empty
        environ: Mapping to read from instead of the process environment

    Returns:
        The value of the environment variable or the default
    """
    source = os.environ if environ is None else environ
    return source.get(name) or default
