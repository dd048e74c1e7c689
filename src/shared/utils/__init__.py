"""Shared utility functions."""

from .config_validator import ConfigurationError, require_env
from .logging import setup_logging
from .env import load_env

__all__ = ["ConfigurationError", "require_env", "setup_logging", "load_env"]
