"""Environment variable loading utilities.

Deployed functions receive their configuration from the platform (including
secrets mounted as environment variables); local runs read `.env` files.
"""

from __future__ import annotations
from pathlib import Path
from typing import List, Optional
import logging

from dotenv import load_dotenv

logger = logging.getLogger(__name__)


def _discover_env_files(start: Path) -> List[Path]:
    """Return .env files from the filesystem root down to ``start``."""
    candidates = [parent / ".env" for parent in reversed(list(start.parents))]
    candidates.append(start / ".env")
    return [path for path in candidates if path.exists()]


def load_env(env_file: Optional[str] = None, override: bool = False) -> None:
    """Load environment variables from .env files.

    Args:
        env_file: Path to a .env file. If None, searches the current directory
                 and its parents, loading outermost files first.
        override: Whether to override existing environment variables. Values
                 injected by the platform win by default.
    """
    if env_file:
        env_path = Path(env_file)
        env_paths = [env_path] if env_path.exists() else []
    else:
        env_paths = _discover_env_files(Path.cwd())

    if not env_paths:
        logger.debug("No .env file found, using system environment")
        return

    for path in dict.fromkeys(env_paths):
        load_dotenv(path, override=override)
        logger.debug("Loaded environment from %s", path)
