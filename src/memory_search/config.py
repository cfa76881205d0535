"""
Configuration from environment variables.

Loads .env.local (local dev) or .env from the working directory if present, then
reads settings with defaults:

    MEMORY_SEARCH_POOL_SIZE       candidate pool size per query (default: 50)
    MEMORY_SEARCH_DEFAULT_LIMIT   results when caller passes none (default: 3)
    LOG_LEVEL                     console log level (default: INFO)
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from .ranking import DEFAULT_LIMIT, validate_limit

logger = logging.getLogger(__name__)

DEFAULT_POOL_SIZE = 50


def load_env_files(root: Optional[Path] = None) -> None:
    """
    Load .env.local first (highest priority), then .env as fallback.

    Args:
        root: Directory holding the env files (default: current working directory)
    """
    root = Path(root) if root is not None else Path.cwd()
    env_local = root / ".env.local"
    env_file = root / ".env"

    if env_local.exists():
        logger.info(f"Loading environment from: {env_local}")
        load_dotenv(env_local, override=True)
    elif env_file.exists():
        logger.info(f"Loading environment from: {env_file}")
        load_dotenv(env_file, override=True)


def _int_env(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return default
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {value!r}")


@dataclass(frozen=True)
class SearchSettings:
    """Search configuration (immutable)"""
    pool_size: int = DEFAULT_POOL_SIZE
    default_limit: int = DEFAULT_LIMIT
    log_level: str = "INFO"

    def __post_init__(self):
        if self.pool_size < 1:
            raise ValueError(f"pool_size must be positive, got {self.pool_size}")
        validate_limit(self.default_limit)


def load_settings(load_env: bool = True, env_dir: Optional[Path] = None) -> SearchSettings:
    """
    Build settings from environment variables.

    Args:
        load_env: Load .env.local / .env before reading variables
        env_dir: Directory holding the env files (default: current working directory)

    Raises:
        ValueError: A variable is set but not a valid value
    """
    if load_env:
        load_env_files(env_dir)

    settings = SearchSettings(
        pool_size=_int_env("MEMORY_SEARCH_POOL_SIZE", DEFAULT_POOL_SIZE),
        default_limit=_int_env("MEMORY_SEARCH_DEFAULT_LIMIT", DEFAULT_LIMIT),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
    )
    logger.debug(f"Loaded settings: {settings}")
    return settings
