"""
Runtime configuration for netstrutils.

Settings come from environment variables (optionally loaded from a .env file).
They are re-read on every get_config() call so a process can change them
without reimporting the package.
"""

import logging
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

# Load environment variables
load_dotenv()

logger = logging.getLogger(__name__)

_TRUE_VALUES = {"1", "true", "yes", "on"}


def _env_flag(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in _TRUE_VALUES


@dataclass(frozen=True)
class Config:
    """
    Library settings.

    Attributes:
        strict_hex: Raise InvalidHexError instead of decoding bad digits as 0
        log_level: Level name applied to the package logger, if any
    """
    strict_hex: bool = False
    log_level: Optional[str] = None

    @classmethod
    def from_env(cls) -> "Config":
        return cls(
            strict_hex=_env_flag("NETSTRUTILS_STRICT_HEX"),
            log_level=os.getenv("NETSTRUTILS_LOG_LEVEL") or None,
        )


def get_config() -> Config:
    """Return the current configuration built from the environment."""
    return Config.from_env()


def configure_logging(config: Optional[Config] = None) -> None:
    """
    Apply the configured log level to the package logger.

    Does nothing when NETSTRUTILS_LOG_LEVEL is unset. Handlers are left to
    the application.

    Raises:
        ValueError: If the level name is not a known logging level
    """
    config = config or get_config()
    if not config.log_level:
        return

    level = logging.getLevelName(config.log_level.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {config.log_level}")

    logging.getLogger("netstrutils").setLevel(level)
    logger.debug(f"netstrutils log level set to {config.log_level.upper()}")
