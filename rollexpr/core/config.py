"""
Configuration management for rollexpr.

Provides centralized configuration loading from environment variables
with sensible defaults for all settings.
"""

import logging
import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

VALID_LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in ('true', '1', 'yes')


class Config:
    """
    Centralized configuration management for rollexpr.

    Loads configuration from environment variables with fallback defaults.
    Supports .env files via python-dotenv.

    Example:
        config = Config()
        print(config.default_roll)  # d
        print(config.port)          # 5000
    """

    def __init__(self, env_file: Optional[str] = None):
        """
        Initialize configuration.

        Args:
            env_file: Optional path to .env file. If None, auto-discovers .env
                     in the current directory or skips if not found.
        """
        if env_file:
            load_dotenv(env_file)
            logger.info(f"Loaded configuration from {env_file}")
        else:
            env_path = Path.cwd() / '.env'
            if env_path.exists():
                load_dotenv(env_path)
                logger.info(f"Loaded configuration from {env_path}")
            else:
                logger.debug("No .env file found, using environment variables and defaults")

        # === Logging ===
        self.log_level = os.getenv('ROLLEXPR_LOG_LEVEL', 'WARNING').upper()
        self.log_file = os.getenv('ROLLEXPR_LOG_FILE', None)

        # === Rolling ===
        self.seed_raw = os.getenv('ROLLEXPR_SEED', '')
        self.default_roll = os.getenv('ROLLEXPR_DEFAULT_ROLL', 'd')

        # === Web API ===
        self.host = os.getenv('ROLLEXPR_HOST', '127.0.0.1')
        self.port_raw = os.getenv('ROLLEXPR_PORT', '5000')
        self.debug = _env_flag('ROLLEXPR_DEBUG', 'False')
        self.max_times_raw = os.getenv('ROLLEXPR_MAX_TIMES', '100')
        self.max_dice_raw = os.getenv('ROLLEXPR_MAX_DICE', '10000')

    @property
    def seed(self) -> Optional[int]:
        """Seed for the default roller, or None for system entropy."""
        if not self.seed_raw:
            return None
        try:
            return int(self.seed_raw)
        except ValueError:
            return None

    @property
    def port(self) -> int:
        try:
            return int(self.port_raw)
        except ValueError:
            return 5000

    @property
    def max_times(self) -> int:
        try:
            return max(1, int(self.max_times_raw))
        except ValueError:
            return 100

    @property
    def max_dice(self) -> int:
        """Most dice a single web request may roll per evaluation."""
        try:
            return max(1, int(self.max_dice_raw))
        except ValueError:
            return 10000

    def validate(self) -> bool:
        """
        Validate configuration and log warnings for bad values.

        Returns:
            True if config is valid, False if any value had to fall back
        """
        valid = True

        if self.log_level not in VALID_LOG_LEVELS:
            logger.error(f"Invalid ROLLEXPR_LOG_LEVEL: {self.log_level}. "
                         f"Must be one of {', '.join(VALID_LOG_LEVELS)}")
            self.log_level = 'WARNING'
            valid = False

        if self.seed_raw and self.seed is None:
            logger.warning(f"ROLLEXPR_SEED is not an integer: {self.seed_raw!r}. Ignoring it.")
            valid = False

        if self.port_raw and str(self.port) != self.port_raw.strip():
            logger.warning(f"ROLLEXPR_PORT is not an integer: {self.port_raw!r}. Using {self.port}.")
            valid = False

        if str(self.max_times) != self.max_times_raw.strip():
            logger.warning(f"ROLLEXPR_MAX_TIMES is invalid: {self.max_times_raw!r}. Using {self.max_times}.")
            valid = False

        if str(self.max_dice) != self.max_dice_raw.strip():
            logger.warning(f"ROLLEXPR_MAX_DICE is invalid: {self.max_dice_raw!r}. Using {self.max_dice}.")
            valid = False

        return valid

    def __repr__(self) -> str:
        return (
            f"Config("
            f"log_level={self.log_level}, "
            f"seed={self.seed}, "
            f"default_roll={self.default_roll!r}, "
            f"host={self.host}, "
            f"port={self.port}, "
            f"debug={self.debug})"
        )


# Global config instance (lazy-loaded)
_config: Optional[Config] = None


def get_config() -> Config:
    """
    Get the global config instance (singleton pattern).

    Returns:
        Global Config instance
    """
    global _config
    if _config is None:
        _config = Config()
        _config.validate()
    return _config


def reset_config() -> None:
    """Drop the cached config so the next get_config() re-reads the environment."""
    global _config
    _config = None


__all__ = ['Config', 'get_config', 'reset_config']
