"""
Configuration settings for the application.
"""

import logging
import os

from dotenv import load_dotenv

from fileshell.exceptions import ConfigurationError

# Load environment variables from .env file
_ = load_dotenv()


class Settings:
    """Application settings loaded from environment variables."""

    def __init__(self):
        self.start_dir: str = self._get_env("FILESHELL_START_DIR", os.getcwd())
        self.log_level: str = self._get_log_level("FILESHELL_LOG_LEVEL", "WARNING")
        self.prompt: str = self._get_env("FILESHELL_PROMPT", "> ")
        self.date_format: str = self._get_env(
            "FILESHELL_DATE_FORMAT", "%Y-%m-%d %H:%M:%S"
        )
        self.color: bool = self._get_bool("FILESHELL_COLOR", True)

    def _get_env(self, key: str, default: str) -> str:
        """Get an environment variable with a default value."""
        return os.getenv(key, default)

    def _get_bool(self, key: str, default: bool) -> bool:
        """Get a boolean flag; '0', 'false' and 'no' disable it."""
        value = os.getenv(key)
        if value is None:
            return default
        return value.strip().lower() not in ("0", "false", "no")

    def _get_log_level(self, key: str, default: str) -> str:
        """Get a logging level name, raise error if it is unknown."""
        value = self._get_env(key, default).strip().upper()
        if not isinstance(logging.getLevelName(value), int):
            raise ConfigurationError(f"Invalid log level in {key}: {value}")
        return value


# Global settings instance
settings = Settings()
