"""Configuration management for the Open Library client.

Loads configuration from environment variables and provides defaults.
"""

import logging
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from ._version import __version__

# Load .env file if present
load_dotenv()

DEFAULT_BASE_URL = "http://openlibrary.org"
DEFAULT_TIMEOUT = 10.0


def default_user_agent() -> str:
    """User-Agent sent with every request."""
    return f"openlibrary-client/{__version__}"


@dataclass
class Config:
    """Client configuration."""

    base_url: str
    timeout: float  # seconds
    user_agent: str
    log_level: str

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from environment variables."""
        return cls(
            base_url=os.environ.get("OPENLIBRARY_BASE_URL", DEFAULT_BASE_URL).rstrip("/"),
            timeout=float(os.environ.get("OPENLIBRARY_TIMEOUT", str(DEFAULT_TIMEOUT))),
            user_agent=os.environ.get("OPENLIBRARY_USER_AGENT") or default_user_agent(),
            log_level=os.environ.get("OPENLIBRARY_LOG_LEVEL", "WARNING").upper(),
        )

    def validate(self) -> list[str]:
        """Validate configuration, return list of errors."""
        errors = []

        if not self.base_url.startswith(("http://", "https://")):
            errors.append(f"Base URL must start with http:// or https://: {self.base_url}")

        if self.timeout <= 0:
            errors.append(f"Timeout must be positive: {self.timeout}")

        if not isinstance(logging.getLevelName(self.log_level), int):
            errors.append(f"Unknown log level: {self.log_level}")

        return errors


# Global config instance
_config: Optional[Config] = None


def get_config() -> Config:
    """Get or create the global config instance."""
    global _config
    if _config is None:
        _config = Config.from_env()
    return _config


def reset_config() -> None:
    """Reset the global config instance. Used for testing."""
    global _config
    _config = None
