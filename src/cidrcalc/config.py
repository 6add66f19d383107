"""
Configuration management for cidrcalc.

Loads settings from environment variables or a .env file.
"""

import os
from pathlib import Path
from dataclasses import dataclass

from dotenv import load_dotenv


ENV_LOCATIONS = [
    Path.home() / ".cidrcalc" / ".env",
    Path.home() / ".config" / "cidrcalc" / ".env",
    Path.cwd() / ".env",
]

_TRUTHY = {"1", "true", "yes", "on"}

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def load_env_file() -> Path | None:
    """Load the first .env file found in the common locations."""
    for env_path in ENV_LOCATIONS:
        if env_path.exists():
            load_dotenv(env_path)
            return env_path
    return None


@dataclass
class CalcConfig:
    """CLI configuration for logging and output."""

    # Logging
    log_level: str = "WARNING"
    log_file: str = ""

    # Output
    no_color: bool = False

    def __post_init__(self):
        # unknown level names fall back to the default
        level = (self.log_level or "").strip().upper()
        self.log_level = level if level in LOG_LEVELS else "WARNING"

    @classmethod
    def from_env(cls) -> "CalcConfig":
        """Load configuration from environment variables."""
        load_env_file()
        return cls(
            log_level=os.getenv("CIDRCALC_LOG_LEVEL", "WARNING"),
            log_file=os.getenv("CIDRCALC_LOG_FILE", ""),
            no_color=os.getenv("CIDRCALC_NO_COLOR", "").strip().lower() in _TRUTHY,
        )


# Global config instance
_config: CalcConfig | None = None


def get_config() -> CalcConfig:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = CalcConfig.from_env()
    return _config


def set_config(config: CalcConfig | None) -> None:
    """Set the global configuration instance."""
    global _config
    _config = config
