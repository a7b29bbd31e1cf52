"""
Bowling - Application Settings

Loads configuration from environment variables using Pydantic Settings and
applies the configured log level to the package loggers.
"""

import logging
from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application
    debug: bool = False
    log_level: str = "INFO"

    model_config = {
        "env_prefix": "BOWLING_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
    }

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {LOG_LEVELS}, got {value!r}.")
        return level

    @property
    def effective_log_level(self) -> int:
        """Numeric log level; debug mode always logs at DEBUG."""
        if self.debug:
            return logging.DEBUG
        return getattr(logging, self.log_level)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Cached singleton settings instance."""
    return Settings()


def configure_logging(settings: Settings | None = None) -> None:
    """Set up the root handler and the level of the ``bowling`` loggers."""
    settings = settings or get_settings()
    logging.basicConfig(format=LOG_FORMAT)
    logging.getLogger("bowling").setLevel(settings.effective_log_level)
