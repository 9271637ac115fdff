"""
Cache Driver Configuration Settings

This module contains the configuration defaults for the cache driver.
Options passed to a driver instance always take precedence over these.
"""

import os
from dataclasses import dataclass


@dataclass
class Settings:
    """Driver configuration settings."""

    # Connection target
    REDIS_HOST: str = os.environ.get("CACHE_REDIS_HOST", "127.0.0.1")
    REDIS_PORT: int = int(os.environ.get("CACHE_REDIS_PORT", "6379"))

    # Return str instead of bytes from reads (bytes by default)
    DECODE_RESPONSES: bool = os.environ.get("CACHE_DECODE_RESPONSES", "false").lower() == "true"

    # Logging settings
    DEBUG: bool = os.environ.get("CACHE_DEBUG", "false").lower() == "true"
    LOG_LEVEL: str = os.environ.get("CACHE_LOG_LEVEL", "INFO")


# Global settings instance
settings = Settings()
