"""Configuration module for the cache driver."""

from .settings import Settings, settings

__all__ = ["Settings", "settings"]
