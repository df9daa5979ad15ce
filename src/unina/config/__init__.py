"""Configuration management for unina.

Usage:
    >>> from unina.config import get_settings
    >>> settings = get_settings()
    >>> print(settings.database_path)
"""

from unina.config.settings import DEFAULT_DATABASE_PATH, Settings, get_settings

__all__ = [
    "DEFAULT_DATABASE_PATH",
    "Settings",
    "get_settings",
]
