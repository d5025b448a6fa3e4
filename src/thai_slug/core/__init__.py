"""Core module for thai-slug.

This module provides core functionality including:
- Configuration management (Settings, get_settings)
- Custom exceptions (ThaiSlugException and subclasses)
- Logging utilities
"""

from thai_slug.core.config import Settings, get_settings
from thai_slug.core.exceptions import ConfigurationError, ThaiSlugException
from thai_slug.core.logging import get_logger, setup_logging

__all__ = [
    "ConfigurationError",
    "Settings",
    "ThaiSlugException",
    "get_logger",
    "get_settings",
    "setup_logging",
]
