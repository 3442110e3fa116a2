"""Configuration management for row-transform.

Usage:
    >>> from row_transform.config import get_settings
    >>> settings = get_settings()
    >>> settings.default_timezone
    'UTC'

Export templates are loaded through
``row_transform.config.template_loader``.
"""

from row_transform.config.settings import Settings, get_settings

__all__ = ["Settings", "get_settings"]
