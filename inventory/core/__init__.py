"""Core: config, constants, validation store and application bootstrap.

Single place for settings and shared constants.
"""

from inventory.core.config import Settings, get_settings

__all__ = ["Settings", "get_settings"]
