"""Core primitives: configuration and errors."""

from gears.core.config import Settings, get_settings
from gears.core.errors import UnregisteredSettingError

__all__ = ["Settings", "UnregisteredSettingError", "get_settings"]
