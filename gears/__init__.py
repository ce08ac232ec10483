"""Guarded access to registered application settings."""

from gears.backends import Backend, DatabaseBackend, InMemoryBackend
from gears.bootstrap import create_repository
from gears.core.errors import UnregisteredSettingError
from gears.registry import SettingsRegistry
from gears.repository import SettingRepository

__all__ = [
    "Backend",
    "DatabaseBackend",
    "InMemoryBackend",
    "SettingRepository",
    "SettingsRegistry",
    "UnregisteredSettingError",
    "create_repository",
]
