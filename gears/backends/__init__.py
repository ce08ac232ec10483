"""Storage backends the setting repository can delegate to."""

from gears.backends.base import Backend
from gears.backends.database import DatabaseBackend
from gears.backends.memory import InMemoryBackend

__all__ = ["Backend", "DatabaseBackend", "InMemoryBackend"]
