"""SQLAlchemy model and session helpers for the settings table."""

from gears.db.models import Base, SettingRecord
from gears.db.session import build_session_factory, get_engine, init_db

__all__ = ["Base", "SettingRecord", "build_session_factory", "get_engine", "init_db"]
