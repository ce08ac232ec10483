from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from sqlalchemy import delete, func, select
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, sessionmaker

from gears.db.models import SettingRecord

_UPSERT_INSERTS = {
    "sqlite": sqlite.insert,
    "postgresql": postgresql.insert,
}


class DatabaseBackend:
    """Stores settings in the ``settings`` table, one session and commit per call.

    Values go into a JSON column, so they have to be JSON-serializable.
    Batch calls share a single transaction. Writes are upserts, so concurrent
    first writes of the same key overwrite each other instead of colliding
    on the primary key.
    """

    def __init__(self, session_factory: sessionmaker[Session]) -> None:
        self._session_factory = session_factory

    def get_setting(self, key: str) -> Any:
        with self._session_factory() as session:
            record = session.get(SettingRecord, key)
            return record.value if record is not None else None

    def set_setting(self, key: str, value: Any) -> None:
        self.set_settings({key: value})

    def remove_setting(self, key: str) -> None:
        self.remove_settings([key])

    def all_settings(self) -> dict[str, Any]:
        with self._session_factory() as session:
            records = session.execute(
                select(SettingRecord).order_by(SettingRecord.key.asc())
            ).scalars().all()
            return {record.key: record.value for record in records}

    def set_settings(self, settings: Mapping[str, Any]) -> None:
        if not settings:
            return

        rows = [{"key": key, "value": value} for key, value in settings.items()]
        with self._session_factory() as session:
            insert = _UPSERT_INSERTS.get(session.get_bind().dialect.name)
            if insert is None:
                self._write_rows(session, rows)
            else:
                stmt = insert(SettingRecord).values(rows)
                session.execute(
                    stmt.on_conflict_do_update(
                        index_elements=[SettingRecord.key],
                        set_={"value": stmt.excluded["value"], "updated_at": func.now()},
                    )
                )
            session.commit()

    def remove_settings(self, keys: Iterable[str]) -> None:
        keys = list(keys)
        if not keys:
            return

        with self._session_factory() as session:
            session.execute(delete(SettingRecord).where(SettingRecord.key.in_(keys)))
            session.commit()

    def _write_rows(self, session: Session, rows: list[dict[str, Any]]) -> None:
        for row in rows:
            record = session.get(SettingRecord, row["key"])
            if record is not None:
                record.value = row["value"]
                continue

            try:
                with session.begin_nested():
                    session.add(SettingRecord(**row))
            except IntegrityError:
                # another writer inserted the row first
                session.get(SettingRecord, row["key"], populate_existing=True).value = row["value"]
