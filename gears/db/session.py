import logging
import time

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from gears.db.models import Base

logger = logging.getLogger(__name__)


def _is_sqlite(url: str) -> bool:
    return url.startswith("sqlite")


def _is_sqlite_memory(url: str) -> bool:
    return _is_sqlite(url) and (url.endswith(":memory:") or url.rstrip("/") in {"sqlite:", "sqlite+pysqlite:"})


def get_engine(database_url: str) -> Engine:
    db_url = database_url.strip()
    if not db_url:
        raise ValueError("DATABASE_URL is required for the database settings backend")

    if _is_sqlite_memory(db_url):
        # every session has to see the same in-memory database
        return create_engine(
            db_url,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )

    connect_args = {"check_same_thread": False} if _is_sqlite(db_url) else {}
    return create_engine(db_url, pool_pre_ping=True, connect_args=connect_args)


def build_session_factory(engine: Engine) -> sessionmaker[Session]:
    return sessionmaker(bind=engine, autoflush=False, autocommit=False, expire_on_commit=False)


def init_db(engine: Engine, *, attempts: int = 10, delay_seconds: float = 2.0) -> None:
    attempts = max(attempts, 1)
    last_error: Exception | None = None

    for attempt in range(1, attempts + 1):
        try:
            Base.metadata.create_all(bind=engine)
            return
        except Exception as exc:
            last_error = exc
            logger.warning(
                "Database init attempt failed",
                extra={
                    "event": "db_init_retry",
                    "attempt": attempt,
                    "max_attempts": attempts,
                    "error": str(exc),
                },
            )
            if attempt < attempts:
                time.sleep(delay_seconds)

    raise RuntimeError(f"Database initialization failed after {attempts} attempts: {last_error}")
