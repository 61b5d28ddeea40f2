"""Engine/session helpers for the SQL backend."""
from __future__ import annotations

from contextlib import contextmanager
from functools import lru_cache
from typing import Iterator

from sqlalchemy import create_engine, event, text
from sqlalchemy.orm import declarative_base, sessionmaker, Session

from equipes_api.core.config import get_settings

Base = declarative_base()


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


class Database:
    """Owns the engine (and its connection pool) plus the session factory."""

    def __init__(self, url: str, *, sslmode: str = "") -> None:
        url = (url or "").strip()
        if not url:
            raise RuntimeError("DATABASE_URL must be configured to use the SQL backend.")
        connect_args = {}
        if sslmode and url.startswith("postgresql"):
            connect_args["sslmode"] = sslmode
        self.engine = create_engine(url, future=True, pool_pre_ping=True, connect_args=connect_args)
        if self.engine.dialect.name == "sqlite":
            event.listen(self.engine, "connect", _enable_sqlite_foreign_keys)
        self._sessionmaker = sessionmaker(bind=self.engine, autoflush=False, autocommit=False, future=True)

    @property
    def dialect(self) -> str:
        return self.engine.dialect.name

    @contextmanager
    def session(self) -> Iterator[Session]:
        session: Session = self._sessionmaker()
        try:
            yield session
        finally:
            session.close()

    def ping(self) -> None:
        with self.engine.connect() as conn:
            conn.execute(text("SELECT 1"))

    def create_all(self) -> None:
        from . import models  # noqa: F401  # ensure models are imported for metadata

        Base.metadata.create_all(bind=self.engine)

    def dispose(self) -> None:
        self.engine.dispose()


@lru_cache
def get_database() -> Database:
    """Process-wide handle for scripts run outside the FastAPI app."""
    settings = get_settings()
    return Database(settings.database_url, sslmode=settings.database_sslmode)
