from __future__ import annotations

from contextlib import contextmanager

from sqlalchemy import Engine, event
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from config import settings


def _is_sqlite(url: str) -> bool:
    return url.startswith("sqlite:")


def _is_sqlite_memory(url: str) -> bool:
    return url in ("sqlite://", "sqlite:///:memory:")


def make_engine(url: str) -> Engine:
    """
    Build an engine for the reports store.

    In-memory SQLite shares one connection across threads (StaticPool) so a
    FastAPI worker thread sees the tables created at startup.
    """
    if not _is_sqlite(url):
        return create_engine(url, pool_pre_ping=True)

    if _is_sqlite_memory(url):
        return create_engine(url, connect_args={"check_same_thread": False}, poolclass=StaticPool)

    # timeout is in seconds for sqlite3.connect(); helps transient lock contention.
    eng = create_engine(url, connect_args={"check_same_thread": False, "timeout": 60}, pool_pre_ping=True)

    # WAL lets dashboard readers run while the seed loader writes.
    @event.listens_for(eng, "connect")
    def _set_sqlite_pragmas(dbapi_connection, _connection_record) -> None:
        cur = dbapi_connection.cursor()
        cur.execute("PRAGMA journal_mode=WAL;")
        cur.execute("PRAGMA synchronous=NORMAL;")
        cur.execute("PRAGMA busy_timeout=60000;")  # ms
        cur.close()

    return eng


engine = make_engine(settings.database_url)

SessionLocal = sessionmaker(bind=engine, autocommit=False, autoflush=False, future=True)


@contextmanager
def session_scope() -> Session:
    db = SessionLocal()
    try:
        yield db
        db.commit()
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()


def get_db() -> Session:
    """FastAPI dependency: one read session per request."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
