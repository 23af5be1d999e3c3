"""
Database engine and session management.

`Datasource` owns one SQLAlchemy engine (and its connection pool) for the
whole process. It is built once at startup and handed to every repository;
each repository call opens its own short-lived session.
"""
from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterator

from sqlalchemy import create_engine, event, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from qservice.config import DatabaseConfig
from qservice.db import models

logger = logging.getLogger(__name__)


def _engine_kwargs(url: str, pool_size: int, pool_timeout: int, echo: bool) -> dict:
    if url.startswith("sqlite"):
        kwargs = {"echo": echo, "connect_args": {"check_same_thread": False}}
        if ":memory:" in url or url.rstrip("/") in ("sqlite:", "sqlite+pysqlite:"):
            # One shared connection so every session sees the same schema.
            kwargs["poolclass"] = StaticPool
        return kwargs
    return {
        "echo": echo,
        "pool_size": pool_size,
        "pool_timeout": pool_timeout,
        "pool_pre_ping": True,
    }


def _enable_sqlite_foreign_keys(engine: Engine) -> None:
    @event.listens_for(engine, "connect")
    def _set_pragma(dbapi_connection, connection_record):  # pragma: no cover - trivial
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


class Datasource:
    def __init__(self, url: str, *, pool_size: int = 5, pool_timeout: int = 30, echo: bool = False):
        self.url = url
        self.engine = create_engine(url, **_engine_kwargs(url, pool_size, pool_timeout, echo))
        if self.engine.dialect.name == "sqlite":
            _enable_sqlite_foreign_keys(self.engine)
        self.SessionLocal = sessionmaker(bind=self.engine, autoflush=False, expire_on_commit=False)

    @classmethod
    def from_config(cls, config: DatabaseConfig) -> "Datasource":
        return cls(
            config.url,
            pool_size=config.pool_size,
            pool_timeout=config.pool_timeout,
            echo=config.echo,
        )

    @contextmanager
    def session(self) -> Iterator[Session]:
        """Yield a session; roll back on error and always close."""
        db = self.SessionLocal()
        try:
            yield db
        except Exception:
            db.rollback()
            raise
        finally:
            db.close()

    def ping(self) -> None:
        """Fail fast when the database is unreachable."""
        with self.engine.connect() as conn:
            conn.execute(text("SELECT 1"))

    def create_schema(self) -> None:
        """Create tables directly from metadata (SQLite / local runs; production uses alembic)."""
        models.Base.metadata.create_all(bind=self.engine)

    def dispose(self) -> None:
        logger.info("datasource_dispose: dialect=%s", self.engine.dialect.name)
        self.engine.dispose()
