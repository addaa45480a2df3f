"""SQLAlchemy engine and session factory configuration."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import structlog
from sqlalchemy import create_engine
from sqlalchemy.engine import URL, Engine, make_url
from sqlalchemy.orm import Session, sessionmaker

LOGGER = structlog.get_logger(__name__)
PROJECT_ROOT = Path(__file__).resolve().parents[4]


def _normalize_database_url(raw_url: str) -> URL:
    """Return a usable :class:`~sqlalchemy.engine.URL` for the configured database.

    Hosted PostgreSQL providers still hand out ``postgres://`` URLs, which
    SQLAlchemy no longer accepts. Relative SQLite paths are anchored at the
    project root so scripts and the API share one file.
    """

    if raw_url.startswith("postgres://"):
        raw_url = "postgresql://" + raw_url[len("postgres://") :]

    url = make_url(raw_url)
    if not url.drivername.startswith("sqlite"):
        return url

    database = url.database or ""
    if database in {"", ":memory:"}:
        return url

    db_path = Path(database)
    if db_path.is_absolute():
        resolved = db_path
    else:
        resolved = PROJECT_ROOT / db_path

    resolved = resolved.resolve()
    if resolved != db_path:
        LOGGER.info(
            "database_path_normalized",
            original=str(db_path),
            resolved=str(resolved),
        )

    return url.set(database=str(resolved))


def build_engine(
    raw_url: str,
    *,
    ssl_required: bool = False,
    pool_size: int = 5,
) -> Engine:
    """Create the pooled engine used for every request."""

    url = _normalize_database_url(raw_url)
    options: dict[str, Any] = {"pool_pre_ping": True, "future": True}
    if url.drivername.startswith("postgresql"):
        options["pool_size"] = pool_size
        if ssl_required:
            options["connect_args"] = {"sslmode": "require"}

    engine = create_engine(url, **options)
    LOGGER.info(
        "database_engine_initialized",
        url=url.render_as_string(hide_password=True),
    )
    return engine


def build_session_factory(engine: Engine) -> sessionmaker[Session]:
    """Return the session factory bound to ``engine``."""

    return sessionmaker(
        bind=engine,
        autocommit=False,
        autoflush=False,
        expire_on_commit=False,
    )


__all__ = ["build_engine", "build_session_factory"]
