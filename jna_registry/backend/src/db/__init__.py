"""Database session management utilities."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

from fastapi import Request
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session

from ..core.config import Settings
from ..models.base import Base
from .session import build_engine, build_session_factory


class Database:
    """Data-access context owning the engine and its session factory.

    One instance is built per process by the application factory and handed
    to request handlers through :func:`get_session_dependency`.
    """

    def __init__(
        self,
        url: str,
        *,
        ssl_required: bool = False,
        pool_size: int = 5,
    ) -> None:
        self.engine: Engine = build_engine(url, ssl_required=ssl_required, pool_size=pool_size)
        self._session_factory = build_session_factory(self.engine)

    @classmethod
    def from_settings(cls, settings: Settings) -> "Database":
        return cls(
            settings.database_url,
            ssl_required=settings.database_ssl,
            pool_size=settings.database_pool_size,
        )

    @contextmanager
    def session(self) -> Iterator[Session]:
        """Context manager yielding a SQLAlchemy session."""

        db = self._session_factory()
        try:
            yield db
        except Exception:
            db.rollback()
            raise
        finally:
            db.close()

    @contextmanager
    def session_scope(self) -> Iterator[Session]:
        """Provide a transactional scope for scripts and tests."""

        session = self._session_factory()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def create_ledger(self) -> None:
        """Create the registrations table and its indexes if missing."""

        from ..models.registration import Registration

        Registration.__table__.create(bind=self.engine, checkfirst=True)

    def dispose(self) -> None:
        self.engine.dispose()


def get_database(request: Request) -> Database:
    """Return the :class:`Database` attached to the running application."""

    return request.app.state.database


def get_session_dependency(request: Request) -> Iterator[Session]:
    """FastAPI dependency yielding a per-request session."""

    with get_database(request).session() as session:
        yield session


__all__ = [
    "Base",
    "Database",
    "get_database",
    "get_session_dependency",
]
