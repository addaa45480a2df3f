"""Candidate source enumeration for phone number lookups."""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum
from typing import Protocol

import structlog
from sqlalchemy import inspect
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from jna_registry.backend.src.core.config import LEDGER_TABLE, Settings

LOGGER = structlog.get_logger(__name__)


class SourceStrategy(str, Enum):
    STATIC = "static"
    DYNAMIC = "dynamic"


class SourceEnumerator(Protocol):
    """Produces the ordered list of tables to check for a lookup."""

    def sources(self, session: Session) -> list[str]: ...


class StaticSourceEnumerator:
    """Fixed source tables, checked in declared order."""

    def __init__(self, tables: Sequence[str]) -> None:
        self.tables = [table for table in tables if table]

    def sources(self, session: Session) -> list[str]:
        return list(self.tables)


class DynamicSourceEnumerator:
    """Every catalog table whose name starts with ``prefix``, sorted by name.

    Used where source tables are sharded per period (``students_2023``,
    ``students_2024`` ...) and their number is not known up front. The ledger
    is never treated as a source even if its name matches.
    """

    def __init__(self, prefix: str, *, ledger_table: str = LEDGER_TABLE) -> None:
        self.prefix = prefix
        self.ledger_table = ledger_table

    def sources(self, session: Session) -> list[str]:
        try:
            table_names = inspect(session.connection()).get_table_names()
        except SQLAlchemyError as exc:
            LOGGER.warning("source_discovery_failed", prefix=self.prefix, error=str(exc))
            session.rollback()
            return []

        matches = sorted(
            name
            for name in table_names
            if name.startswith(self.prefix) and name != self.ledger_table
        )
        if not matches:
            LOGGER.info("source_discovery_empty", prefix=self.prefix)
        return matches


def build_source_enumerator(settings: Settings) -> SourceEnumerator:
    """Return the enumerator selected by ``SOURCE_STRATEGY``."""

    strategy = SourceStrategy(settings.source_strategy)
    if strategy is SourceStrategy.DYNAMIC:
        return DynamicSourceEnumerator(
            settings.source_table_prefix, ledger_table=settings.ledger_table
        )
    return StaticSourceEnumerator(settings.source_tables)


__all__ = [
    "DynamicSourceEnumerator",
    "SourceEnumerator",
    "SourceStrategy",
    "StaticSourceEnumerator",
    "build_source_enumerator",
]
