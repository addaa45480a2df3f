"""Cascading phone number resolution across source tables and the ledger."""

from __future__ import annotations

from dataclasses import dataclass

import structlog
from sqlalchemy import select, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from jna_registry.backend.src.core.config import Settings
from jna_registry.backend.src.core.errors import (
    InfrastructureFailure,
    InvalidFormat,
    SourceUnavailable,
)
from jna_registry.backend.src.models import Registration
from jna_registry.backend.src.schemas.registration import StudentRecord
from jna_registry.backend.src.services import reconciliation
from jna_registry.backend.src.services.metrics import (
    registry_lookups_total,
    registry_source_errors_total,
)
from jna_registry.backend.src.services.phone import is_canonical, normalize_phone
from jna_registry.backend.src.services.sources import (
    SourceEnumerator,
    build_source_enumerator,
)

LOGGER = structlog.get_logger(__name__)

LEDGER_SOURCE = "ledger"


@dataclass(frozen=True)
class ResolutionResult:
    """Outcome of a lookup; ``found=False`` is a valid negative answer."""

    found: bool
    record: StudentRecord | None = None
    source: str | None = None

    @property
    def from_ledger(self) -> bool:
        return self.found and self.source == LEDGER_SOURCE


NOT_FOUND = ResolutionResult(found=False)


class CascadingResolver:
    """Check each candidate source in priority order, then the ledger.

    The first source returning a row wins. A source that raises is logged and
    skipped so one broken table never aborts the whole lookup.
    """

    def __init__(self, enumerator: SourceEnumerator) -> None:
        self.enumerator = enumerator

    @classmethod
    def from_settings(cls, settings: Settings) -> "CascadingResolver":
        return cls(build_source_enumerator(settings))

    def resolve(self, session: Session, phone_number: str) -> ResolutionResult:
        if not is_canonical(phone_number):
            raise InvalidFormat(detail="resolver requires a canonical phone number")

        for source in self.enumerator.sources(session):
            try:
                record = self._lookup_source(session, source, phone_number)
            except SourceUnavailable as exc:
                registry_source_errors_total.labels(source=source).inc()
                LOGGER.warning("source_lookup_failed", source=source, error=exc.detail)
                continue
            if record is not None:
                LOGGER.info("student_resolved", source=source, phone_number=phone_number)
                return ResolutionResult(found=True, record=record, source=source)

        entry = self._lookup_ledger(session, phone_number)
        if entry is not None:
            LOGGER.info("student_resolved", source=LEDGER_SOURCE, phone_number=phone_number)
            return ResolutionResult(
                found=True,
                record=StudentRecord.model_validate(entry),
                source=LEDGER_SOURCE,
            )
        return NOT_FOUND

    def lookup(self, session: Session, raw_phone: str | None) -> ResolutionResult:
        """Normalize, resolve and mirror a source hit into the ledger."""

        try:
            phone_number = normalize_phone(raw_phone)
        except InvalidFormat:
            registry_lookups_total.labels(outcome="invalid").inc()
            raise

        result = self.resolve(session, phone_number)
        if not result.found:
            registry_lookups_total.labels(outcome="not_found").inc()
            return result

        if result.from_ledger:
            registry_lookups_total.labels(outcome="ledger").inc()
        else:
            registry_lookups_total.labels(outcome="source").inc()
            reconciliation.reconcile(session, result.record)
        return result

    @staticmethod
    def _lookup_source(session: Session, source: str, phone_number: str) -> StudentRecord | None:
        quoted = session.get_bind().dialect.identifier_preparer.quote(source)
        statement = text(f"SELECT * FROM {quoted} WHERE phone_number = :phone LIMIT 1")
        try:
            row = session.execute(statement, {"phone": phone_number}).mappings().first()
        except SQLAlchemyError as exc:
            session.rollback()
            raise SourceUnavailable(source, detail=str(exc)) from exc
        if row is None:
            return None
        return StudentRecord.from_row(row)

    @staticmethod
    def _lookup_ledger(session: Session, phone_number: str) -> Registration | None:
        try:
            return session.execute(
                select(Registration)
                .where(Registration.phone_number == phone_number)
                .limit(1)
            ).scalars().first()
        except SQLAlchemyError as exc:
            session.rollback()
            raise InfrastructureFailure(detail=str(exc)) from exc


__all__ = ["LEDGER_SOURCE", "NOT_FOUND", "CascadingResolver", "ResolutionResult"]
