"""Writes into the consolidated registrations ledger."""

from __future__ import annotations

from typing import Any

import structlog
from sqlalchemy import func, insert, update
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from jna_registry.backend.src.core.errors import DuplicateKey, InfrastructureFailure
from jna_registry.backend.src.models import Registration
from jna_registry.backend.src.schemas.registration import (
    RegistrationSubmission,
    StudentRecord,
)
from jna_registry.backend.src.services.metrics import (
    registry_reconciliation_failures_total,
    registry_registrations_total,
)

LOGGER = structlog.get_logger(__name__)

_UPSERT_DIALECTS = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}


def _ledger_values(record: StudentRecord) -> dict[str, Any]:
    return {
        "full_name": record.full_name,
        "phone_number": record.phone_number,
        "university": record.university,
        "position": record.position,
        "member": record.member,
        "participates_in_jna": record.participates_in_jna.value,
    }


def _insert_or_touch(session: Session, values: dict[str, Any]) -> None:
    """Portable upsert for dialects without ``ON CONFLICT``."""

    try:
        session.execute(insert(Registration).values(**values))
    except IntegrityError:
        session.rollback()
        session.execute(
            update(Registration)
            .where(Registration.phone_number == values["phone_number"])
            .values(registered_at=func.now())
        )


def reconcile(session: Session, record: StudentRecord) -> bool:
    """Mirror a resolved source record into the ledger, best effort.

    New phone numbers are inserted; known ones only get ``registered_at``
    refreshed. Failures are logged and discarded and never reach the caller.
    """

    values = _ledger_values(record)
    dialect = session.get_bind().dialect.name
    try:
        insert_factory = _UPSERT_DIALECTS.get(dialect)
        if insert_factory is None:
            _insert_or_touch(session, values)
        else:
            statement = (
                insert_factory(Registration.__table__)
                .values(**values)
                .on_conflict_do_update(
                    index_elements=["phone_number"],
                    set_={"registered_at": func.now()},
                )
            )
            session.execute(statement)
        session.commit()
    except SQLAlchemyError as exc:
        session.rollback()
        registry_reconciliation_failures_total.inc()
        LOGGER.warning(
            "reconciliation_failed",
            phone_number=record.phone_number,
            error=str(exc),
        )
        return False

    LOGGER.info("registration_reconciled", phone_number=record.phone_number)
    return True


def register(session: Session, submission: RegistrationSubmission) -> Registration:
    """Insert an explicit self-registration.

    Unlike :func:`reconcile` a duplicate is meaningful to the person
    registering and is raised as :class:`DuplicateKey`.
    """

    entry = Registration(
        full_name=submission.full_name,
        phone_number=submission.phone_number,
        university=submission.university,
        position=submission.position or None,
        member=submission.member or None,
        participates_in_jna=submission.participates_in_jna.value,
    )
    session.add(entry)
    try:
        session.commit()
        session.refresh(entry)
    except IntegrityError as exc:
        session.rollback()
        registry_registrations_total.labels(outcome="duplicate").inc()
        LOGGER.info(
            "registration_duplicate",
            phone_number=submission.phone_number,
            error=str(exc.orig),
        )
        raise DuplicateKey(detail=str(exc.orig)) from exc
    except SQLAlchemyError as exc:
        session.rollback()
        raise InfrastructureFailure(detail=str(exc)) from exc

    registry_registrations_total.labels(outcome="created").inc()
    LOGGER.info("registration_saved", phone_number=submission.phone_number)
    return entry


__all__ = ["reconcile", "register"]
