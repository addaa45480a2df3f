"""Utilities for seeding development data."""

from __future__ import annotations

from dataclasses import dataclass

from sqlalchemy.orm import Session

from jna_registry.backend.src.models import Student

DEFAULT_STUDENT_NAME = "Amira Ben Salah"
DEFAULT_STUDENT_PHONE = "21693195501"
DEFAULT_UNIVERSITY = "Université de Tunis El Manar"
DEFAULT_POSITION = "Présidente"
DEFAULT_MEMBER = "Club Informatique"


@dataclass
class SeedResult:
    """Information about the seeded source student."""

    student: Student
    created: bool


def seed_demo_student(
    session: Session,
    *,
    full_name: str = DEFAULT_STUDENT_NAME,
    phone_number: str = DEFAULT_STUDENT_PHONE,
    university: str = DEFAULT_UNIVERSITY,
    position: str | None = DEFAULT_POSITION,
    member: str | None = DEFAULT_MEMBER,
) -> SeedResult:
    """Ensure a demo student exists in the default source table.

    Returns a :class:`SeedResult` describing whether a new row was created.
    """

    student = (
        session.query(Student).filter(Student.phone_number == phone_number).one_or_none()
    )
    if student is not None:
        return SeedResult(student=student, created=False)

    student = Student(
        full_name=full_name,
        phone_number=phone_number,
        university=university,
        position=position,
        member=member,
        participates_in_jna="OUI",
    )
    session.add(student)
    session.flush()
    return SeedResult(student=student, created=True)


__all__ = ["SeedResult", "seed_demo_student"]
