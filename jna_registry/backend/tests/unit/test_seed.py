"""Tests for development seeding."""

from __future__ import annotations

from jna_registry.backend.src.db import Database
from jna_registry.backend.src.services.resolver import CascadingResolver
from jna_registry.backend.src.services.seed import DEFAULT_STUDENT_PHONE, seed_demo_student
from jna_registry.backend.src.services.sources import StaticSourceEnumerator


def test_seed_demo_student_is_idempotent(database: Database) -> None:
    with database.session_scope() as session:
        first = seed_demo_student(session)
    with database.session_scope() as session:
        second = seed_demo_student(session)

    assert first.created is True
    assert second.created is False
    assert second.student.id == first.student.id


def test_seeded_student_is_resolvable(database: Database) -> None:
    with database.session_scope() as session:
        seed_demo_student(session)
    resolver = CascadingResolver(StaticSourceEnumerator(["students"]))

    with database.session() as session:
        result = resolver.lookup(session, DEFAULT_STUDENT_PHONE[-8:])

    assert result.source == "students"
    assert result.record.phone_number == DEFAULT_STUDENT_PHONE
