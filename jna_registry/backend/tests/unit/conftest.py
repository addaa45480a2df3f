"""Shared fixtures: an isolated SQLite database per test."""

from __future__ import annotations

import os
import sys
from collections.abc import Callable, Iterator
from pathlib import Path

sys.path.append(str(Path(__file__).resolve().parents[4]))

os.environ.setdefault("DATABASE_URL", "sqlite:///./test_registry.db")

import pytest
from sqlalchemy import Column, Integer, MetaData, String, Table

from jna_registry.backend.src.db import Database
from jna_registry.backend.src.models import Student
from jna_registry.backend.src.models.base import Base

StudentRow = dict[str, str | None]


@pytest.fixture()
def database(tmp_path: Path) -> Iterator[Database]:
    db = Database(f"sqlite:///{tmp_path / 'registry.db'}")
    Base.metadata.create_all(bind=db.engine)
    yield db
    Base.metadata.drop_all(bind=db.engine)
    db.dispose()


@pytest.fixture()
def add_student(database: Database) -> Callable[..., None]:
    """Insert a row into the default ``students`` source table."""

    def _add(**fields: str | None) -> None:
        with database.session_scope() as session:
            session.add(Student(**fields))

    return _add


@pytest.fixture()
def source_table(database: Database) -> Iterator[Callable[..., Table]]:
    """Create an extra source table and fill it with the given rows."""

    metadata = MetaData()

    def _create(
        name: str,
        rows: list[StudentRow] | None = None,
        *,
        legacy: bool = False,
        broken: bool = False,
    ) -> Table:
        if broken:
            # No phone_number column at all, so every lookup against it fails.
            table = Table(name, metadata, Column("id", Integer, primary_key=True), Column("nom", String(100)))
            table.create(bind=database.engine)
            return table

        columns = [
            Column("id", Integer, primary_key=True),
            Column("full_name", String(100)),
            Column("phone_number", String(20)),
            Column("university", String(100)),
        ]
        if not legacy:
            columns += [
                Column("position", String(100)),
                Column("member", String(200)),
                Column("participates_in_jna", String(10)),
            ]
        table = Table(name, metadata, *columns)
        table.create(bind=database.engine)
        if rows:
            with database.engine.begin() as connection:
                connection.execute(table.insert(), rows)
        return table

    yield _create
    metadata.drop_all(bind=database.engine)
