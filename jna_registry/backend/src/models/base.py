"""SQLAlchemy declarative base shared by the ledger and source models."""

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Base for SQLAlchemy models."""

    pass
