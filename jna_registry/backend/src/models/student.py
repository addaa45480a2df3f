from __future__ import annotations

from sqlalchemy import Column, Integer, String

from .base import Base


class Student(Base):
    """Default source table of pre-populated student records.

    The table is filled by an external import; the registry only reads it.
    """

    __tablename__ = "students"

    id = Column(Integer, primary_key=True, index=True)
    full_name = Column(String(100), nullable=False)
    # Canonical form, e.g. "21693195501"
    phone_number = Column(String(20), nullable=False, index=True)
    university = Column(String(100), nullable=False)
    position = Column(String(100), nullable=True)
    member = Column(String(200), nullable=True)
    participates_in_jna = Column(String(10), nullable=True)


__all__ = ["Student"]
