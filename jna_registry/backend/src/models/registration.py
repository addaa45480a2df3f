"""Registration ledger model."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import DateTime, Index, Integer, String, func
from sqlalchemy.orm import Mapped, mapped_column

from ..core.config import LEDGER_TABLE
from .base import Base

DEFAULT_PARTICIPATION = "OUI"


class Registration(Base):
    """One consolidated ledger entry per canonical phone number."""

    __tablename__ = LEDGER_TABLE
    __table_args__ = (
        Index("idx_registration_phone", "phone_number"),
        Index("idx_registration_date", "registered_at"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    full_name: Mapped[str | None] = mapped_column(String(100), nullable=True)
    phone_number: Mapped[str] = mapped_column(String(20), nullable=False, unique=True)
    university: Mapped[str | None] = mapped_column(String(100), nullable=True)
    position: Mapped[str | None] = mapped_column(String(100), nullable=True)
    member: Mapped[str | None] = mapped_column(String(200), nullable=True)
    participates_in_jna: Mapped[str | None] = mapped_column(
        String(10), nullable=True, default=DEFAULT_PARTICIPATION
    )
    registered_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now()
    )


__all__ = ["DEFAULT_PARTICIPATION", "Registration"]
