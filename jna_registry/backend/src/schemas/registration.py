"""Pydantic schemas for student records and registrations."""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator

MISSING_VALUE = "N/A"


class Participation(str, Enum):
    """Whether the student takes part in the JNA event."""

    OUI = "OUI"
    NON = "NON"


class StudentRecord(BaseModel):
    """A student as read from a source table or the ledger."""

    model_config = ConfigDict(from_attributes=True, frozen=True)

    full_name: str
    phone_number: str
    university: str
    position: str | None = None
    member: str | None = None
    participates_in_jna: Participation = Participation.OUI

    @field_validator("full_name", "university", mode="before")
    @classmethod
    def _coerce_text(cls, value: Any) -> str:
        return "" if value is None else str(value)

    @field_validator("position", "member", mode="before")
    @classmethod
    def _blank_to_none(cls, value: Any) -> str | None:
        if value is None:
            return None
        text = str(value).strip()
        return text or None

    @field_validator("participates_in_jna", mode="before")
    @classmethod
    def _default_participation(cls, value: Any) -> Participation:
        # Legacy source rows carry NULL, "" or free text here.
        text = str(value or "").strip().upper()
        if text == Participation.NON.value:
            return Participation.NON
        return Participation.OUI

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "StudentRecord":
        """Build a record from a ``SELECT *`` row, tolerating missing columns."""

        return cls(
            full_name=row.get("full_name"),
            phone_number=str(row.get("phone_number") or ""),
            university=row.get("university"),
            position=row.get("position"),
            member=row.get("member"),
            participates_in_jna=row.get("participates_in_jna"),
        )


class RegistrationSubmission(BaseModel):
    """Validated self-registration payload with a canonical phone number."""

    full_name: str
    phone_number: str
    university: str
    position: str = ""
    member: str = ""
    participates_in_jna: Participation = Participation.OUI


class LookupData(BaseModel):
    """Student fields returned by a successful search."""

    full_name: str
    university: str
    position: str
    member: str
    participates_in_jna: str

    @classmethod
    def from_record(cls, record: StudentRecord) -> "LookupData":
        return cls(
            full_name=record.full_name,
            university=record.university,
            position=record.position or MISSING_VALUE,
            member=record.member or MISSING_VALUE,
            participates_in_jna=record.participates_in_jna.value,
        )


class SearchFound(BaseModel):
    success: bool = True
    source: str
    data: LookupData


class SearchNotFound(BaseModel):
    success: bool = False
    message: str


class RegistrationData(BaseModel):
    full_name: str
    phone_number: str
    university: str
    position: str
    member: str
    participates_in_jna: str


class RegistrationResponse(BaseModel):
    success: bool = True
    message: str
    data: RegistrationData


__all__ = [
    "MISSING_VALUE",
    "LookupData",
    "Participation",
    "RegistrationData",
    "RegistrationResponse",
    "RegistrationSubmission",
    "SearchFound",
    "SearchNotFound",
    "StudentRecord",
]
