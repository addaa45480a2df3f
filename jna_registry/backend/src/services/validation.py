"""Validation of self-registration submissions."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from jna_registry.backend.src.core.errors import InvalidFormat, ValidationFailure
from jna_registry.backend.src.schemas.registration import RegistrationSubmission
from jna_registry.backend.src.services.metrics import registry_registrations_total
from jna_registry.backend.src.services.phone import normalize_phone

NAME_LENGTH = (2, 100)
UNIVERSITY_LENGTH = (2, 100)
POSITION_MAX_LENGTH = 100
MEMBER_MAX_LENGTH = 200

MISSING_FIELDS_MESSAGE = "Les champs requis sont manquants (nom, téléphone, établissement)"
NAME_MESSAGE = "Nom invalide (2-100 caractères)"
UNIVERSITY_MESSAGE = "Établissement invalide (2-100 caractères)"
POSITION_MESSAGE = "Position invalide (maximum 100 caractères)"
MEMBER_MESSAGE = "Département invalide (maximum 200 caractères)"


def _clean(value: Any) -> str:
    if value is None:
        return ""
    return str(value).strip()


def _within(value: str, bounds: tuple[int, int]) -> bool:
    low, high = bounds
    return low <= len(value) <= high


def validate_registration(payload: Mapping[str, Any] | None) -> RegistrationSubmission:
    """Return a cleaned submission or raise the first failing check."""

    payload = payload or {}
    full_name = _clean(payload.get("full_name"))
    phone_number = _clean(payload.get("phone_number"))
    university = _clean(payload.get("university"))
    position = _clean(payload.get("position"))
    member = _clean(payload.get("member"))

    try:
        if not full_name or not phone_number or not university:
            raise ValidationFailure(MISSING_FIELDS_MESSAGE)
        if not _within(full_name, NAME_LENGTH):
            raise ValidationFailure(NAME_MESSAGE)
        if not _within(university, UNIVERSITY_LENGTH):
            raise ValidationFailure(UNIVERSITY_MESSAGE)
        if len(position) > POSITION_MAX_LENGTH:
            raise ValidationFailure(POSITION_MESSAGE)
        if len(member) > MEMBER_MAX_LENGTH:
            raise ValidationFailure(MEMBER_MESSAGE)
        canonical_phone = normalize_phone(phone_number)
    except (ValidationFailure, InvalidFormat):
        registry_registrations_total.labels(outcome="invalid").inc()
        raise

    return RegistrationSubmission(
        full_name=full_name,
        phone_number=canonical_phone,
        university=university,
        position=position,
        member=member,
    )


__all__ = [
    "MEMBER_MESSAGE",
    "MISSING_FIELDS_MESSAGE",
    "NAME_MESSAGE",
    "POSITION_MESSAGE",
    "UNIVERSITY_MESSAGE",
    "validate_registration",
]
