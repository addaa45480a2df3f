"""Tests for self-registration validation."""

from __future__ import annotations

from typing import Any

import pytest

from jna_registry.backend.src.core.errors import InvalidFormat, ValidationFailure
from jna_registry.backend.src.services.validation import (
    MEMBER_MESSAGE,
    MISSING_FIELDS_MESSAGE,
    NAME_MESSAGE,
    POSITION_MESSAGE,
    UNIVERSITY_MESSAGE,
    validate_registration,
)

VALID: dict[str, Any] = {
    "full_name": "  Youssef Trabelsi ",
    "phone_number": "20 123 456",
    "university": "INSAT",
}


def _payload(**overrides: Any) -> dict[str, Any]:
    payload = dict(VALID)
    payload.update(overrides)
    return payload


def test_validate_registration_cleans_and_normalizes() -> None:
    submission = validate_registration(_payload(position=None, member=" Club Théâtre "))

    assert submission.full_name == "Youssef Trabelsi"
    assert submission.phone_number == "21620123456"
    assert submission.position == ""
    assert submission.member == "Club Théâtre"
    assert submission.participates_in_jna.value == "OUI"


@pytest.mark.parametrize(
    ("overrides", "message"),
    [
        ({"full_name": ""}, MISSING_FIELDS_MESSAGE),
        ({"university": "   "}, MISSING_FIELDS_MESSAGE),
        ({"phone_number": None}, MISSING_FIELDS_MESSAGE),
        ({"full_name": "A"}, NAME_MESSAGE),
        ({"full_name": "A" * 101}, NAME_MESSAGE),
        ({"university": "X"}, UNIVERSITY_MESSAGE),
        ({"university": "X" * 101}, UNIVERSITY_MESSAGE),
        ({"position": "P" * 101}, POSITION_MESSAGE),
        ({"member": "M" * 201}, MEMBER_MESSAGE),
    ],
)
def test_validate_registration_reports_first_failure(
    overrides: dict[str, Any], message: str
) -> None:
    with pytest.raises(ValidationFailure) as excinfo:
        validate_registration(_payload(**overrides))

    assert excinfo.value.message == message
    assert excinfo.value.status_code == 400


def test_validate_registration_accepts_boundary_lengths() -> None:
    submission = validate_registration(
        _payload(full_name="Al", university="U" * 100, position="P" * 100, member="M" * 200)
    )

    assert submission.full_name == "Al"


def test_validate_registration_rejects_bad_phone() -> None:
    with pytest.raises(InvalidFormat):
        validate_registration(_payload(phone_number="12345"))


def test_validate_registration_handles_missing_payload() -> None:
    with pytest.raises(ValidationFailure) as excinfo:
        validate_registration(None)

    assert excinfo.value.message == MISSING_FIELDS_MESSAGE
