"""Self-registration endpoint."""

from __future__ import annotations

import logging
from typing import Annotated, Any

from fastapi import APIRouter, Body, Depends
from sqlalchemy.orm import Session

from jna_registry.backend.src.api.methods import reject_other_methods
from jna_registry.backend.src.db import get_session_dependency
from jna_registry.backend.src.schemas.registration import (
    RegistrationData,
    RegistrationResponse,
)
from jna_registry.backend.src.services import reconciliation
from jna_registry.backend.src.services.validation import validate_registration

SUCCESS_MESSAGE = "Inscription réussie!"

router = APIRouter(tags=["registration"])

logger = logging.getLogger(__name__)


@router.post("/register", response_model=RegistrationResponse)
def register(
    session: Annotated[Session, Depends(get_session_dependency)],
    payload: Annotated[dict[str, Any] | None, Body()] = None,
) -> RegistrationResponse:
    """Register a student who was not found by the lookup."""

    submission = validate_registration(payload)
    reconciliation.register(session, submission)
    logger.info("New registration saved: %s", submission.phone_number)

    return RegistrationResponse(
        message=SUCCESS_MESSAGE,
        data=RegistrationData(
            full_name=submission.full_name,
            phone_number=submission.phone_number,
            university=submission.university,
            position=submission.position,
            member=submission.member,
            participates_in_jna=submission.participates_in_jna.value,
        ),
    )


reject_other_methods(router, "/register", allowed=["POST"])


__all__ = ["router", "SUCCESS_MESSAGE"]
