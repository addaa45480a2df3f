"""Phone number lookup endpoint."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request
from sqlalchemy.orm import Session

from jna_registry.backend.src.core.errors import ValidationFailure
from jna_registry.backend.src.db import get_session_dependency
from jna_registry.backend.src.schemas.registration import (
    LookupData,
    SearchFound,
    SearchNotFound,
)
from jna_registry.backend.src.api.methods import reject_other_methods
from jna_registry.backend.src.services.resolver import CascadingResolver

NOT_FOUND_MESSAGE = "Étudiant introuvable"
PHONE_REQUIRED_MESSAGE = "Le numéro de téléphone est requis"

router = APIRouter(tags=["search"])


def get_resolver(request: Request) -> CascadingResolver:
    """Return the resolver configured by the application factory."""

    return request.app.state.resolver


@router.get("/search", response_model=SearchFound | SearchNotFound)
def search(
    session: Annotated[Session, Depends(get_session_dependency)],
    resolver: Annotated[CascadingResolver, Depends(get_resolver)],
    phone: Annotated[str | None, Query()] = None,
) -> SearchFound | SearchNotFound:
    """Find a student by phone number across the configured sources."""

    if not phone or not phone.strip():
        raise ValidationFailure(PHONE_REQUIRED_MESSAGE)

    result = resolver.lookup(session, phone)
    if not result.found:
        return SearchNotFound(message=NOT_FOUND_MESSAGE)
    return SearchFound(source=result.source, data=LookupData.from_record(result.record))


reject_other_methods(router, "/search", allowed=["GET"])


__all__ = ["router", "get_resolver", "NOT_FOUND_MESSAGE", "PHONE_REQUIRED_MESSAGE"]
