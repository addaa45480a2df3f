"""Liveness, readiness and metrics endpoints."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Request, Response
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest
from sqlalchemy import select
from sqlalchemy.orm import Session

from ..db import get_session_dependency
from ..models import Registration

router = APIRouter(tags=["health"])


@router.get("/health")
def health() -> dict[str, str]:
    return {"status": "OK"}


@router.get("/health/live")
def liveness() -> dict[str, str]:
    """Return a liveness indicator."""

    return {"status": "live"}


@router.get("/health/ready")
def readiness(
    request: Request,
    session: Annotated[Session, Depends(get_session_dependency)],
) -> dict[str, str]:
    """Report ready once the registrations ledger can be read.

    A missing ledger table surfaces as a database error and therefore a 500.
    """

    session.execute(select(Registration.id).limit(1)).first()
    settings = request.app.state.settings
    return {
        "status": "ready",
        "ledger": settings.ledger_table,
        "source_strategy": settings.source_strategy,
    }


@router.get("/metrics")
def metrics() -> Response:
    """Expose Prometheus metrics."""

    return Response(generate_latest(), media_type=CONTENT_TYPE_LATEST)
