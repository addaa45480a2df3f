"""Explicit 405 routes for the form endpoints.

A static directory mounted at ``/`` fully matches every path, so without these
routes a wrong method on ``/search`` or ``/register`` would fall through to the
mount and come back as 404.
"""

from __future__ import annotations

from collections.abc import Sequence

from fastapi import APIRouter, HTTPException, status

HANDLED_METHODS = ("GET", "POST", "PUT", "PATCH", "DELETE")


def reject_other_methods(router: APIRouter, path: str, allowed: Sequence[str]) -> None:
    """Answer every method except ``allowed`` on ``path`` with 405."""

    rejected = [method for method in HANDLED_METHODS if method not in allowed]
    allow_header = ", ".join(allowed)

    @router.api_route(path, methods=rejected, include_in_schema=False)
    def method_not_allowed() -> None:
        raise HTTPException(
            status_code=status.HTTP_405_METHOD_NOT_ALLOWED,
            headers={"Allow": allow_header},
        )


__all__ = ["reject_other_methods"]
