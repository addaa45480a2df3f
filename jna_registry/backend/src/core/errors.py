"""Registry exception hierarchy.

Every error carries the HTTP status it maps to and a short French message
that is safe to show to the person filling in the form. Driver-level detail
goes in ``detail`` and is only ever logged.
"""

from __future__ import annotations

from fastapi import status

GENERIC_ERROR_MESSAGE = "Une erreur interne s'est produite"


class RegistryError(Exception):
    """Base exception for all registry failures."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = GENERIC_ERROR_MESSAGE

    def __init__(self, message: str | None = None, *, detail: str | None = None) -> None:
        self.message = message or self.default_message
        self.detail = detail
        super().__init__(self.message)


class InvalidFormat(RegistryError):
    """Raised when a phone number does not have the canonical shape."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Numéro de téléphone invalide"


class ValidationFailure(RegistryError):
    """Raised for missing required fields or out-of-bounds lengths."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Données invalides"


class DuplicateKey(RegistryError):
    """Raised when a self-registration hits the phone number uniqueness constraint."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Ce numéro de téléphone est déjà enregistré."


class SourceUnavailable(RegistryError):
    """Raised when a single candidate source cannot be queried."""

    def __init__(self, source: str, *, detail: str | None = None) -> None:
        super().__init__(detail=detail)
        self.source = source


class InfrastructureFailure(RegistryError):
    """Raised when the backing store cannot serve the primary read or write."""


__all__ = [
    "GENERIC_ERROR_MESSAGE",
    "DuplicateKey",
    "InfrastructureFailure",
    "InvalidFormat",
    "RegistryError",
    "SourceUnavailable",
    "ValidationFailure",
]
