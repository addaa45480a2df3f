"""Phone number canonicalization.

Canonical numbers are digits only: the Tunisian dialing code followed by the
eight subscriber digits, e.g. ``21693195501``.
"""

from __future__ import annotations

import re

from jna_registry.backend.src.core.errors import InvalidFormat

COUNTRY_CODE = "216"
SUBSCRIBER_LENGTH = 8

_NON_DIGITS = re.compile(r"[^0-9]")


def normalize_phone(
    raw: str | None,
    *,
    country_code: str = COUNTRY_CODE,
    subscriber_length: int = SUBSCRIBER_LENGTH,
) -> str:
    """Return the canonical form of ``raw`` or raise :class:`InvalidFormat`."""

    digits = _NON_DIGITS.sub("", raw or "")
    if len(digits) == subscriber_length:
        return f"{country_code}{digits}"
    if digits.startswith(country_code) and len(digits) == len(country_code) + subscriber_length:
        return digits
    raise InvalidFormat(detail=f"unexpected digit count {len(digits)}")


def is_canonical(
    phone: str | None,
    *,
    country_code: str = COUNTRY_CODE,
    subscriber_length: int = SUBSCRIBER_LENGTH,
) -> bool:
    """Return ``True`` when ``phone`` is already in canonical form."""

    if not phone or _NON_DIGITS.search(phone):
        return False
    return phone.startswith(country_code) and len(phone) == len(country_code) + subscriber_length


__all__ = ["COUNTRY_CODE", "SUBSCRIBER_LENGTH", "is_canonical", "normalize_phone"]
