"""Tests for phone number canonicalization."""

from __future__ import annotations

import pytest

from jna_registry.backend.src.core.errors import InvalidFormat
from jna_registry.backend.src.services.phone import is_canonical, normalize_phone


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("93195501", "21693195501"),
        ("93 195 501", "21693195501"),
        ("93-195-501", "21693195501"),
        ("  20123456 ", "21620123456"),
        ("21693195501", "21693195501"),
        ("+216 93 195 501", "21693195501"),
        ("(216) 93.195.501", "21693195501"),
    ],
)
def test_normalize_phone_accepts_local_and_international_forms(raw: str, expected: str) -> None:
    assert normalize_phone(raw) == expected


@pytest.mark.parametrize(
    "raw",
    [
        None,
        "",
        "abc",
        "9319550",
        "931955012",
        "2169319550",
        "31693195501",
        "216931955012",
        "00216 93 195 501",
        "٩٣١٩٥٥٠١",
    ],
)
def test_normalize_phone_rejects_other_shapes(raw: str | None) -> None:
    with pytest.raises(InvalidFormat) as excinfo:
        normalize_phone(raw)

    assert excinfo.value.status_code == 400
    assert excinfo.value.message == "Numéro de téléphone invalide"


def test_normalize_phone_is_identity_on_canonical_output() -> None:
    canonical = normalize_phone("93195501")
    assert normalize_phone(canonical) == canonical


def test_normalize_phone_honours_custom_country_code() -> None:
    assert normalize_phone("612345678", country_code="33", subscriber_length=9) == "33612345678"


def test_is_canonical() -> None:
    assert is_canonical("21693195501")
    assert not is_canonical("93195501")
    assert not is_canonical("+21693195501")
    assert not is_canonical(None)
