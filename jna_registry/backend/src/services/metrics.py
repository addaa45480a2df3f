"""Prometheus metric definitions for lookups and registrations."""

from __future__ import annotations

from prometheus_client import Counter

registry_lookups_total = Counter(
    "registry_lookups_total",
    "Phone number lookups by outcome.",
    labelnames=["outcome"],
)

registry_registrations_total = Counter(
    "registry_registrations_total",
    "Self-registration submissions by outcome.",
    labelnames=["outcome"],
)

registry_reconciliation_failures_total = Counter(
    "registry_reconciliation_failures_total",
    "Ledger upserts that failed and were discarded.",
)

registry_source_errors_total = Counter(
    "registry_source_errors_total",
    "Candidate source queries that raised and were skipped.",
    labelnames=["source"],
)

__all__ = [
    "registry_lookups_total",
    "registry_reconciliation_failures_total",
    "registry_registrations_total",
    "registry_source_errors_total",
]
