"""Date handling and point-in-time provision resolution."""

from engine.temporal.dates import extract_repeal_date, normalize_date, today_iso
from engine.temporal.provision_lookup import get_provisions_at
from engine.temporal.provision_resolver import (
    determine_provision_status,
    resolve_provision_at,
)

__all__ = [
    "determine_provision_status",
    "extract_repeal_date",
    "get_provisions_at",
    "normalize_date",
    "resolve_provision_at",
    "today_iso",
]
