"""Shared utilities: UTC datetime helpers and id generation."""

from taskdesk.shared.utils.datetime import (
    ensure_utc,
    isoformat_utc,
    parse_iso_datetime,
    utc_day_bounds,
    utc_now,
)
from taskdesk.shared.utils.generators import generate_cuid

__all__ = [
    "ensure_utc",
    "generate_cuid",
    "isoformat_utc",
    "parse_iso_datetime",
    "utc_day_bounds",
    "utc_now",
]
