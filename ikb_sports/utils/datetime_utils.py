"""
Low-level timezone and timestamp utilities.

Domain-agnostic helpers for timezone-aware UTC operations and for turning
upstream timestamps into display dates.
"""

from __future__ import annotations

from datetime import date, datetime, timezone


def now_utc() -> datetime:
    """Return the current timezone-aware UTC datetime."""
    return datetime.now(timezone.utc)


def today_utc() -> date:
    """Return the current date in UTC timezone."""
    return now_utc().date()


def today_utc_iso() -> str:
    """Return the current UTC date as YYYY-MM-DD."""
    return today_utc().isoformat()


def parse_iso_datetime(value: str | None) -> datetime | None:
    """Parse an ISO 8601 timestamp, accepting a trailing "Z".

    Returns None for empty or unparseable input.
    """
    if not value:
        return None
    try:
        return datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return None


def format_display_date(value: str | None) -> str:
    """Render a timestamp as a US-style calendar date (M/D/YYYY).

    The date is taken as written in the timestamp, without timezone
    conversion. Unparseable values are returned unchanged.
    """
    parsed = parse_iso_datetime(value)
    if parsed is None:
        return value or ""
    return f"{parsed.month}/{parsed.day}/{parsed.year}"
