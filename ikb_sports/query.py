"""Query validation and interpretation.

Turns free text like "Show me NFL stats from 2024-12-22" into the
(sport, date) pair used to address the IKB API.
"""

from __future__ import annotations

import re

from .exceptions import ValidationError
from .models import SearchQuery, Sport
from .utils.datetime_utils import today_utc_iso

MAX_QUERY_LENGTH = 500

# No calendar check: "2024-13-40" is passed through as-is
_DATE_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2}")
_WHITESPACE = re.compile(r"\s+")

# Checked in order; first match wins
SPORT_KEYWORDS: tuple[tuple[Sport, tuple[str, ...]], ...] = (
    ("nfl", ("nfl", "football")),
    ("nba", ("nba", "basketball")),
)


def validate_search_query(text: object) -> str:
    """Return a cleaned query string or raise ValidationError."""
    if not isinstance(text, str):
        raise ValidationError("Search query must be a string")
    cleaned = _WHITESPACE.sub(" ", text).strip()
    if not cleaned:
        raise ValidationError("Search query cannot be empty")
    if len(cleaned) > MAX_QUERY_LENGTH:
        raise ValidationError(f"Search query exceeds {MAX_QUERY_LENGTH} characters")
    return cleaned


def extract_date(query: str, default: str | None = None) -> str:
    match = _DATE_PATTERN.search(query)
    if match:
        return match.group(0)
    return default or today_utc_iso()


def extract_sport(query: str, default: Sport = "nba") -> Sport:
    lowered = query.lower()
    for sport, keywords in SPORT_KEYWORDS:
        if any(keyword in lowered for keyword in keywords):
            return sport
    return default


def interpret_query(
    query: str,
    default_sport: Sport = "nba",
    default_date: str | None = None,
) -> SearchQuery:
    """Extract the sport and date from a query, filling in defaults."""
    return SearchQuery(
        sport=extract_sport(query, default_sport),
        date=extract_date(query, default_date),
    )
