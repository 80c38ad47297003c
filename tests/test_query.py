"""Tests for query validation and interpretation."""

from __future__ import annotations

from unittest.mock import patch

import pytest

from ikb_sports.exceptions import ValidationError
from ikb_sports.query import (
    MAX_QUERY_LENGTH,
    extract_date,
    extract_sport,
    interpret_query,
    validate_search_query,
)


class TestValidateSearchQuery:
    def test_strips_and_collapses_whitespace(self):
        assert validate_search_query("  NBA   games\n for 2024-12-15 ") == "NBA games for 2024-12-15"

    def test_empty_raises(self):
        with pytest.raises(ValidationError, match="empty"):
            validate_search_query("")

    def test_whitespace_only_raises(self):
        with pytest.raises(ValidationError):
            validate_search_query("   \t\n")

    def test_non_string_raises(self):
        with pytest.raises(ValidationError, match="string"):
            validate_search_query(None)

    def test_too_long_raises(self):
        with pytest.raises(ValidationError, match=str(MAX_QUERY_LENGTH)):
            validate_search_query("a" * (MAX_QUERY_LENGTH + 1))


class TestExtractDate:
    @pytest.mark.parametrize(
        "text",
        [
            "2024-12-15",
            "Get NBA games for 2024-12-15",
            "games on 2024-12-15 please",
            "foo2024-12-15bar",
        ],
    )
    def test_extracts_embedded_date(self, text):
        assert extract_date(text) == "2024-12-15"

    def test_first_date_wins(self):
        assert extract_date("from 2024-01-01 to 2024-02-01") == "2024-01-01"

    def test_invalid_calendar_date_passes_through(self):
        assert extract_date("stats for 2024-13-40") == "2024-13-40"

    def test_missing_date_uses_current_utc_date(self):
        with patch("ikb_sports.query.today_utc_iso", return_value="2025-03-09"):
            assert extract_date("NBA games tonight") == "2025-03-09"

    def test_missing_date_uses_default(self):
        assert extract_date("NBA games tonight", default="2024-11-01") == "2024-11-01"


class TestExtractSport:
    @pytest.mark.parametrize("text", ["NFL scores", "football tonight", "FootBall"])
    def test_nfl_keywords(self, text):
        assert extract_sport(text) == "nfl"

    @pytest.mark.parametrize("text", ["NBA scores", "basketball tonight", "nBa"])
    def test_nba_keywords(self, text):
        assert extract_sport(text) == "nba"

    def test_nfl_has_priority_over_nba(self):
        assert extract_sport("nba or nfl games") == "nfl"

    def test_no_keyword_defaults_to_nba(self):
        assert extract_sport("who won last night?") == "nba"

    def test_no_keyword_uses_default(self):
        assert extract_sport("who won last night?", default="nfl") == "nfl"


class TestInterpretQuery:
    def test_builds_search_query(self):
        query = interpret_query("Show me NFL stats from 2024-12-22")
        assert query.sport == "nfl"
        assert query.date == "2024-12-22"

    def test_sparse_input_is_default_filled(self):
        with patch("ikb_sports.query.today_utc_iso", return_value="2025-01-02"):
            query = interpret_query("scores")
        assert query.sport == "nba"
        assert query.date == "2025-01-02"

    def test_text_overrides_defaults(self):
        query = interpret_query("basketball 2024-12-15", default_sport="nfl", default_date="2024-01-01")
        assert query.sport == "nba"
        assert query.date == "2024-12-15"
