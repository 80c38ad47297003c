"""Shared pytest fixtures and configuration."""

from __future__ import annotations

import os

import pytest

# Set required environment variables before any imports
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("LOG_LEVEL", "WARNING")


@pytest.fixture
def sample_game_payload():
    """One NBA game as returned by the IKB API."""
    return {
        "game": {
            "season": 2025,
            "status": "Final",
            "dateTime": "2024-12-15T19:30:00",
            "awayTeam": "LAL",
            "homeTeam": "BOS",
            "awayTeamScore": 105,
            "homeTeamScore": 110,
            "stadium": "TD Garden",
            "quarters": [
                {"number": 1, "awayScore": 20, "homeScore": 18},
                {"number": 2, "awayScore": 15, "homeScore": 20},
            ],
        },
        "teams": [
            {
                "name": "Los Angeles Lakers",
                "abbreviation": "LAL",
                "score": 105,
                "fieldGoalsPercentage": 45.25,
                "threePointersPercentage": 33.333,
                "rebounds": 44,
                "assists": 25,
                "steals": 7,
                "blockedShots": 5,
                "turnovers": 12,
            },
            {
                "name": "Boston Celtics",
                "abbreviation": "BOS",
                "score": 110,
                "fieldGoalsPercentage": 50,
                "threePointersPercentage": 38.96,
                "rebounds": 47,
                "assists": 28,
                "steals": 9,
                "blockedShots": 6,
                "turnovers": 10,
            },
        ],
        "players": [
            {
                "name": "Jayson Tatum",
                "position": "SF",
                "played": True,
                "started": 1,
                "minutes": 38,
                "seconds": 5,
                "points": 31,
                "rebounds": 9,
                "assists": 6,
                "steals": 2,
                "blockedShots": 1,
                "fieldGoalsMade": 11,
                "fieldGoalsAttempted": 22,
                "threePointersMade": 4,
                "threePointersAttempted": 10,
                "freeThrowsMade": 5,
                "freeThrowsAttempted": 6,
                "fantasyPoints": 52.5,
            },
            {
                "name": "Bench Player",
                "position": "PG",
                "played": False,
                "minutes": 0,
                "seconds": 0,
                "fantasyPoints": 99,
            },
            {
                "name": "LeBron James",
                "position": "SF",
                "played": True,
                "started": 1,
                "minutes": 36,
                "seconds": 40,
                "points": 28,
                "rebounds": 8,
                "assists": 10,
                "fieldGoalsMade": 10,
                "fieldGoalsAttempted": 19,
                "threePointersMade": 2,
                "threePointersAttempted": 6,
                "fantasyPoints": 55.0,
            },
        ],
    }


@pytest.fixture
def sample_response_payload(sample_game_payload):
    return {"data": [sample_game_payload], "metadata": {"count": 1}}
