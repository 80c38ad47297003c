"""Pydantic models for IKB API payloads and plugin results."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

Sport = Literal["nba", "nfl"]


class _UpstreamModel(BaseModel):
    """Base for models parsed from the camelCase IKB payload."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )

    @model_validator(mode="before")
    @classmethod
    def null_to_default(cls, data: Any) -> Any:
        """Treat explicit nulls (scheduled and live games) as absent fields."""
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data


class QuarterScore(_UpstreamModel):
    number: int
    away_score: int = 0
    home_score: int = 0


class GameInfo(_UpstreamModel):
    season: int | None = None
    status: str = ""
    date_time: str = ""
    away_team: str = ""
    home_team: str = ""
    away_team_score: int | None = None
    home_team_score: int | None = None
    stadium: str = ""
    quarters: list[QuarterScore] = Field(default_factory=list)


class TeamStatLine(_UpstreamModel):
    name: str = ""
    abbreviation: str = ""
    score: int | None = None
    field_goals_percentage: float = 0.0
    three_pointers_percentage: float = 0.0
    rebounds: int = 0
    assists: int = 0
    steals: int = 0
    blocked_shots: int = 0
    turnovers: int = 0


class PlayerStatLine(_UpstreamModel):
    name: str = ""
    position: str = ""
    played: bool = False
    started: int = 0
    minutes: int = 0
    seconds: int = 0
    points: int = 0
    rebounds: int = 0
    assists: int = 0
    steals: int = 0
    blocked_shots: int = 0
    field_goals_made: int = 0
    field_goals_attempted: int = 0
    three_pointers_made: int = 0
    three_pointers_attempted: int = 0
    free_throws_made: int = 0
    free_throws_attempted: int = 0
    fantasy_points: float | None = None

    @property
    def fantasy_points_or_zero(self) -> float:
        return self.fantasy_points if self.fantasy_points is not None else 0.0


class GameRecord(_UpstreamModel):
    """One game with the team and player lines of that game only."""

    game: GameInfo
    teams: list[TeamStatLine] = Field(default_factory=list)
    players: list[PlayerStatLine] = Field(default_factory=list)


class ResponseMetadata(_UpstreamModel):
    count: int = 0


class SearchResponse(_UpstreamModel):
    data: list[GameRecord] = Field(default_factory=list)
    metadata: ResponseMetadata = Field(default_factory=ResponseMetadata)


class SearchQuery(BaseModel):
    model_config = ConfigDict(frozen=True)

    sport: Sport = "nba"
    date: str


class SearchResult(BaseModel):
    title: str
    url: str
    snippet: str
    score: float = 1.0
    source: str = "ikb"
    metadata: dict[str, Any] = Field(default_factory=dict)


class MemoryContent(BaseModel):
    text: str
    sport: Sport
    date: str
    data: list[GameRecord] = Field(default_factory=list)


class MemoryRecord(BaseModel):
    content: MemoryContent
    room_id: str = "default"
    user_id: str = "system"


class ActionResult(BaseModel):
    success: bool
    response: str
