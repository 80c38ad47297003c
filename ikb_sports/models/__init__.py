"""Typed models shared across the IKB plugin."""

from .schemas import (
    ActionResult,
    GameInfo,
    GameRecord,
    MemoryContent,
    MemoryRecord,
    PlayerStatLine,
    QuarterScore,
    ResponseMetadata,
    SearchQuery,
    SearchResponse,
    SearchResult,
    Sport,
    TeamStatLine,
)

__all__ = [
    "ActionResult",
    "GameInfo",
    "GameRecord",
    "MemoryContent",
    "MemoryRecord",
    "PlayerStatLine",
    "QuarterScore",
    "ResponseMetadata",
    "SearchQuery",
    "SearchResponse",
    "SearchResult",
    "Sport",
    "TeamStatLine",
]
