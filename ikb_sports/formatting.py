"""Text rendering for IKB game records.

Three views of one game record are supported:

- ``game``: final score line, date, per-quarter scores, status and venue
- ``teams``: one block per team with shooting percentages and counting stats
- ``players``: top ten players who took the floor, by fantasy points
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from .models import GameRecord, PlayerStatLine, SearchResult, TeamStatLine
from .utils.datetime_utils import format_display_date

DEFAULT_VIEW = "game"
MAX_PLAYERS = 10
BLOCK_SEPARATOR = "\n\n"


def format_percentage(value: float | None) -> str:
    """Format a 0-100 percentage with one decimal, rounding half away from zero."""
    if value is None:
        return "0.0"
    try:
        return str(Decimal(str(value)).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))
    except InvalidOperation:
        return "0.0"


def _score(value: int | None) -> str:
    return "" if value is None else str(value)


def format_quarters(record: GameRecord) -> str:
    return ", ".join(
        f"Q{quarter.number}: {quarter.away_score}-{quarter.home_score}"
        for quarter in record.game.quarters
    )


def format_game_summary(record: GameRecord) -> str:
    game = record.game
    lines = [
        f"{game.away_team} {_score(game.away_team_score)} @ {game.home_team} {_score(game.home_team_score)}",
        f"Date: {format_display_date(game.date_time)}",
        f"Quarter Scores: {format_quarters(record)}",
        f"Status: {game.status}",
        f"Stadium: {game.stadium}",
    ]
    return "\n".join(lines)


def _team_block(team: TeamStatLine) -> str:
    return (
        f"{team.name} ({team.abbreviation})\n"
        f"Score: {_score(team.score)}\n"
        f"FG%: {format_percentage(team.field_goals_percentage)}%, "
        f"3P%: {format_percentage(team.three_pointers_percentage)}%\n"
        f"Rebounds: {team.rebounds}, Assists: {team.assists}\n"
        f"Steals: {team.steals}, Blocks: {team.blocked_shots}"
    )


def format_team_stats(record: GameRecord) -> str:
    return BLOCK_SEPARATOR.join(_team_block(team) for team in record.teams)


def top_players(players: Iterable[PlayerStatLine], limit: int = MAX_PLAYERS) -> list[PlayerStatLine]:
    """Players who played, highest fantasy points first (missing counts as 0)."""
    played = [player for player in players if player.played]
    # sorted() is stable: ties keep upstream order
    return sorted(played, key=lambda player: player.fantasy_points_or_zero, reverse=True)[:limit]


def _player_block(player: PlayerStatLine) -> str:
    minutes = f"{player.minutes}:{player.seconds:02d}"
    shooting = (
        f"{player.field_goals_made}/{player.field_goals_attempted} FG, "
        f"{player.three_pointers_made}/{player.three_pointers_attempted} 3P"
    )
    return (
        f"{player.name} ({player.position}) - {minutes} min\n"
        f"{player.points} PTS, {player.rebounds} REB, {player.assists} AST\n"
        f"{shooting}"
    )


def format_player_stats(record: GameRecord) -> str:
    return BLOCK_SEPARATOR.join(_player_block(player) for player in top_players(record.players))


VIEW_FORMATTERS: dict[str, Callable[[GameRecord], str]] = {
    "game": format_game_summary,
    "teams": format_team_stats,
    "players": format_player_stats,
}


def render_view(record: GameRecord, view: str | None = DEFAULT_VIEW) -> str:
    """Render a record with the named view; unknown views fall back to game."""
    formatter = VIEW_FORMATTERS.get(view or DEFAULT_VIEW, format_game_summary)
    return formatter(record)


def render_first(records: list[GameRecord], view: str | None = DEFAULT_VIEW) -> str:
    """Render the first record, or the empty string when there are none."""
    if not records:
        return ""
    return render_view(records[0], view)


def format_search_results(results: Iterable[SearchResult]) -> str:
    blocks = []
    for result in results:
        lines = [result.title, result.url]
        if result.snippet:
            lines.append(result.snippet)
        blocks.append("\n".join(lines))
    return BLOCK_SEPARATOR.join(blocks)
