"""Clamp extracted values into domain ranges and build canonical records."""

from __future__ import annotations

from typing import Any, Mapping, Optional, Tuple

from hoopsnorm.config import PLAYER_RANGES, SEASON_RANGES, TEAM_RANGES, ValidationRange
from hoopsnorm.ingest.extract import ExtractedStats, parse_float, seconds_played
from hoopsnorm.models import PlayerBoxScore, PlayerInfo, SeasonAverages, TeamTotals
from hoopsnorm.models.season import SeasonSource


_PERCENT_BOUND = ValidationRange(field="percentage", minimum=0.0, maximum=100.0)

_COUNTING_FIELDS = ("points", "rebounds", "assists", "steals", "blocks", "turnovers")
_SPLIT_FIELDS = (("fgm", "fga"), ("fg3m", "fg3a"), ("ftm", "fta"))
_SEASON_RATE_FIELDS = (
    "minutes_per_game",
    "points_per_game",
    "rebounds_per_game",
    "assists_per_game",
    "steals_per_game",
    "blocks_per_game",
    "turnovers_per_game",
    "plus_minus",
)


def clamp(value: Any, field: str, ranges: Mapping[str, ValidationRange]) -> float:
    """Clamp ``value`` into the range configured for ``field``; ``None`` becomes 0."""

    return ranges[field].clamp(parse_float(value))


def clamp_int(value: Any, field: str, ranges: Mapping[str, ValidationRange]) -> int:
    return int(clamp(value, field, ranges))


def normalize_percentage(value: Any) -> float:
    """Canonical 0-100 percentage with one decimal.

    Values above 1 are taken as already scaled; anything else is a fraction.
    """

    number = parse_float(value)
    if number <= 1:
        number *= 100
    return round(_PERCENT_BOUND.clamp(number), 1)


def shooting_pct(made: int, attempted: int) -> float:
    if attempted <= 0:
        return 0.0
    return normalize_percentage(made / attempted)


def validate_split(
    made: Any,
    attempted: Any,
    made_field: str,
    attempted_field: str,
    ranges: Mapping[str, ValidationRange],
) -> Tuple[int, int]:
    made_value = clamp_int(made, made_field, ranges)
    attempted_value = clamp_int(attempted, attempted_field, ranges)
    if attempted_value < made_value:
        return 0, 0
    return made_value, attempted_value


def _shooting_fields(values: Mapping[str, Any], ranges: Mapping[str, ValidationRange]) -> dict[str, Any]:
    fields: dict[str, Any] = {}
    for (made_field, attempted_field), pct_field in zip(_SPLIT_FIELDS, ("fg_pct", "fg3_pct", "ft_pct")):
        made, attempted = validate_split(
            values.get(made_field), values.get(attempted_field), made_field, attempted_field, ranges
        )
        fields[made_field] = made
        fields[attempted_field] = attempted
        fields[pct_field] = shooting_pct(made, attempted)
    return fields


def validate_player(
    stats: ExtractedStats,
    *,
    player: PlayerInfo | None = None,
    starter: bool = False,
) -> PlayerBoxScore:
    """Build a clamped :class:`PlayerBoxScore` from corrected stats."""

    raw: dict[str, Any] = {
        "points": stats.points,
        "rebounds": stats.rebounds,
        "assists": stats.assists,
        "steals": stats.steals,
        "blocks": stats.blocks,
        "turnovers": stats.turnovers,
        "fgm": stats.fg[0],
        "fga": stats.fg[1],
        "fg3m": stats.fg3[0],
        "fg3a": stats.fg3[1],
        "ftm": stats.ft[0],
        "fta": stats.ft[1],
    }
    fields: dict[str, Any] = {name: clamp_int(raw[name], name, PLAYER_RANGES) for name in _COUNTING_FIELDS}
    fields.update(_shooting_fields(raw, PLAYER_RANGES))
    return PlayerBoxScore(
        player=player or PlayerInfo(),
        minutes=stats.minutes or "0",
        plus_minus=clamp_int(stats.plus_minus, "plus_minus", PLAYER_RANGES),
        starter=bool(starter),
        **fields,
    )


def has_participated(record: PlayerBoxScore) -> bool:
    if seconds_played(record.minutes) > 0:
        return True
    return any(getattr(record, name) > 0 for name in _COUNTING_FIELDS)


def validate_team_totals(values: Mapping[str, Any], *, source: str = "summary") -> TeamTotals:
    fields: dict[str, Any] = {name: clamp_int(values.get(name), name, TEAM_RANGES) for name in _COUNTING_FIELDS}
    fields.update(_shooting_fields(values, TEAM_RANGES))
    return TeamTotals(source=source, **fields)


def validate_season_averages(
    values: Mapping[str, Any],
    *,
    player_id: str,
    season: Optional[int],
    source: SeasonSource,
    ranges: Mapping[str, ValidationRange] = SEASON_RANGES,
) -> SeasonAverages:
    fields: dict[str, Any] = {
        "games_played": clamp_int(values.get("games_played"), "games_played", ranges),
        "games_started": clamp_int(values.get("games_started"), "games_started", ranges),
    }
    for name in _SEASON_RATE_FIELDS:
        fields[name] = clamp(values.get(name), name, ranges)
    for name in ("fg_pct", "fg3_pct", "ft_pct"):
        fields[name] = normalize_percentage(values.get(name))
    return SeasonAverages(player_id=player_id, season=season, source=source, **fields)
