"""Player- and game-level box score normalization."""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple, Union

from hoopsnorm.config import POSITIONAL_ORDER
from hoopsnorm.ingest.anomaly import correct_points_plus_minus
from hoopsnorm.ingest.extract import extract_stats
from hoopsnorm.ingest.shape import (
    IndexMap,
    StatShape,
    build_index_map,
    group_athletes,
    resolve_group_shape,
    stat_vector,
)
from hoopsnorm.ingest.shooting import format_shooting_split
from hoopsnorm.ingest.team_totals import normalize_team_totals
from hoopsnorm.ingest.validate import has_participated, validate_player
from hoopsnorm.models import GameBoxScore, PlayerBoxScore, PlayerInfo, TeamBoxScore


logger = logging.getLogger(__name__)

Path = Tuple[str, ...]

_NAME_PATHS: Sequence[Path] = (
    ("athlete", "displayName"),
    ("athlete", "fullName"),
    ("displayName",),
    ("fullName",),
    ("name",),
)
_ID_PATHS: Sequence[Path] = (("athlete", "id"), ("id",))
_SHORT_NAME_PATHS: Sequence[Path] = (("athlete", "shortName"), ("shortName",))
_JERSEY_PATHS: Sequence[Path] = (("athlete", "jersey"), ("jersey",))
_POSITION_PATHS: Sequence[Path] = (
    ("athlete", "position", "abbreviation"),
    ("athlete", "position", "name"),
    ("athlete", "position"),
    ("position", "abbreviation"),
    ("position", "name"),
    ("position",),
)
_HEADSHOT_PATHS: Sequence[Path] = (
    ("athlete", "headshot", "href"),
    ("athlete", "headshot"),
    ("headshot", "href"),
    ("headshot",),
)


def _walk(entry: Any, path: Path) -> Any:
    node = entry
    for key in path:
        if not isinstance(node, Mapping):
            return None
        node = node.get(key)
    return node


def first_text(entry: Any, paths: Sequence[Path]) -> Optional[str]:
    """First non-empty scalar found along ``paths``, as text."""

    for path in paths:
        value = _walk(entry, path)
        if value is None or isinstance(value, (Mapping, list)):
            continue
        text = str(value).strip()
        if text:
            return text
    return None


def player_info(entry: Mapping[str, Any]) -> PlayerInfo:
    name = first_text(entry, _NAME_PATHS) or "Unknown"
    short_name = first_text(entry, _SHORT_NAME_PATHS) or name.split(" ")[-1]
    return PlayerInfo(
        player_id=first_text(entry, _ID_PATHS) or "",
        name=name,
        short_name=short_name,
        jersey=first_text(entry, _JERSEY_PATHS) or "",
        position=first_text(entry, _POSITION_PATHS) or "",
        headshot=first_text(entry, _HEADSHOT_PATHS),
    )


def normalize_player_box_score(
    raw_entry: Optional[Mapping[str, Any]],
    shape: Union[StatShape, IndexMap],
) -> Optional[PlayerBoxScore]:
    """Normalize one athlete entry; ``None`` when absent or the player did not play."""

    if not isinstance(raw_entry, Mapping):
        return None
    index_map = shape if isinstance(shape, IndexMap) else build_index_map(shape)
    stats = correct_points_plus_minus(extract_stats(stat_vector(raw_entry), index_map))
    record = validate_player(
        stats,
        player=player_info(raw_entry),
        starter=raw_entry.get("starter") is True,
    )
    if not has_participated(record):
        logger.debug("Dropping %s: no minutes or counting stats", record.player.name)
        return None
    return record


def normalize_team_players(group: Mapping[str, Any]) -> List[PlayerBoxScore]:
    """Normalize every athlete in a team group, resolving the shape once."""

    athletes = group_athletes(group)
    if not athletes:
        return []
    index_map = build_index_map(resolve_group_shape(group))
    records = []
    for athlete in athletes:
        record = normalize_player_box_score(athlete, index_map)
        if record is not None:
            records.append(record)
    logger.debug(
        "Team %s: %d of %d athletes retained (%s labels)",
        first_text(group, (("team", "abbreviation"), ("team", "id"))) or "?",
        len(records),
        len(athletes),
        "positional" if index_map.is_positional else "labelled",
    )
    return records


def _team_key(block: Mapping[str, Any]) -> Optional[str]:
    return first_text(block, (("team", "id"), ("team", "abbreviation")))


def _home_away(*blocks: Optional[Mapping[str, Any]]) -> Optional[str]:
    for block in blocks:
        if block is None:
            continue
        value = str(block.get("homeAway") or "").lower()
        if value in {"home", "away"}:
            return value
    return None


def normalize_game_box_score(boxscore: Optional[Mapping[str, Any]]) -> Optional[GameBoxScore]:
    """Normalize a whole game: per-team player lines plus reconciled totals."""

    if not isinstance(boxscore, Mapping):
        return None

    order: List[str] = []
    summaries: Dict[str, Mapping[str, Any]] = {}
    groups: Dict[str, Mapping[str, Any]] = {}
    for section, target in (("teams", summaries), ("players", groups)):
        for block in boxscore.get(section) or []:
            if not isinstance(block, Mapping):
                continue
            key = _team_key(block)
            if key is None:
                continue
            target.setdefault(key, block)
            if key not in order:
                order.append(key)

    if not order:
        logger.debug("Box score has no team or player sections")
        return None

    teams: List[TeamBoxScore] = []
    for key in order:
        summary = summaries.get(key)
        group = groups.get(key)
        source = group or summary or {}
        players = normalize_team_players(group) if group is not None else []
        teams.append(
            TeamBoxScore(
                team_id=first_text(source, (("team", "id"),)) or "",
                abbreviation=first_text(source, (("team", "abbreviation"),)) or "",
                name=first_text(source, (("team", "displayName"), ("team", "name"))) or "",
                home_away=_home_away(summary, group),
                players=players,
                totals=normalize_team_totals(summary, players),
            )
        )
    return GameBoxScore(teams=teams)


def to_raw_entry(record: PlayerBoxScore) -> Dict[str, Any]:
    """Serialize a record back into an upstream-style entry in positional order."""

    stats = {label: "0" for label in POSITIONAL_ORDER}
    stats.update(
        {
            "MIN": record.minutes,
            "FG": format_shooting_split(record.fgm, record.fga),
            "3PT": format_shooting_split(record.fg3m, record.fg3a),
            "FT": format_shooting_split(record.ftm, record.fta),
            "REB": str(record.rebounds),
            "AST": str(record.assists),
            "STL": str(record.steals),
            "BLK": str(record.blocks),
            "TO": str(record.turnovers),
            "+/-": f"{record.plus_minus:+d}",
            "PTS": str(record.points),
        }
    )
    athlete: Dict[str, Any] = {
        "id": record.player.player_id,
        "displayName": record.player.name,
        "shortName": record.player.short_name,
        "jersey": record.player.jersey,
        "position": {"abbreviation": record.player.position},
    }
    if record.player.headshot is not None:
        athlete["headshot"] = {"href": record.player.headshot}
    return {
        "athlete": athlete,
        "starter": record.starter,
        "stats": [stats[label] for label in POSITIONAL_ORDER],
    }
