"""Normalize a player's game log into per-game entries."""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Mapping, Optional

from hoopsnorm.ingest.anomaly import correct_points_plus_minus
from hoopsnorm.ingest.extract import extract_stats, minutes_played
from hoopsnorm.ingest.shape import LabeledShape, build_index_map, resolve_shape
from hoopsnorm.ingest.validate import validate_player
from hoopsnorm.models import GameLogEntry


logger = logging.getLogger(__name__)

# Column order of game log rows when the payload omits its labels.
GAME_LOG_LABELS = ("MIN", "FG", "FG%", "3PT", "3P%", "FT", "FT%", "REB", "AST", "BLK", "STL", "PF", "TO", "PTS")


def _event_stats(payload: Mapping[str, Any]) -> Dict[str, Any]:
    stats_by_event: Dict[str, Any] = {}
    for season_type in payload.get("seasonTypes") or []:
        if not isinstance(season_type, Mapping):
            continue
        for category in season_type.get("categories") or []:
            if not isinstance(category, Mapping):
                continue
            for event in category.get("events") or []:
                if isinstance(event, Mapping) and event.get("eventId") and event.get("stats"):
                    stats_by_event.setdefault(str(event["eventId"]), event["stats"])
    return stats_by_event


def normalize_game_log(payload: Optional[Mapping[str, Any]], *, limit: int = 10) -> List[GameLogEntry]:
    """Most recent ``limit`` games, newest first."""

    if not isinstance(payload, Mapping):
        return []
    events = payload.get("events")
    if not isinstance(events, Mapping):
        return []

    stats_by_event = _event_stats(payload)
    sample = next(iter(stats_by_event.values()), None)
    labels = payload.get("labels") or GAME_LOG_LABELS
    shape = resolve_shape(labels, sample)
    if not isinstance(shape, LabeledShape):
        logger.debug("Game log labels do not fit its rows; assuming default column order")
        shape = LabeledShape(labels=GAME_LOG_LABELS)
    index_map = build_index_map(shape)

    entries: List[GameLogEntry] = []
    for game_id, event in events.items():
        if not isinstance(event, Mapping):
            continue
        stats = correct_points_plus_minus(extract_stats(stats_by_event.get(str(game_id), []), index_map))
        line = validate_player(stats)
        opponent = event.get("opponent")
        entries.append(
            GameLogEntry(
                game_id=str(game_id),
                date=str(event.get("gameDate") or ""),
                opponent=str(opponent.get("abbreviation") or "") if isinstance(opponent, Mapping) else "",
                is_home=event.get("atVs") == "vs",
                result="W" if event.get("gameResult") == "W" else "L",
                minutes=minutes_played(line.minutes),
                points=line.points,
                rebounds=line.rebounds,
                assists=line.assists,
                steals=line.steals,
                blocks=line.blocks,
                fgm=line.fgm,
                fga=line.fga,
                fg3m=line.fg3m,
                fg3a=line.fg3a,
            )
        )

    entries.sort(key=lambda entry: entry.date, reverse=True)
    return entries[:limit]
