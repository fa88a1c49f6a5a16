"""Team totals from the upstream summary, reconciled against player lines."""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional, Sequence

from hoopsnorm.config import label_key
from hoopsnorm.ingest.extract import parse_int
from hoopsnorm.ingest.shooting import parse_shooting_split
from hoopsnorm.ingest.validate import validate_team_totals
from hoopsnorm.models import PlayerBoxScore, TeamTotals


logger = logging.getLogger(__name__)

TeamValues = Dict[str, int]

_TOTAL_FIELDS = (
    "points",
    "rebounds",
    "assists",
    "steals",
    "blocks",
    "turnovers",
    "fgm",
    "fga",
    "fg3m",
    "fg3a",
    "ftm",
    "fta",
)

_COUNT_NAMES: Mapping[str, str] = {
    "PTS": "points",
    "POINTS": "points",
    "REB": "rebounds",
    "REBOUNDS": "rebounds",
    "TOTALREBOUNDS": "rebounds",
    "AST": "assists",
    "ASSISTS": "assists",
    "STL": "steals",
    "STEALS": "steals",
    "BLK": "blocks",
    "BLOCKS": "blocks",
    "TO": "turnovers",
    "TOV": "turnovers",
    "TURNOVERS": "turnovers",
}

_SPLIT_NAMES: Mapping[str, tuple[str, str]] = {
    "FG": ("fgm", "fga"),
    "FIELDGOALS": ("fgm", "fga"),
    "FIELDGOALSMADE-FIELDGOALSATTEMPTED": ("fgm", "fga"),
    "3PT": ("fg3m", "fg3a"),
    "THREEPOINTERS": ("fg3m", "fg3a"),
    "THREEPOINTFIELDGOALSMADE-THREEPOINTFIELDGOALSATTEMPTED": ("fg3m", "fg3a"),
    "FT": ("ftm", "fta"),
    "FREETHROWS": ("ftm", "fta"),
    "FREETHROWSMADE-FREETHROWSATTEMPTED": ("ftm", "fta"),
}

# Display stats carry descriptive names. Exact names are tried first, then a
# substring match that ignores the offensive and defensive rebound splits.
_DISPLAY_SPLIT_QUALIFIERS = ("offensive", "defensive")
_DISPLAY_FRAGMENTS = (
    ("rebound", "rebounds"),
    ("assist", "assists"),
    ("steal", "steals"),
    ("block", "blocks"),
    ("turnover", "turnovers"),
)


def _assign(values: TeamValues, name: str, raw: Any) -> None:
    key = label_key(name)
    if key in _COUNT_NAMES:
        values.setdefault(_COUNT_NAMES[key], parse_int(raw))
    elif key in _SPLIT_NAMES:
        made_field, attempted_field = _SPLIT_NAMES[key]
        if made_field in values:
            return
        made, attempted = parse_shooting_split(raw)
        values[made_field] = made
        values[attempted_field] = attempted


def _statistics(summary: Mapping[str, Any]) -> List[Mapping[str, Any]]:
    statistics = summary.get("statistics") or summary.get("stats") or []
    if not isinstance(statistics, list):
        return []
    return [entry for entry in statistics if isinstance(entry, Mapping)]


def _from_name_value_pairs(summary: Mapping[str, Any]) -> TeamValues:
    values: TeamValues = {}
    for entry in _statistics(summary):
        name = entry.get("name")
        if not name:
            continue
        raw = entry.get("displayValue", entry.get("value"))
        if raw is None:
            continue
        _assign(values, str(name), raw)
    return values


def _from_label_arrays(summary: Mapping[str, Any]) -> TeamValues:
    values: TeamValues = {}
    for entry in _statistics(summary):
        labels = entry.get("labels") or entry.get("keys") or []
        totals = entry.get("totals") or entry.get("values") or entry.get("stats") or []
        if not isinstance(labels, list) or not isinstance(totals, list):
            continue
        for idx, label in enumerate(labels):
            if label is None or idx >= len(totals):
                continue
            _assign(values, str(label), totals[idx])
    return values


def _from_display_stats(summary: Mapping[str, Any]) -> TeamValues:
    entries = [
        (str(entry.get("name") or ""), entry.get("displayValue", entry.get("value")))
        for entry in summary.get("displayStats") or []
        if isinstance(entry, Mapping)
    ]
    values: TeamValues = {}
    for name, raw in entries:
        key = label_key(name.replace(" ", ""))
        if key in _COUNT_NAMES:
            values.setdefault(_COUNT_NAMES[key], parse_int(raw))
    for name, raw in entries:
        lowered = name.lower()
        if any(qualifier in lowered for qualifier in _DISPLAY_SPLIT_QUALIFIERS):
            continue
        for fragment, field in _DISPLAY_FRAGMENTS:
            if fragment in lowered:
                values.setdefault(field, parse_int(raw))
    return values


def _points_from_shots(values: TeamValues) -> int:
    fgm, fg3m, ftm = values.get("fgm", 0), values.get("fg3m", 0), values.get("ftm", 0)
    return max(0, (fgm - fg3m) * 2 + fg3m * 3 + ftm)


SUMMARY_STAGES: Sequence[Callable[[Mapping[str, Any]], TeamValues]] = (
    _from_name_value_pairs,
    _from_label_arrays,
    _from_display_stats,
)


def parse_team_summary(summary: Optional[Mapping[str, Any]]) -> Optional[TeamValues]:
    """Merge every summary sub-shape, earlier stages winning per field."""

    if not isinstance(summary, Mapping):
        return None
    merged: TeamValues = {}
    for stage in SUMMARY_STAGES:
        for field, value in stage(summary).items():
            merged.setdefault(field, value)
    if not merged:
        logger.debug("Team summary has no recognizable stats")
        return None
    if "points" not in merged:
        merged["points"] = _points_from_shots(merged)
    return merged


def sum_player_totals(players: Iterable[PlayerBoxScore]) -> TeamTotals:
    values: TeamValues = {field: 0 for field in _TOTAL_FIELDS}
    for player in players:
        for field in _TOTAL_FIELDS:
            values[field] += getattr(player, field)
    return validate_team_totals(values, source="players")


def normalize_team_totals(
    raw_summary: Optional[Mapping[str, Any]],
    players: Sequence[PlayerBoxScore],
) -> Optional[TeamTotals]:
    """One team's totals; ``None`` when there is neither a summary nor players."""

    parsed = parse_team_summary(raw_summary)
    if parsed is None:
        if not players:
            return None
        return sum_player_totals(players)

    top_down = validate_team_totals(parsed, source="summary")
    if not players:
        return top_down

    bottom_up = sum_player_totals(players)
    if (top_down.rebounds == 0 and bottom_up.rebounds > 0) or (
        top_down.assists == 0 and bottom_up.assists > 0
    ):
        logger.info(
            "Team summary looks incomplete (rebounds=%d, assists=%d); using player sums",
            top_down.rebounds,
            top_down.assists,
        )
        return bottom_up
    return top_down
