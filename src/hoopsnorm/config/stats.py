"""Canonical stat names, label synonyms and the positional fallback order."""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Dict, Mapping, Tuple


class StatName(str, Enum):
    MINUTES = "MINUTES"
    POINTS = "POINTS"
    REBOUNDS = "REBOUNDS"
    ASSISTS = "ASSISTS"
    STEALS = "STEALS"
    BLOCKS = "BLOCKS"
    TURNOVERS = "TURNOVERS"
    PLUS_MINUS = "PLUS_MINUS"
    FG = "FG"
    FG3 = "FG3"
    FT = "FT"


class SeasonField(str, Enum):
    GAMES_PLAYED = "games_played"
    GAMES_STARTED = "games_started"
    MINUTES = "minutes_per_game"
    POINTS = "points_per_game"
    REBOUNDS = "rebounds_per_game"
    ASSISTS = "assists_per_game"
    STEALS = "steals_per_game"
    BLOCKS = "blocks_per_game"
    TURNOVERS = "turnovers_per_game"
    FG_PCT = "fg_pct"
    FG3_PCT = "fg3_pct"
    FT_PCT = "ft_pct"
    PLUS_MINUS = "plus_minus"


# Box score column order used when a payload ships without labels:
# MIN, FG, 3PT, FT, OREB, DREB, REB, AST, STL, BLK, TO, PF, +/-, PTS
POSITIONAL_ORDER: Tuple[str, ...] = (
    "MIN",
    "FG",
    "3PT",
    "FT",
    "OREB",
    "DREB",
    "REB",
    "AST",
    "STL",
    "BLK",
    "TO",
    "PF",
    "+/-",
    "PTS",
)

POSITIONAL_SLOTS: Mapping[StatName, int] = MappingProxyType(
    {
        StatName.MINUTES: 0,
        StatName.FG: 1,
        StatName.FG3: 2,
        StatName.FT: 3,
        StatName.REBOUNDS: 6,
        StatName.ASSISTS: 7,
        StatName.STEALS: 8,
        StatName.BLOCKS: 9,
        StatName.TURNOVERS: 10,
        StatName.PLUS_MINUS: 12,
        StatName.POINTS: 13,
    }
)

_BOX_SCORE_SYNONYMS: Dict[StatName, Tuple[str, ...]] = {
    StatName.MINUTES: ("MIN", "MINS", "Minutes"),
    StatName.POINTS: ("PTS", "Points"),
    StatName.REBOUNDS: ("REB", "Rebounds", "TREB", "totalRebounds"),
    StatName.ASSISTS: ("AST", "Assists"),
    StatName.STEALS: ("STL", "Steals"),
    StatName.BLOCKS: ("BLK", "Blocks"),
    StatName.TURNOVERS: ("TO", "TOV", "Turnovers"),
    StatName.PLUS_MINUS: ("+/-", "PM", "PLUSMINUS", "Plus/Minus"),
    StatName.FG: ("FG", "Field Goals", "fieldGoalsMade-fieldGoalsAttempted"),
    StatName.FG3: (
        "3PT",
        "3P",
        "Three Pointers",
        "threePointFieldGoalsMade-threePointFieldGoalsAttempted",
    ),
    StatName.FT: ("FT", "Free Throws", "freeThrowsMade-freeThrowsAttempted"),
}

# Per-game averages are listed ahead of raw totals so an "avg" column wins
# when a split carries both.
_SEASON_SYNONYMS: Dict[SeasonField, Tuple[str, ...]] = {
    SeasonField.GAMES_PLAYED: ("games played", "gamesPlayed", "GP", "games"),
    SeasonField.GAMES_STARTED: ("games started", "gamesStarted", "GS"),
    SeasonField.MINUTES: (
        "avg minutes",
        "avgMinutes",
        "minutes per game",
        "minutesPerGame",
        "minutes",
        "MIN",
    ),
    SeasonField.POINTS: (
        "avg points",
        "avgPoints",
        "points per game",
        "pointsPerGame",
        "points",
        "PTS",
    ),
    SeasonField.REBOUNDS: (
        "avg rebounds",
        "avgRebounds",
        "rebounds per game",
        "reboundsPerGame",
        "rebounds",
        "REB",
    ),
    SeasonField.ASSISTS: (
        "avg assists",
        "avgAssists",
        "assists per game",
        "assistsPerGame",
        "assists",
        "AST",
    ),
    SeasonField.STEALS: (
        "avg steals",
        "avgSteals",
        "steals per game",
        "stealsPerGame",
        "steals",
        "STL",
    ),
    SeasonField.BLOCKS: (
        "avg blocks",
        "avgBlocks",
        "blocks per game",
        "blocksPerGame",
        "blocks",
        "BLK",
    ),
    SeasonField.TURNOVERS: (
        "avg turnovers",
        "avgTurnovers",
        "turnovers per game",
        "turnoversPerGame",
        "turnovers",
        "TO",
    ),
    SeasonField.FG_PCT: (
        "field goal pct",
        "fieldGoalPct",
        "fg pct",
        "FG%",
        "field goal %",
    ),
    SeasonField.FG3_PCT: (
        "three point field goal pct",
        "threePointFieldGoalPct",
        "3pt pct",
        "fg3pct",
        "3P%",
        "3ptpct",
        "three point %",
    ),
    SeasonField.FT_PCT: (
        "free throw pct",
        "freeThrowPct",
        "ft pct",
        "FT%",
        "free throw %",
    ),
    SeasonField.PLUS_MINUS: ("plusMinus", "+/-", "PM"),
}

BOX_SCORE_SYNONYMS: Mapping[StatName, Tuple[str, ...]] = MappingProxyType(_BOX_SCORE_SYNONYMS)
SEASON_SYNONYMS: Mapping[SeasonField, Tuple[str, ...]] = MappingProxyType(_SEASON_SYNONYMS)


def label_key(label: object) -> str:
    """Case-folded comparison key for an upstream label."""

    return str(label).strip().upper()
