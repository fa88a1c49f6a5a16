"""Static tables for stat labels and validation ranges."""

from .ranges import (
    CAREER_RANGES,
    PLAYER_RANGES,
    SEASON_RANGES,
    TEAM_RANGES,
    ValidationRange,
    get_ranges,
    iter_ranges,
)
from .stats import (
    BOX_SCORE_SYNONYMS,
    POSITIONAL_ORDER,
    POSITIONAL_SLOTS,
    SEASON_SYNONYMS,
    SeasonField,
    StatName,
    label_key,
)

__all__ = [
    "BOX_SCORE_SYNONYMS",
    "CAREER_RANGES",
    "PLAYER_RANGES",
    "POSITIONAL_ORDER",
    "POSITIONAL_SLOTS",
    "SEASON_RANGES",
    "SEASON_SYNONYMS",
    "SeasonField",
    "StatName",
    "TEAM_RANGES",
    "ValidationRange",
    "get_ranges",
    "iter_ranges",
    "label_key",
]
