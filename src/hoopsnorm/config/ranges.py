"""Validation ranges for canonical box score and season records."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, Iterable, Mapping, Tuple


@dataclass(frozen=True)
class ValidationRange:
    field: str
    minimum: float
    maximum: float

    def clamp(self, value: float) -> float:
        return min(self.maximum, max(self.minimum, value))


def _table(*ranges: Tuple[str, float, float]) -> Mapping[str, ValidationRange]:
    return MappingProxyType(
        {name: ValidationRange(field=name, minimum=low, maximum=high) for name, low, high in ranges}
    )


_PERCENT_RANGES = (
    ("fg_pct", 0, 100),
    ("fg3_pct", 0, 100),
    ("ft_pct", 0, 100),
)

PLAYER_RANGES = _table(
    ("points", 0, 150),
    ("rebounds", 0, 50),
    ("assists", 0, 50),
    ("steals", 0, 15),
    ("blocks", 0, 15),
    ("turnovers", 0, 20),
    ("fgm", 0, 100),
    ("fga", 0, 100),
    ("fg3m", 0, 50),
    ("fg3a", 0, 50),
    ("ftm", 0, 50),
    ("fta", 0, 50),
    ("plus_minus", -100, 100),
    *_PERCENT_RANGES,
)

TEAM_RANGES = _table(
    ("points", 0, 250),
    ("rebounds", 0, 120),
    ("assists", 0, 80),
    ("steals", 0, 40),
    ("blocks", 0, 40),
    ("turnovers", 0, 60),
    ("fgm", 0, 200),
    ("fga", 0, 200),
    ("fg3m", 0, 100),
    ("fg3a", 0, 100),
    ("ftm", 0, 100),
    ("fta", 0, 100),
    *_PERCENT_RANGES,
)

SEASON_RANGES = _table(
    ("games_played", 0, 100),
    ("games_started", 0, 100),
    ("minutes_per_game", 0, 48),
    ("points_per_game", 0, 100),
    ("rebounds_per_game", 0, 30),
    ("assists_per_game", 0, 20),
    ("steals_per_game", 0, 10),
    ("blocks_per_game", 0, 10),
    ("turnovers_per_game", 0, 15),
    ("plus_minus", -50, 50),
    *_PERCENT_RANGES,
)

# Career records share the per-game bounds but count games across every season.
CAREER_RANGES = MappingProxyType(
    {
        **SEASON_RANGES,
        "games_played": ValidationRange(field="games_played", minimum=0, maximum=2000),
        "games_started": ValidationRange(field="games_started", minimum=0, maximum=2000),
    }
)

_RANGES_BY_KIND: Dict[str, Mapping[str, ValidationRange]] = {
    "PLAYER": PLAYER_RANGES,
    "TEAM": TEAM_RANGES,
    "SEASON": SEASON_RANGES,
    "CAREER": CAREER_RANGES,
}


def get_ranges(kind: str) -> Mapping[str, ValidationRange]:
    """Fetch the range table for a record kind, raising KeyError if missing."""

    key = kind.upper()
    if key not in _RANGES_BY_KIND:
        raise KeyError(f"No validation ranges configured for kind={kind!r}")
    return _RANGES_BY_KIND[key]


def iter_ranges() -> Iterable[Tuple[str, ValidationRange]]:
    for kind, table in _RANGES_BY_KIND.items():
        for bound in table.values():
            yield kind, bound
