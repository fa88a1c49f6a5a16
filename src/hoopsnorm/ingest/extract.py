"""Pull raw counting stats and shooting splits out of a stat vector."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Mapping, Optional, Tuple

from hoopsnorm.config import StatName
from hoopsnorm.ingest.shape import IndexMap, StatKey
from hoopsnorm.ingest.shooting import parse_shooting_split


_MISSING = object()
_INT_PATTERN = re.compile(r"^\s*([+-]?\d+)")
_CLOCK_PATTERN = re.compile(r"^\s*(\d+)(?::(\d{1,2}))?")


@dataclass(frozen=True)
class ExtractedStats:
    """Loosely-checked values straight from the vector.

    ``None`` means the stat's slot was absent; a present but malformed token
    has already been turned into ``0``.
    """

    minutes: Optional[str] = None
    points: Optional[int] = None
    rebounds: Optional[int] = None
    assists: Optional[int] = None
    steals: Optional[int] = None
    blocks: Optional[int] = None
    turnovers: Optional[int] = None
    plus_minus: Optional[int] = None
    fg: Tuple[int, int] = (0, 0)
    fg3: Tuple[int, int] = (0, 0)
    ft: Tuple[int, int] = (0, 0)

    @property
    def points_from_shots(self) -> int:
        fgm, fg3m, ftm = self.fg[0], self.fg3[0], self.ft[0]
        return (fgm - fg3m) * 2 + fg3m * 3 + ftm


def parse_int(token: Any) -> int:
    """Leading integer of a token, ``0`` when there is none."""

    if token is None or isinstance(token, bool):
        return 0
    if isinstance(token, int):
        return token
    if isinstance(token, float):
        if token != token:  # NaN
            return 0
        return int(token)
    match = _INT_PATTERN.match(str(token))
    if match is None:
        return 0
    return int(match.group(1))


def parse_float(token: Any) -> float:
    if token is None or isinstance(token, bool):
        return 0.0
    if isinstance(token, (int, float)):
        value = float(token)
    else:
        try:
            value = float(str(token).strip().rstrip("%"))
        except ValueError:
            return 0.0
    if value != value or value in (float("inf"), float("-inf")):
        return 0.0
    return value


def _lookup(vector: Any, key: Optional[StatKey]) -> Any:
    if key is None or vector is None:
        return _MISSING
    if isinstance(vector, Mapping):
        return vector.get(key, _MISSING) if isinstance(key, str) else _MISSING
    if isinstance(vector, (list, tuple)) and isinstance(key, int):
        if 0 <= key < len(vector):
            return vector[key]
    return _MISSING


def _minutes_token(token: Any) -> Optional[str]:
    if token is _MISSING:
        return None
    if token is None:
        return "0"
    if isinstance(token, float) and token.is_integer():
        return str(int(token))
    return str(token).strip() or "0"


def _count(token: Any) -> Optional[int]:
    return None if token is _MISSING else parse_int(token)


def _split(token: Any) -> Tuple[int, int]:
    return (0, 0) if token is _MISSING else parse_shooting_split(token)


def extract_stats(vector: Any, index_map: IndexMap) -> ExtractedStats:
    """Extract every canonical stat named by ``index_map`` from ``vector``."""

    def slot(stat: StatName) -> Any:
        return _lookup(vector, index_map.get(stat))

    return ExtractedStats(
        minutes=_minutes_token(slot(StatName.MINUTES)),
        points=_count(slot(StatName.POINTS)),
        rebounds=_count(slot(StatName.REBOUNDS)),
        assists=_count(slot(StatName.ASSISTS)),
        steals=_count(slot(StatName.STEALS)),
        blocks=_count(slot(StatName.BLOCKS)),
        turnovers=_count(slot(StatName.TURNOVERS)),
        plus_minus=_count(slot(StatName.PLUS_MINUS)),
        fg=_split(slot(StatName.FG)),
        fg3=_split(slot(StatName.FG3)),
        ft=_split(slot(StatName.FT)),
    )


def minutes_played(minutes: Any) -> int:
    """Whole minutes from a ``"MM:SS"`` or plain minutes token."""

    return max(0, parse_int(minutes))


def seconds_played(minutes: Any) -> int:
    """Seconds on court from a ``"MM:SS"`` or plain minutes token."""

    if minutes is None or isinstance(minutes, bool):
        return 0
    if isinstance(minutes, (int, float)):
        return max(0, int(parse_float(minutes) * 60))
    match = _CLOCK_PATTERN.match(str(minutes))
    if match is None:
        return 0
    return int(match.group(1)) * 60 + int(match.group(2) or 0)
