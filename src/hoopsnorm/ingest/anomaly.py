"""Repair the points and plus/minus columns when the upstream swaps them.

Plus/minus is the only signed value in a box score line, so a negative
number in the points slot can only be a misplaced plus/minus. Points are then
rebuilt from made shots, which never depend on the ambiguous columns.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Optional

from hoopsnorm.config import PLAYER_RANGES
from hoopsnorm.ingest.extract import ExtractedStats


logger = logging.getLogger(__name__)


def _in_plus_minus_bounds(value: int) -> bool:
    bound = PLAYER_RANGES["plus_minus"]
    return bound.minimum <= value <= bound.maximum


def _is_representative(plus_minus: Optional[int], recomputed_points: int) -> bool:
    if plus_minus is None:
        return False
    if not _in_plus_minus_bounds(plus_minus):
        return False
    # The points total sitting in the plus/minus slot is the transposition itself.
    return plus_minus != recomputed_points


def _pick_plus_minus(from_points_slot: int, from_plus_minus_slot: int) -> int:
    candidates = [value for value in (from_points_slot, from_plus_minus_slot) if _in_plus_minus_bounds(value)]
    if not candidates:
        return from_points_slot
    return min(candidates, key=abs)


def correct_points_plus_minus(stats: ExtractedStats) -> ExtractedStats:
    """Return a copy of ``stats`` with a swapped points/plus-minus pair undone."""

    if stats.points is None:
        return replace(stats, points=max(0, stats.points_from_shots))
    if stats.points >= 0:
        return stats

    recomputed = max(0, stats.points_from_shots)
    misplaced = stats.points
    current = stats.plus_minus

    if current is not None and current < 0:
        plus_minus = _pick_plus_minus(misplaced, current)
    elif _is_representative(current, recomputed):
        plus_minus = current
    else:
        plus_minus = misplaced

    logger.info(
        "Negative points value %d treated as plus/minus; points rebuilt as %d (plus/minus %s -> %d)",
        misplaced,
        recomputed,
        current,
        plus_minus,
    )
    return replace(stats, points=recomputed, plus_minus=plus_minus)
