"""Resolve a player's season averages from whichever upstream shape has them.

Four payload shapes are tried in a fixed order and the first that maps to at
least one nonzero stat wins:

1. ``splits``: web payload with per-season splits.
2. ``categories``: web payload with named stat categories.
3. ``core``: core statistics payload (``splits.categories``, all merged).
4. ``athlete``: athlete document with one of three known nestings.

Fetching is left to the caller through a ``fetch`` callable so the resolver
itself stays free of I/O.
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from datetime import date
from enum import Enum
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

from hoopsnorm import settings
from hoopsnorm.config import CAREER_RANGES, SEASON_SYNONYMS, SeasonField
from hoopsnorm.ingest.extract import parse_float, parse_int
from hoopsnorm.ingest.shape import match_label
from hoopsnorm.ingest.validate import validate_season_averages
from hoopsnorm.models import SeasonAverages
from hoopsnorm.models.season import SeasonSource


logger = logging.getLogger(__name__)

_KEY_STAT_NAMES = {"pts", "reb", "ast"}
_KEY_STAT_FRAGMENTS = ("points", "rebounds", "assists")


class SeasonEndpoint(str, Enum):
    WEB = "web"
    CORE = "core"
    ATHLETE = "athlete"


class UpstreamFetchError(Exception):
    """Raised by fetch callables when an endpoint could not be retrieved."""


SeasonFetcher = Callable[[SeasonEndpoint, str, int], Optional[Mapping[str, Any]]]
LabeledValues = Tuple[List[str], List[float]]
MappedStats = Dict[str, float]


def infer_season_year(today: date | None = None) -> int:
    """Start year of the current season.

    October through December belong to the season starting that year; every
    other month (including the July-September off-season) maps back to the
    season that started the previous October.
    """

    today = today or date.today()
    if today.month >= 10:
        return today.year
    return today.year - 1


def _labeled_values(stats: Any, labels: Sequence[Any] | None = None) -> LabeledValues:
    """Flatten a stat list into parallel label/value lists.

    Stat objects contribute their name, abbreviation and display name as
    labels; bare values are paired with ``labels`` by position.
    """

    out_labels: List[str] = []
    out_values: List[float] = []
    if not isinstance(stats, list):
        return out_labels, out_values
    labels = list(labels or [])
    for idx, stat in enumerate(stats):
        if isinstance(stat, Mapping):
            raw = stat.get("value")
            if raw is None:
                raw = stat.get("displayValue")
            if raw is None:
                continue
            value = parse_float(raw)
            for key in ("name", "abbreviation", "displayName"):
                if stat.get(key):
                    out_labels.append(str(stat[key]))
                    out_values.append(value)
        elif idx < len(labels) and labels[idx] is not None:
            out_labels.append(str(labels[idx]))
            out_values.append(parse_float(stat))
    return out_labels, out_values


def _profile_synonyms() -> Mapping[SeasonField, Tuple[str, ...]]:
    profile = settings.synonym_profile()
    if profile is None:
        return {}
    try:
        return profile.season_synonyms()
    except ValueError as exc:
        logger.warning("Ignoring synonym profile season entries: %s", exc)
        return {}


def map_season_fields(
    values: LabeledValues,
    extra_synonyms: Mapping[SeasonField, Sequence[str]] | None = None,
) -> MappedStats:
    """Map labelled values onto season fields; unmatched fields are left out."""

    if extra_synonyms is None:
        extra_synonyms = _profile_synonyms()
    labels, numbers = values
    mapped: MappedStats = {}
    for field in SeasonField:
        synonyms = tuple(extra_synonyms.get(field, ())) + SEASON_SYNONYMS[field]
        idx = match_label(labels, synonyms)
        if idx is not None:
            mapped[field.value] = numbers[idx]
    return mapped


def _split_season(split: Mapping[str, Any]) -> Optional[int]:
    season = split.get("season")
    if isinstance(season, Mapping):
        season = season.get("year")
    if season is None:
        return None
    year = parse_int(season)
    return year or None


def select_split(
    splits: Sequence[Mapping[str, Any]],
    season_year: int,
) -> Optional[Mapping[str, Any]]:
    """Split for ``season_year``, else the latest season split, else the first."""

    for split in splits:
        if _split_season(split) == season_year:
            return split
    season_splits = [split for split in splits if split.get("type") == "season" and _split_season(split)]
    if season_splits:
        return max(season_splits, key=lambda split: _split_season(split) or 0)
    return splits[0] if splits else None


def _mappings(items: Any) -> List[Mapping[str, Any]]:
    if not isinstance(items, list):
        return []
    return [item for item in items if isinstance(item, Mapping)]


def _from_splits(payload: Mapping[str, Any], season_year: int) -> Optional[LabeledValues]:
    splits = _mappings(payload.get("splits"))
    split = select_split(splits, season_year)
    if split is None:
        return None
    labels = split.get("labels") or payload.get("labels") or payload.get("names")
    return _labeled_values(split.get("stats"), labels)


def _category_values(category: Mapping[str, Any], season_year: int) -> LabeledValues:
    labels = category.get("names") or category.get("labels")
    if category.get("stats"):
        return _labeled_values(category.get("stats"), labels)
    rows = _mappings(category.get("statistics"))
    if not rows:
        return [], []
    chosen = next((row for row in rows if _split_season(row) == season_year), rows[-1])
    return _labeled_values(chosen.get("stats"), labels)


def _has_key_stats(values: LabeledValues) -> bool:
    for label in values[0]:
        name = label.lower()
        if name in _KEY_STAT_NAMES or any(fragment in name for fragment in _KEY_STAT_FRAGMENTS):
            return True
    return False


def _from_categories(payload: Mapping[str, Any], season_year: int) -> Optional[LabeledValues]:
    candidates = [_category_values(category, season_year) for category in _mappings(payload.get("categories"))]
    candidates = [values for values in candidates if values[0]]
    if not candidates:
        return None
    for values in candidates:
        if _has_key_stats(values):
            return values
    return candidates[0]


def _merge_categories(categories: Iterable[Mapping[str, Any]]) -> LabeledValues:
    labels: List[str] = []
    numbers: List[float] = []
    for category in categories:
        category_labels, category_numbers = _labeled_values(category.get("stats"), category.get("labels"))
        labels.extend(category_labels)
        numbers.extend(category_numbers)
    return labels, numbers


def _from_core(payload: Mapping[str, Any], season_year: int) -> Optional[LabeledValues]:
    splits = payload.get("splits")
    if not isinstance(splits, Mapping):
        return None
    values = _merge_categories(_mappings(splits.get("categories")))
    return values if values[0] else None


def _athlete_stats(athlete: Mapping[str, Any]) -> Any:
    statistics = _mappings(athlete.get("statistics"))
    if statistics:
        splits = statistics[0].get("splits")
        if isinstance(splits, Mapping):
            categories = _mappings(splits.get("categories"))
            if categories and categories[0].get("stats"):
                return categories[0]["stats"]
        if statistics[0].get("stats"):
            return statistics[0]["stats"]
    summary = athlete.get("statsSummary")
    if isinstance(summary, Mapping):
        return summary.get("statistics")
    return summary


def _from_athlete(payload: Mapping[str, Any], season_year: int) -> Optional[LabeledValues]:
    athlete = payload.get("athlete")
    if not isinstance(athlete, Mapping):
        athlete = payload
    values = _labeled_values(_athlete_stats(athlete))
    return values if values[0] else None


Stage = Tuple[SeasonSource, SeasonEndpoint, Callable[[Mapping[str, Any], int], Optional[LabeledValues]]]

SEASON_STAGES: Sequence[Stage] = (
    ("splits", SeasonEndpoint.WEB, _from_splits),
    ("categories", SeasonEndpoint.WEB, _from_categories),
    ("core", SeasonEndpoint.CORE, _from_core),
    ("athlete", SeasonEndpoint.ATHLETE, _from_athlete),
)


def _has_data(mapped: MappedStats) -> bool:
    return any(value != 0 for value in mapped.values())


def resolve_season_averages(
    player_id: str,
    season: int | None = None,
    *,
    fetch: SeasonFetcher,
    today: date | None = None,
    extra_synonyms: Mapping[SeasonField, Sequence[str]] | None = None,
) -> Optional[SeasonAverages]:
    """Season averages for ``player_id``, or ``None`` when no stage has data."""

    season_year = season or infer_season_year(today)
    payloads: Dict[SeasonEndpoint, Optional[Mapping[str, Any]]] = {}

    for source, endpoint, extractor in SEASON_STAGES:
        if endpoint not in payloads:
            try:
                payloads[endpoint] = fetch(endpoint, player_id, season_year)
            except UpstreamFetchError as exc:
                logger.warning("Fetching %s stats for %s failed: %s", endpoint.value, player_id, exc)
                payloads[endpoint] = None
        payload = payloads[endpoint]
        if not isinstance(payload, Mapping):
            continue
        values = extractor(payload, season_year)
        if values is None:
            logger.debug("Stage %s has no stats for %s", source, player_id)
            continue
        mapped = map_season_fields(values, extra_synonyms)
        if not _has_data(mapped):
            logger.debug("Stage %s mapped only zeros for %s", source, player_id)
            continue
        logger.info("Season %d stats for %s resolved from %s", season_year, player_id, source)
        return validate_season_averages(mapped, player_id=player_id, season=season_year, source=source)

    logger.info("No season %d stats found for %s", season_year, player_id)
    return None


def resolve_career_averages(
    payload: Optional[Mapping[str, Any]],
    player_id: str,
    *,
    extra_synonyms: Mapping[SeasonField, Sequence[str]] | None = None,
) -> Optional[SeasonAverages]:
    """Career averages from a core-shaped career payload."""

    if not isinstance(payload, Mapping):
        return None
    values = _from_core(payload, 0)
    if values is None:
        return None
    mapped = map_season_fields(values, extra_synonyms)
    if not _has_data(mapped):
        return None
    return validate_season_averages(
        mapped, player_id=player_id, season=None, source="career", ranges=CAREER_RANGES
    )


def resolve_many_season_averages(
    player_ids: Iterable[str],
    season: int | None = None,
    *,
    fetch: SeasonFetcher,
    max_workers: int | None = None,
    today: date | None = None,
) -> Dict[str, SeasonAverages]:
    """Resolve several players concurrently; players without data are omitted."""

    unique_ids = list(dict.fromkeys(player_ids))
    if not unique_ids:
        return {}
    workers = min(max_workers or settings.season_workers(), len(unique_ids))
    with ThreadPoolExecutor(max_workers=workers) as pool:
        results = pool.map(
            lambda player_id: resolve_season_averages(player_id, season, fetch=fetch, today=today),
            unique_ids,
        )
        resolved = dict(zip(unique_ids, results))
    return {player_id: stats for player_id, stats in resolved.items() if stats is not None}
