"""Work out how a team's stat vectors are encoded and where each stat lives."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, FrozenSet, List, Mapping, Optional, Sequence, Tuple, Union

from hoopsnorm import settings
from hoopsnorm.config import BOX_SCORE_SYNONYMS, POSITIONAL_ORDER, POSITIONAL_SLOTS, StatName, label_key


logger = logging.getLogger(__name__)

StatKey = Union[int, str]


@dataclass(frozen=True)
class LabeledShape:
    """Vectors come with labels; ``keyed`` marks object-shaped vectors."""

    labels: Tuple[str, ...]
    keyed: bool = False


@dataclass(frozen=True)
class PositionalFallback:
    """No usable labels; the fourteen-slot box score order is assumed."""

    labels: Tuple[str, ...] = POSITIONAL_ORDER


StatShape = Union[LabeledShape, PositionalFallback]


@dataclass(frozen=True)
class IndexMap:
    shape: StatShape
    keys: Mapping[StatName, StatKey]
    positional_fields: FrozenSet[StatName] = field(default_factory=frozenset)

    def get(self, stat: StatName) -> Optional[StatKey]:
        return self.keys.get(stat)

    def __contains__(self, stat: object) -> bool:
        return stat in self.keys

    @property
    def is_positional(self) -> bool:
        return isinstance(self.shape, PositionalFallback)


def match_label(
    labels: Sequence[object],
    synonyms: Sequence[str],
) -> Optional[int]:
    """Index of the first label matching any synonym, trying synonyms in order."""

    lookup: dict[str, int] = {}
    for idx, label in enumerate(labels):
        if label is None:
            continue
        lookup.setdefault(label_key(label), idx)
    for name in synonyms:
        idx = lookup.get(label_key(name))
        if idx is not None:
            return idx
    return None


def stat_vector(entry: Mapping[str, Any]) -> Any:
    """Raw stat vector of one athlete entry (list or mapping), or ``None``."""

    stats = entry.get("stats")
    if stats:
        return stats
    statistics = entry.get("statistics")
    if isinstance(statistics, list) and statistics and isinstance(statistics[0], Mapping):
        return statistics[0].get("stats")
    return stats


def group_athletes(group: Mapping[str, Any]) -> List[Mapping[str, Any]]:
    statistics = group.get("statistics")
    if isinstance(statistics, list) and statistics and isinstance(statistics[0], Mapping):
        athletes = statistics[0].get("athletes")
        if athletes:
            return [athlete for athlete in athletes if isinstance(athlete, Mapping)]
    athletes = group.get("athletes") or []
    return [athlete for athlete in athletes if isinstance(athlete, Mapping)]


def group_labels(group: Mapping[str, Any]) -> List[str]:
    statistics = group.get("statistics")
    source: Mapping[str, Any] = group
    if isinstance(statistics, list) and statistics and isinstance(statistics[0], Mapping):
        source = statistics[0]
    labels = source.get("labels") or source.get("keys") or group.get("labels") or []
    return [str(label) for label in labels if label is not None]


def resolve_shape(labels: Optional[Sequence[object]], sample: Any = None) -> StatShape:
    """Pick the shape for a group from its labels and one representative vector."""

    if isinstance(sample, Mapping):
        return LabeledShape(labels=tuple(str(key) for key in sample.keys()), keyed=True)

    cleaned = tuple(str(label) for label in (labels or ()) if label is not None)
    if cleaned and any(label.strip() for label in cleaned):
        if sample is None or not isinstance(sample, (list, tuple)) or len(sample) == len(cleaned):
            return LabeledShape(labels=cleaned)
        logger.debug(
            "Label count %d does not match vector length %d; using positional order",
            len(cleaned),
            len(sample),
        )
        return PositionalFallback()

    logger.debug("No stat labels present; using positional order")
    return PositionalFallback()


def resolve_group_shape(group: Mapping[str, Any]) -> StatShape:
    """Resolve the shape once for a team group of athletes."""

    sample = None
    for athlete in group_athletes(group):
        vector = stat_vector(athlete)
        if vector:
            sample = vector
            break
    return resolve_shape(group_labels(group), sample)


def _profile_synonyms() -> Mapping[StatName, Tuple[str, ...]]:
    profile = settings.synonym_profile()
    if profile is None:
        return {}
    try:
        return profile.box_score_synonyms()
    except ValueError as exc:
        logger.warning("Ignoring synonym profile box_score entries: %s", exc)
        return {}


def build_index_map(
    shape: StatShape,
    extra_synonyms: Mapping[StatName, Sequence[str]] | None = None,
) -> IndexMap:
    """Map every canonical stat to its array position or object key."""

    if extra_synonyms is None:
        extra_synonyms = _profile_synonyms()

    if isinstance(shape, PositionalFallback):
        return IndexMap(
            shape=shape,
            keys=MappingProxyType(dict(POSITIONAL_SLOTS)),
            positional_fields=frozenset(POSITIONAL_SLOTS),
        )

    keys: dict[StatName, StatKey] = {}
    unmatched: List[StatName] = []
    for stat in StatName:
        synonyms = tuple(extra_synonyms.get(stat, ())) + BOX_SCORE_SYNONYMS[stat]
        idx = match_label(shape.labels, synonyms)
        if idx is not None:
            keys[stat] = shape.labels[idx] if shape.keyed else idx
        else:
            unmatched.append(stat)

    positional: set[StatName] = set()
    if not shape.keyed:
        # A slot already claimed by another stat's label is never borrowed.
        claimed = set(keys.values())
        for stat in unmatched:
            slot = POSITIONAL_SLOTS[stat]
            if slot in claimed:
                continue
            keys[stat] = slot
            positional.add(stat)

    if positional:
        logger.debug(
            "Labels %s missing %s; using positional slots for those fields",
            ", ".join(shape.labels),
            ", ".join(sorted(stat.value for stat in positional)),
        )
    return IndexMap(shape=shape, keys=MappingProxyType(keys), positional_fields=frozenset(positional))
