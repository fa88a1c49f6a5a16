"""Persist and load label synonym profiles."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Tuple

from hoopsnorm.config import SeasonField, StatName


@dataclass
class SynonymProfile:
    box_score: Dict[str, List[str]] = field(default_factory=dict)
    season: Dict[str, List[str]] = field(default_factory=dict)

    @classmethod
    def load(cls, path: Path) -> "SynonymProfile":
        data = json.loads(path.read_text(encoding="utf-8"))
        return cls(
            box_score=data.get("box_score", {}),
            season=data.get("season", {}),
        )

    def save(self, path: Path) -> None:
        payload = {
            "box_score": self.box_score,
            "season": self.season,
        }
        path.write_text(json.dumps(payload, indent=2), encoding="utf-8")

    def box_score_synonyms(self) -> Dict[StatName, Tuple[str, ...]]:
        """Extra box score labels keyed by stat; unknown stat names raise ValueError."""

        return {StatName(name.upper()): tuple(labels) for name, labels in self.box_score.items()}

    def season_synonyms(self) -> Dict[SeasonField, Tuple[str, ...]]:
        return {SeasonField(name.lower()): tuple(labels) for name, labels in self.season.items()}
