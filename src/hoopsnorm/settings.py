"""Environment-driven settings for the normalization engine."""

from __future__ import annotations

import logging
import os
from functools import lru_cache
from pathlib import Path
from typing import Optional

from hoopsnorm.config_loader import SynonymProfile


logger = logging.getLogger(__name__)

_SEASON_WORKERS_ENV = "HOOPSNORM_SEASON_WORKERS"
_SYNONYM_PROFILE_ENV = "HOOPSNORM_SYNONYM_PROFILE"

_SEASON_WORKERS_DEFAULT = 10


def _env_int(name: str, default: int, *, min_value: int | None = None) -> int:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning("Invalid int for %s: %s; using default %d", name, raw, default)
        return default
    if min_value is not None:
        value = max(min_value, value)
    return value


def season_workers() -> int:
    return _env_int(_SEASON_WORKERS_ENV, _SEASON_WORKERS_DEFAULT, min_value=1)


def synonym_profile_path() -> Optional[Path]:
    raw = os.getenv(_SYNONYM_PROFILE_ENV)
    if not raw:
        return None
    return Path(raw)


@lru_cache(maxsize=4)
def _load_profile(path: Path) -> Optional[SynonymProfile]:
    try:
        return SynonymProfile.load(path)
    except (OSError, ValueError) as exc:
        logger.warning("Unable to load synonym profile from %s: %s", path, exc)
        return None


def synonym_profile() -> Optional[SynonymProfile]:
    """Profile named by HOOPSNORM_SYNONYM_PROFILE, or None when unset or unreadable."""

    path = synonym_profile_path()
    if path is None:
        return None
    return _load_profile(path)
