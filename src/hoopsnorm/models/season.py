"""Season-level and per-game log records."""

from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


SeasonSource = Literal["splits", "categories", "core", "athlete", "career"]


class SeasonAverages(BaseModel):
    """Per-game rates for one player in one season."""

    player_id: str = Field(..., min_length=1)
    season: Optional[int] = None
    source: SeasonSource
    games_played: int = Field(0, ge=0)
    games_started: int = Field(0, ge=0)
    minutes_per_game: float = Field(0.0, ge=0.0)
    points_per_game: float = Field(0.0, ge=0.0)
    rebounds_per_game: float = Field(0.0, ge=0.0)
    assists_per_game: float = Field(0.0, ge=0.0)
    steals_per_game: float = Field(0.0, ge=0.0)
    blocks_per_game: float = Field(0.0, ge=0.0)
    turnovers_per_game: float = Field(0.0, ge=0.0)
    fg_pct: float = Field(0.0, ge=0.0, le=100.0)
    fg3_pct: float = Field(0.0, ge=0.0, le=100.0)
    ft_pct: float = Field(0.0, ge=0.0, le=100.0)
    plus_minus: float = 0.0

    model_config = ConfigDict(frozen=True)


class GameLogEntry(BaseModel):
    game_id: str
    date: str = ""
    opponent: str = ""
    is_home: bool = False
    result: Literal["W", "L"] = "L"
    minutes: int = Field(0, ge=0)
    points: int = Field(0, ge=0)
    rebounds: int = Field(0, ge=0)
    assists: int = Field(0, ge=0)
    steals: int = Field(0, ge=0)
    blocks: int = Field(0, ge=0)
    fgm: int = Field(0, ge=0)
    fga: int = Field(0, ge=0)
    fg3m: int = Field(0, ge=0)
    fg3a: int = Field(0, ge=0)

    model_config = ConfigDict(frozen=True)
