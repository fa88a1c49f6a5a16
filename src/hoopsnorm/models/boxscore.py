"""Canonical box score records shared across normalization layers."""

from __future__ import annotations

from typing import List, Literal, Optional

from pydantic import BaseModel, Field, model_validator
from pydantic.config import ConfigDict


class PlayerInfo(BaseModel):
    """Identity block carried alongside a player's box score line."""

    player_id: str = ""
    name: str = "Unknown"
    short_name: str = ""
    jersey: str = ""
    position: str = ""
    headshot: Optional[str] = None

    model_config = ConfigDict(frozen=True)


class _ShootingLine(BaseModel):
    fgm: int = Field(0, ge=0)
    fga: int = Field(0, ge=0)
    fg3m: int = Field(0, ge=0)
    fg3a: int = Field(0, ge=0)
    ftm: int = Field(0, ge=0)
    fta: int = Field(0, ge=0)
    fg_pct: float = Field(0.0, ge=0.0, le=100.0)
    fg3_pct: float = Field(0.0, ge=0.0, le=100.0)
    ft_pct: float = Field(0.0, ge=0.0, le=100.0)

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def _attempts_cover_makes(self):
        for made, attempted in (("fgm", "fga"), ("fg3m", "fg3a"), ("ftm", "fta")):
            if getattr(self, attempted) < getattr(self, made):
                raise ValueError(f"{attempted} must be >= {made}")
        return self


class PlayerBoxScore(_ShootingLine):
    """One player's validated line for one game."""

    player: PlayerInfo = Field(default_factory=PlayerInfo)
    minutes: str = "0"
    points: int = Field(0, ge=0)
    rebounds: int = Field(0, ge=0)
    assists: int = Field(0, ge=0)
    steals: int = Field(0, ge=0)
    blocks: int = Field(0, ge=0)
    turnovers: int = Field(0, ge=0)
    plus_minus: int = 0
    starter: bool = False


class TeamTotals(_ShootingLine):
    points: int = Field(0, ge=0)
    rebounds: int = Field(0, ge=0)
    assists: int = Field(0, ge=0)
    steals: int = Field(0, ge=0)
    blocks: int = Field(0, ge=0)
    turnovers: int = Field(0, ge=0)
    source: Literal["summary", "players"] = "summary"


class TeamBoxScore(BaseModel):
    team_id: str = ""
    abbreviation: str = ""
    name: str = ""
    home_away: Optional[Literal["home", "away"]] = None
    players: List[PlayerBoxScore] = Field(default_factory=list)
    totals: Optional[TeamTotals] = None

    model_config = ConfigDict(frozen=True)


class GameBoxScore(BaseModel):
    teams: List[TeamBoxScore] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)

    def team(self, team_id: str) -> Optional[TeamBoxScore]:
        for entry in self.teams:
            if entry.team_id == team_id or entry.abbreviation == team_id:
                return entry
        return None
