from .boxscore import GameBoxScore, PlayerBoxScore, PlayerInfo, TeamBoxScore, TeamTotals
from .season import GameLogEntry, SeasonAverages

__all__ = [
    "GameBoxScore",
    "GameLogEntry",
    "PlayerBoxScore",
    "PlayerInfo",
    "SeasonAverages",
    "TeamBoxScore",
    "TeamTotals",
]
