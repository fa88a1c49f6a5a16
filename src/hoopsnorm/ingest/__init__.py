"""Input adapters that normalize raw upstream statistics payloads."""

from .anomaly import correct_points_plus_minus
from .boxscore import (
    normalize_game_box_score,
    normalize_player_box_score,
    normalize_team_players,
    player_info,
    to_raw_entry,
)
from .extract import ExtractedStats, extract_stats
from .gamelog import normalize_game_log
from .season import (
    SeasonEndpoint,
    UpstreamFetchError,
    infer_season_year,
    resolve_career_averages,
    resolve_many_season_averages,
    resolve_season_averages,
)
from .shape import (
    IndexMap,
    LabeledShape,
    PositionalFallback,
    StatShape,
    build_index_map,
    match_label,
    resolve_group_shape,
    resolve_shape,
)
from .shooting import parse_shooting_split
from .team_totals import normalize_team_totals, parse_team_summary, sum_player_totals
from .validate import has_participated, normalize_percentage, validate_player

__all__ = [
    "ExtractedStats",
    "IndexMap",
    "LabeledShape",
    "PositionalFallback",
    "SeasonEndpoint",
    "StatShape",
    "UpstreamFetchError",
    "build_index_map",
    "correct_points_plus_minus",
    "extract_stats",
    "has_participated",
    "infer_season_year",
    "match_label",
    "normalize_game_box_score",
    "normalize_game_log",
    "normalize_percentage",
    "normalize_player_box_score",
    "normalize_team_players",
    "normalize_team_totals",
    "parse_shooting_split",
    "parse_team_summary",
    "player_info",
    "resolve_career_averages",
    "resolve_group_shape",
    "resolve_many_season_averages",
    "resolve_season_averages",
    "resolve_shape",
    "sum_player_totals",
    "to_raw_entry",
    "validate_player",
]
