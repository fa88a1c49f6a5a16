from datetime import date

import pytest

from hoopsnorm.ingest import (
    SeasonEndpoint,
    UpstreamFetchError,
    infer_season_year,
    resolve_career_averages,
    resolve_many_season_averages,
    resolve_season_averages,
)
from hoopsnorm.ingest.season import select_split


WEB_SPLITS = {
    "splits": [
        {
            "type": "season",
            "season": {"year": 2024},
            "stats": [{"name": "avgPoints", "value": 22.0}],
        },
        {
            "type": "season",
            "season": {"year": 2025},
            "stats": [
                {"name": "points", "displayName": "Points", "value": 1918},
                {"name": "avgPoints", "abbreviation": "PTS", "value": 27.4},
                {"name": "avgRebounds", "value": 8.1},
                {"name": "avgAssists", "value": "6.2"},
                {"name": "gamesPlayed", "value": 70},
                {"name": "fieldGoalPct", "value": 51.26},
                {"name": "threePointFieldGoalPct", "value": 0.371},
            ],
        },
    ]
}

CORE = {
    "splits": {
        "categories": [
            {"name": "general", "stats": [{"name": "gamesPlayed", "value": 50}, {"name": "avgMinutes", "value": 31.2}]},
            {"name": "offensive", "stats": [{"name": "avgPoints", "value": 18.3}, {"name": "fieldGoalPct", "value": 47.0}]},
        ]
    }
}


def _fetcher(payloads, calls=None):
    def fetch(endpoint, player_id, season):
        if calls is not None:
            calls.append((endpoint, player_id, season))
        value = payloads.get(endpoint)
        if isinstance(value, Exception):
            raise value
        return value

    return fetch


@pytest.mark.parametrize(
    ("today", "expected"),
    [
        (date(2026, 10, 18), 2026),
        (date(2026, 12, 31), 2026),
        (date(2027, 3, 1), 2026),
        (date(2026, 6, 30), 2025),
        (date(2026, 8, 1), 2025),
    ],
)
def test_infer_season_year(today, expected):
    assert infer_season_year(today) == expected


def test_splits_stage_matches_requested_season():
    averages = resolve_season_averages("p1", 2025, fetch=_fetcher({SeasonEndpoint.WEB: WEB_SPLITS}))

    assert averages.source == "splits"
    assert averages.season == 2025
    assert averages.points_per_game == pytest.approx(27.4)
    assert averages.rebounds_per_game == pytest.approx(8.1)
    assert averages.assists_per_game == pytest.approx(6.2)
    assert averages.games_played == 70
    assert averages.fg_pct == pytest.approx(51.3)
    assert averages.fg3_pct == pytest.approx(37.1)


def test_season_inferred_from_today():
    calls = []
    averages = resolve_season_averages(
        "p1",
        fetch=_fetcher({SeasonEndpoint.WEB: WEB_SPLITS}, calls),
        today=date(2026, 2, 10),
    )
    assert calls[0] == (SeasonEndpoint.WEB, "p1", 2025)
    assert averages.season == 2025


def test_select_split_falls_back_to_latest_season():
    splits = [
        {"type": "total", "stats": []},
        {"type": "season", "season": 2022},
        {"type": "season", "season": {"year": 2023}},
    ]
    assert select_split(splits, 2030) is splits[2]
    assert select_split([{"type": "total"}], 2030) == {"type": "total"}
    assert select_split([], 2030) is None


def test_all_zero_splits_fall_through_to_categories():
    web = {
        "splits": [
            {"type": "season", "season": 2025, "stats": [{"name": "avgPoints", "value": 0}, {"name": "avgRebounds", "value": 0}]}
        ],
        "categories": [
            {"name": "misc", "stats": [{"name": "technicalFouls", "value": 3}]},
            {
                "name": "averages",
                "names": ["gamesPlayed", "avgPoints", "avgRebounds", "avgAssists"],
                "statistics": [
                    {"season": {"year": 2024}, "stats": ["60", "20.0", "5.0", "4.0"]},
                    {"season": {"year": 2025}, "stats": ["55", "24.5", "6.1", "7.3"]},
                ],
            },
        ],
    }
    averages = resolve_season_averages("p2", 2025, fetch=_fetcher({SeasonEndpoint.WEB: web}))

    assert averages.source == "categories"
    assert averages.points_per_game == pytest.approx(24.5)
    assert averages.games_played == 55


def test_web_payload_is_fetched_once_for_both_web_stages():
    calls = []
    resolve_season_averages("p3", 2025, fetch=_fetcher({SeasonEndpoint.CORE: CORE}, calls))
    endpoints = [endpoint for endpoint, _, _ in calls]
    assert endpoints == [SeasonEndpoint.WEB, SeasonEndpoint.CORE]


def test_failed_web_fetch_falls_back_to_core(caplog):
    fetch = _fetcher({SeasonEndpoint.WEB: UpstreamFetchError("HTTP 503"), SeasonEndpoint.CORE: CORE})
    averages = resolve_season_averages("p3", 2025, fetch=fetch)

    assert averages.source == "core"
    assert averages.games_played == 50
    assert averages.minutes_per_game == pytest.approx(31.2)
    assert averages.points_per_game == pytest.approx(18.3)
    assert averages.fg_pct == pytest.approx(47.0)
    assert "HTTP 503" in caplog.text


@pytest.mark.parametrize(
    "payload",
    [
        {"athlete": {"statistics": [{"splits": {"categories": [{"stats": [{"name": "avgPoints", "value": 15.0}]}]}}]}},
        {"athlete": {"statistics": [{"stats": [{"abbreviation": "PTS", "value": 15.0}]}]}},
        {"statsSummary": {"statistics": [{"displayName": "avgPoints", "displayValue": "15.0"}]}},
    ],
)
def test_athlete_fallback_paths(payload):
    averages = resolve_season_averages("p4", 2025, fetch=_fetcher({SeasonEndpoint.ATHLETE: payload}))
    assert averages.source == "athlete"
    assert averages.points_per_game == pytest.approx(15.0)


def test_no_stage_with_data_is_no_data():
    fetch = _fetcher({SeasonEndpoint.WEB: {"splits": []}, SeasonEndpoint.ATHLETE: {"athlete": {"id": "p5"}}})
    assert resolve_season_averages("p5", 2025, fetch=fetch) is None


def test_career_averages_from_core_shape():
    averages = resolve_career_averages(CORE, "p3")
    assert averages.source == "career"
    assert averages.season is None
    assert averages.points_per_game == pytest.approx(18.3)
    assert resolve_career_averages(None, "p3") is None


def test_batch_resolution_skips_players_without_data():
    per_player = {
        "a": {SeasonEndpoint.WEB: WEB_SPLITS},
        "b": {SeasonEndpoint.CORE: CORE},
        "c": {},
    }

    def fetch(endpoint, player_id, season):
        return per_player[player_id].get(endpoint)

    results = resolve_many_season_averages(["a", "b", "c", "a"], 2025, fetch=fetch, max_workers=2)

    assert list(results) == ["a", "b"]
    assert results["a"].source == "splits"
    assert results["b"].source == "core"
    assert resolve_many_season_averages([], fetch=fetch) == {}


def test_career_games_are_not_capped_at_a_single_season():
    payload = {
        "splits": {
            "categories": [
                {"name": "general", "stats": [{"name": "gamesPlayed", "value": 1200}, {"name": "gamesStarted", "value": 1150}]},
                {"name": "offensive", "stats": [{"name": "avgPoints", "value": 21.4}]},
            ]
        }
    }
    averages = resolve_career_averages(payload, "p9")
    assert averages.games_played == 1200
    assert averages.games_started == 1150
    assert averages.points_per_game == pytest.approx(21.4)
