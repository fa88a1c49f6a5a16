from hoopsnorm.ingest import normalize_team_totals, parse_team_summary, sum_player_totals
from hoopsnorm.models import PlayerBoxScore


def _players():
    return [
        PlayerBoxScore(minutes="36", points=28, rebounds=10, assists=7, steals=2, fgm=10, fga=19, fg3m=3, fg3a=8, ftm=5, fta=6),
        PlayerBoxScore(minutes="33", points=17, rebounds=12, assists=3, blocks=3, fgm=7, fga=12, ftm=3, fta=4),
        PlayerBoxScore(minutes="29", points=12, rebounds=15, assists=2, turnovers=4, fgm=5, fga=11, fg3m=2, fg3a=5),
    ]


def test_name_value_pairs():
    summary = {
        "statistics": [
            {"name": "fieldGoalsMade-fieldGoalsAttempted", "displayValue": "41-88"},
            {"name": "threePointFieldGoalsMade-threePointFieldGoalsAttempted", "displayValue": "12-35"},
            {"name": "freeThrowsMade-freeThrowsAttempted", "displayValue": "18-22"},
            {"name": "totalRebounds", "displayValue": "44"},
            {"name": "assists", "value": 25},
            {"name": "points", "displayValue": "112"},
            {"name": "fieldGoalPct", "displayValue": "46.6"},
        ]
    }
    values = parse_team_summary(summary)
    assert values == {
        "fgm": 41,
        "fga": 88,
        "fg3m": 12,
        "fg3a": 35,
        "ftm": 18,
        "fta": 22,
        "rebounds": 44,
        "assists": 25,
        "points": 112,
    }


def test_label_value_arrays():
    summary = {
        "statistics": [
            {
                "labels": ["PTS", "REB", "AST", "STL", "BLK", "TO", "FG", "3PT", "FT"],
                "totals": ["104", "47", "22", "8", "5", "13", "39-85", "10-31", "16-20"],
            }
        ]
    }
    values = parse_team_summary(summary)
    assert values["points"] == 104
    assert values["rebounds"] == 47
    assert values["turnovers"] == 13
    assert (values["fg3m"], values["fg3a"]) == (10, 31)


def test_display_stats_fill_missing_fields_only():
    summary = {
        "statistics": [{"name": "assists", "displayValue": "25"}],
        "displayStats": [
            {"name": "Assists", "displayValue": "99"},
            {"name": "Total Rebounds", "displayValue": "40"},
        ],
    }
    values = parse_team_summary(summary)
    assert values["assists"] == 25
    assert values["rebounds"] == 40


def test_unrecognized_summary_is_none():
    assert parse_team_summary({"statistics": [{"name": "flagrantFouls", "displayValue": "1"}]}) is None
    assert parse_team_summary(None) is None


def test_sum_player_totals():
    totals = sum_player_totals(_players())
    assert totals.points == 57
    assert totals.rebounds == 37
    assert totals.assists == 12
    assert (totals.fgm, totals.fga) == (22, 42)
    assert totals.fg_pct == 52.4
    assert totals.source == "players"


def test_zero_rebounds_replaces_every_summary_field():
    summary = {
        "statistics": [
            {"name": "points", "displayValue": "120"},
            {"name": "totalRebounds", "displayValue": "0"},
            {"name": "assists", "displayValue": "30"},
            {"name": "steals", "displayValue": "9"},
        ]
    }
    totals = normalize_team_totals(summary, _players())

    assert totals.source == "players"
    assert totals.rebounds == 37
    assert totals.points == 57
    assert totals.assists == 12
    assert totals.steals == 2


def test_complete_summary_is_kept():
    summary = {
        "statistics": [
            {"name": "points", "displayValue": "120"},
            {"name": "totalRebounds", "displayValue": "50"},
            {"name": "assists", "displayValue": "30"},
        ]
    }
    totals = normalize_team_totals(summary, _players())
    assert totals.source == "summary"
    assert totals.points == 120
    assert totals.rebounds == 50


def test_missing_summary_uses_players_and_nothing_is_no_data():
    assert normalize_team_totals(None, _players()).source == "players"
    assert normalize_team_totals(None, []) is None


def test_display_stats_prefer_total_rebounds_over_splits():
    summary = {
        "displayStats": [
            {"name": "offensiveRebounds", "displayValue": "10"},
            {"name": "defensiveRebounds", "displayValue": "34"},
            {"name": "totalRebounds", "displayValue": "44"},
            {"name": "assists", "displayValue": "25"},
        ]
    }
    values = parse_team_summary(summary)
    assert values["rebounds"] == 44
    assert values["assists"] == 25


def test_display_stats_ignore_rebound_splits_without_a_total():
    summary = {
        "displayStats": [
            {"name": "Offensive Rebounds", "displayValue": "10"},
            {"name": "Blocked Shots", "displayValue": "6"},
        ]
    }
    values = parse_team_summary(summary)
    assert "rebounds" not in values
    assert values["blocks"] == 6


def test_missing_summary_points_rebuilt_from_made_shots():
    summary = {
        "statistics": [
            {"name": "fieldGoalsMade-fieldGoalsAttempted", "displayValue": "41-88"},
            {"name": "threePointFieldGoalsMade-threePointFieldGoalsAttempted", "displayValue": "12-35"},
            {"name": "freeThrowsMade-freeThrowsAttempted", "displayValue": "18-22"},
            {"name": "totalRebounds", "displayValue": "44"},
            {"name": "assists", "displayValue": "25"},
        ]
    }
    assert parse_team_summary(summary)["points"] == 112

    totals = normalize_team_totals(summary, _players())
    assert totals.source == "summary"
    assert totals.points == 112
