from hoopsnorm.ingest import normalize_game_log
from hoopsnorm.ingest.gamelog import GAME_LOG_LABELS


def _payload(labels=GAME_LOG_LABELS):
    payload = {
        "events": {
            "g1": {"gameDate": "2026-01-02T00:30Z", "opponent": {"abbreviation": "BOS"}, "atVs": "vs", "gameResult": "W"},
            "g2": {"gameDate": "2026-01-05T00:30Z", "opponent": {"abbreviation": "NYK"}, "atVs": "@", "gameResult": "L"},
            "g3": {"gameDate": "2025-12-28T00:30Z", "opponent": {"abbreviation": "MIA"}, "atVs": "@", "gameResult": "W"},
        },
        "seasonTypes": [
            {
                "categories": [
                    {
                        "events": [
                            {"eventId": "g1", "stats": ["35", "9-18", "50.0", "3-7", "42.9", "4-5", "80.0", "7", "6", "1", "2", "3", "4", "25"]},
                            {"eventId": "g2", "stats": ["30", "6-14", "42.9", "2-6", "33.3", "4-4", "100.0", "5", "3", "0", "1", "2", "2", "18"]},
                        ]
                    }
                ]
            }
        ],
    }
    if labels is not None:
        payload["labels"] = list(labels)
    return payload


def test_game_log_newest_first():
    entries = normalize_game_log(_payload())

    assert [entry.game_id for entry in entries] == ["g2", "g1", "g3"]
    latest = entries[1]
    assert latest.opponent == "BOS"
    assert latest.is_home is True
    assert latest.result == "W"
    assert latest.minutes == 35
    assert latest.points == 25
    assert latest.rebounds == 7
    assert latest.assists == 6
    assert latest.blocks == 1
    assert latest.steals == 2
    assert (latest.fgm, latest.fga, latest.fg3m, latest.fg3a) == (9, 18, 3, 7)


def test_game_without_stats_is_zeroed():
    entries = normalize_game_log(_payload())
    missing = entries[-1]
    assert missing.game_id == "g3"
    assert missing.points == 0
    assert missing.minutes == 0


def test_default_columns_used_without_labels_and_limit_applies():
    entries = normalize_game_log(_payload(labels=None), limit=1)
    assert len(entries) == 1
    assert entries[0].game_id == "g2"
    assert entries[0].points == 18


def test_missing_payload_is_empty():
    assert normalize_game_log(None) == []
    assert normalize_game_log({"events": []}) == []
