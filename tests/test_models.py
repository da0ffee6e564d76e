import pytest
from pydantic import ValidationError

from pyfpts.errors import UnsupportedSportError
from pyfpts.models import (
    BoosterEffect,
    BoosterType,
    GameStatus,
    NBAPlayerStats,
    NBAStat,
    NBAStats,
    NFLPlayerStats,
    NFLStat,
    NFLStats,
    Sport,
    parse_player_stats,
)


def test_sport_parse_is_case_insensitive():
    assert Sport.parse("nba") is Sport.NBA
    assert Sport.parse(" NFL ") is Sport.NFL
    assert Sport.parse(Sport.NBA) is Sport.NBA


def test_sport_parse_unknown_raises():
    with pytest.raises(UnsupportedSportError):
        Sport.parse("CURLING")
    with pytest.raises(UnsupportedSportError):
        Sport.parse(42)  # type: ignore[arg-type]


def test_stat_bags_define_every_category():
    assert set(NBAStats.model_fields) == {member.value for member in NBAStat}
    assert set(NFLStats.model_fields) == {member.value for member in NFLStat}


def test_parse_player_stats_picks_variant_by_sport():
    nba = parse_player_stats({"player_id": "p1", "sport": "nba", "stats": {"points": 10}})
    nfl = parse_player_stats({"player_id": "p2", "sport": "NFL", "stats": {"passing_yards": 250}})

    assert isinstance(nba, NBAPlayerStats)
    assert isinstance(nfl, NFLPlayerStats)
    assert nba.stats.points == 10
    assert nba.stats.rebounds == 0
    assert nfl.stats.value_of(NFLStat.PASSING_YARDS) == 250


def test_parse_player_stats_accepts_camel_case():
    record = parse_player_stats(
        {
            "playerId": "p1",
            "sport": "NBA",
            "gameStatus": "in_progress",
            "gameDate": "2024-01-15",
            "stats": {"threePointersMade": 4, "plusMinus": -6},
        }
    )

    assert record.player_id == "p1"
    assert record.game_status is GameStatus.IN_PROGRESS
    assert record.game_date.isoformat() == "2024-01-15"
    assert record.stats.three_pointers_made == 4
    assert record.stats.plus_minus == -6


def test_parse_player_stats_rejects_other_sport_categories():
    with pytest.raises(ValidationError):
        parse_player_stats({"player_id": "p1", "sport": "NBA", "stats": {"passing_yards": 300}})


def test_parse_player_stats_unknown_sport():
    with pytest.raises(UnsupportedSportError):
        parse_player_stats({"player_id": "p1", "sport": "CURLING", "stats": {}})


def test_player_stats_is_frozen():
    record = NBAPlayerStats(player_id="p1")

    with pytest.raises((TypeError, ValidationError)):
        record.player_id = "p2"  # type: ignore[misc]


def test_booster_effect_accepts_applied_to_alias():
    effect = BoosterEffect.model_validate({"type": "extra_points", "value": 5, "appliedTo": ["p1", "p2"]})

    assert effect.type is BoosterType.EXTRA_POINTS
    assert effect.applied_to == frozenset({"p1", "p2"})
