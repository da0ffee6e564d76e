from datetime import datetime, timezone

import pytest

from pyfpts import ScoringEngine, UnsupportedSportError
from pyfpts.config import DEFAULT_RULE_TABLE
from pyfpts.config_loader import RULES_PATH_ENV
from pyfpts.errors import ConfigurationInconsistencyError
from pyfpts.models import BoosterEffect, BoosterType, NBAStat


NOW = datetime(2024, 1, 15, tzinfo=timezone.utc)


def _players() -> list[dict]:
    return [
        {"player_id": "nba1", "sport": "NBA", "stats": {"points": 25, "rebounds": 8, "assists": 6, "steals": 2,
                                                      "blocks": 1, "turnovers": 3, "three_pointers_made": 3}},
        {"player_id": "nfl1", "sport": "NFL", "stats": {"passing_yards": 300, "passing_touchdowns": 2,
                                                      "interceptions": 1, "rushing_yards": 50,
                                                      "rushing_touchdowns": 1}},
    ]


def test_engine_scores_lineup_with_boosters():
    engine = ScoringEngine(DEFAULT_RULE_TABLE, clock=lambda: NOW)
    effects = [
        BoosterEffect(type=BoosterType.SCORE_MULTIPLIER, value=1.1),
        BoosterEffect(type=BoosterType.EXTRA_POINTS, value=10),
    ]

    boosted = engine.score_lineup_with_boosters("L001", _players(), effects)

    assert boosted.lineup_id == "L001"
    assert boosted.base_points == pytest.approx(80.1)
    assert boosted.total_points == pytest.approx(98.1)
    assert boosted.lineup.calculated_at == NOW


def test_engine_without_boosters_matches_lineup_total():
    engine = ScoringEngine(DEFAULT_RULE_TABLE)

    boosted = engine.score_lineup_with_boosters("L001", _players())

    assert boosted.total_points == boosted.lineup.total_points


def test_engine_uses_injected_rules():
    rules = DEFAULT_RULE_TABLE.with_overrides("NBA", {NBAStat.POINTS: 2})
    engine = ScoringEngine(rules)

    assert engine.calculate_player_score(_players()[0]).fantasy_points == pytest.approx(76.1)
    assert ScoringEngine(DEFAULT_RULE_TABLE).calculate_player_score(_players()[0]).fantasy_points == pytest.approx(51.1)


def test_engine_reads_rules_from_env(tmp_path, monkeypatch):
    path = tmp_path / "rules.json"
    path.write_text('{"NBA": {"points": 2}}', encoding="utf-8")
    monkeypatch.setenv(RULES_PATH_ENV, str(path))

    assert ScoringEngine().calculate_player_score(_players()[0]).fantasy_points == pytest.approx(76.1)


def test_engine_weekly_scores():
    engine = ScoringEngine(DEFAULT_RULE_TABLE)
    players = _players()

    results = engine.score_lineups([("A", players[:1]), ("B", players[1:])])

    assert [result.total_points for result in results] == pytest.approx([51.1, 29.0])


def test_engine_validation_helpers():
    engine = ScoringEngine(DEFAULT_RULE_TABLE.with_sport("NFL", DEFAULT_RULE_TABLE.rules_for("NFL")[:3]))

    assert engine.validate_rules("NBA")
    assert engine.validate_all_rules()["NFL"] is False
    with pytest.raises(ConfigurationInconsistencyError):
        engine.check_rules("NFL")


def test_engine_propagates_unsupported_sport():
    engine = ScoringEngine(DEFAULT_RULE_TABLE)

    with pytest.raises(UnsupportedSportError):
        engine.calculate_lineup_score("L001", _players() + [{"player_id": "x", "sport": "MLB"}])
