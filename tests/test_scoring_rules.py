import pytest

from pyfpts.config import DEFAULT_RULE_TABLE, ScoringRuleTable, resolve_category, weights_for
from pyfpts.errors import ConfigurationInconsistencyError, UnsupportedSportError
from pyfpts.models import NBAStat, NFLStat, Sport


def test_default_nba_weights():
    weights = weights_for("NBA")

    assert weights[NBAStat.POINTS] == 1.0
    assert weights[NBAStat.REBOUNDS] == pytest.approx(1.2)
    assert weights[NBAStat.ASSISTS] == pytest.approx(1.5)
    assert weights[NBAStat.STEALS] == 3.0
    assert weights[NBAStat.BLOCKS] == 3.0
    assert weights[NBAStat.TURNOVERS] == -1.0
    assert weights[NBAStat.THREE_POINTERS_MADE] == pytest.approx(0.5)
    assert weights[NBAStat.MINUTES] == 0.0


def test_default_nfl_weights():
    weights = DEFAULT_RULE_TABLE.weights_for(Sport.NFL)

    assert weights[NFLStat.PASSING_YARDS] == pytest.approx(0.04)
    assert weights[NFLStat.PASSING_TOUCHDOWNS] == 4.0
    assert weights[NFLStat.INTERCEPTIONS] == -2.0
    assert weights[NFLStat.RUSHING_YARDS] == pytest.approx(0.1)
    assert weights[NFLStat.RUSHING_TOUCHDOWNS] == 6.0
    assert weights[NFLStat.RECEPTIONS] == pytest.approx(0.5)


def test_weights_for_unknown_sport_raises():
    with pytest.raises(UnsupportedSportError):
        weights_for("CURLING")


def test_weights_for_sport_missing_from_table_raises():
    table = ScoringRuleTable({Sport.NFL: DEFAULT_RULE_TABLE.rules_for(Sport.NFL)})

    with pytest.raises(UnsupportedSportError):
        table.weights_for(Sport.NBA)


def test_with_overrides_returns_new_table():
    table = DEFAULT_RULE_TABLE.with_overrides("NBA", {"rebounds": 1.25, "threePointersMade": 1})

    assert table.weights_for("NBA")[NBAStat.REBOUNDS] == pytest.approx(1.25)
    assert table.weights_for("NBA")[NBAStat.THREE_POINTERS_MADE] == 1.0
    assert DEFAULT_RULE_TABLE.weights_for("NBA")[NBAStat.REBOUNDS] == pytest.approx(1.2)
    assert [rule.name for rule in table.rules_for("NBA")] == [
        rule.name for rule in DEFAULT_RULE_TABLE.rules_for("NBA")
    ]


def test_with_overrides_rejects_unknown_category():
    with pytest.raises(ConfigurationInconsistencyError):
        DEFAULT_RULE_TABLE.with_overrides("NFL", {"rebounds": 1})


def test_with_overrides_rejects_non_numeric_weight():
    with pytest.raises(ConfigurationInconsistencyError):
        DEFAULT_RULE_TABLE.with_overrides("NFL", {"passing_yards": "lots"})


def test_resolve_category_handles_camel_case():
    assert resolve_category("NFL", "passingTouchdowns") is NFLStat.PASSING_TOUCHDOWNS
    assert resolve_category(Sport.NBA, NBAStat.BLOCKS) is NBAStat.BLOCKS
