import logging

import pytest

from pyfpts.config import DEFAULT_RULE_TABLE, ScoringRule, ScoringRuleTable
from pyfpts.errors import ConfigurationInconsistencyError, UnsupportedSportError
from pyfpts.models import NBAStat, NFLStat, Sport
from pyfpts.scoring import ScoringRuleValidator, validate_scoring_rules


def _nba_rules_without(category) -> list[ScoringRule]:
    return [rule for rule in DEFAULT_RULE_TABLE.rules_for("NBA") if rule.category is not category]


def test_default_tables_are_consistent():
    validator = ScoringRuleValidator()

    assert validator.validate("NBA")
    assert validator.validate(Sport.NFL)
    assert validator.validate_all() == {Sport.NBA: True, Sport.NFL: True}


def test_missing_weight_fails_validation(caplog):
    rules = DEFAULT_RULE_TABLE.with_sport("NBA", _nba_rules_without(NBAStat.PLUS_MINUS))

    with caplog.at_level(logging.WARNING, logger="pyfpts.scoring.validator"):
        assert validate_scoring_rules("NBA", rules=rules) is False
    assert "plus_minus" in caplog.text


def test_check_raises_with_problems():
    rules = DEFAULT_RULE_TABLE.with_sport("NBA", _nba_rules_without(NBAStat.REBOUNDS))
    validator = ScoringRuleValidator(rules)

    with pytest.raises(ConfigurationInconsistencyError) as excinfo:
        validator.check("NBA")

    assert excinfo.value.sport is Sport.NBA
    assert excinfo.value.problems == ["missing weight for 'rebounds'"]


def test_duplicate_and_foreign_weights_are_reported():
    rules = list(DEFAULT_RULE_TABLE.rules_for("NBA"))
    rules.append(ScoringRule(NBAStat.POINTS, 2.0))
    rules.append(ScoringRule(NFLStat.SACKS, 1.0))
    validator = ScoringRuleValidator(DEFAULT_RULE_TABLE.with_sport("NBA", rules))

    problems = validator.problems("NBA")

    assert "duplicate weight for 'points'" in problems
    assert "weight for unknown category 'sacks'" in problems


def test_non_finite_weight_is_reported():
    rules = list(DEFAULT_RULE_TABLE.rules_for("NFL"))
    rules[0] = ScoringRule(NFLStat.PASSING_YARDS, float("nan"))
    validator = ScoringRuleValidator(DEFAULT_RULE_TABLE.with_sport("NFL", rules))

    assert validator.problems("NFL") == ["non-finite weight for 'passing_yards'"]


def test_sport_without_weight_table_is_inconsistent():
    validator = ScoringRuleValidator(ScoringRuleTable({Sport.NFL: DEFAULT_RULE_TABLE.rules_for("NFL")}))

    assert validator.validate("NBA") is False
    assert validator.validate("NFL") is True


def test_unknown_sport_raises():
    with pytest.raises(UnsupportedSportError):
        ScoringRuleValidator().validate("CURLING")
