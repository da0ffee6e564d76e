"""Fantasy point scoring: players, lineups, boosters and rule validation."""

from pyfpts.points import round_points

from .boosters import BoosterEffectApplier, apply_booster_effects
from .engine import ScoringEngine
from .lineup import LineupAggregator, calculate_lineup_score
from .player import PlayerScoreCalculator, calculate_player_score
from .validator import ScoringRuleValidator, validate_scoring_rules

__all__ = [
    "BoosterEffectApplier",
    "LineupAggregator",
    "PlayerScoreCalculator",
    "ScoringEngine",
    "ScoringRuleValidator",
    "apply_booster_effects",
    "calculate_lineup_score",
    "calculate_player_score",
    "round_points",
    "validate_scoring_rules",
]
