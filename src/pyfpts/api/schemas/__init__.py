"""Pydantic models for API I/O."""

from .rules import BoosterPresetResponse, RuleTableResponse, ScoringRuleResponse
from .scoring import LineupScoreRequest, WeeklyScoreRequest

__all__ = [
    "BoosterPresetResponse",
    "LineupScoreRequest",
    "RuleTableResponse",
    "ScoringRuleResponse",
    "WeeklyScoreRequest",
]
