from __future__ import annotations

from typing import List

from pydantic import BaseModel


class ScoringRuleResponse(BaseModel):
    category: str
    label: str
    points_per_unit: float
    description: str


class RuleTableResponse(BaseModel):
    sport: str
    valid: bool
    problems: List[str]
    rules: List[ScoringRuleResponse]


class BoosterPresetResponse(BaseModel):
    key: str
    name: str
    effect_type: str
    effect_value: float
    duration_hours: int
    description: str
    rarity: str
