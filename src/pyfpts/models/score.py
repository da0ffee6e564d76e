"""Derived score records returned by the calculator and aggregator."""

from __future__ import annotations

from datetime import datetime
from typing import Tuple

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

from .stats import Sport


class BreakdownEntry(BaseModel):
    """Points earned from a single stat category."""

    category: str
    raw_value: float
    weight: float
    points: float
    description: str = ""

    model_config = ConfigDict(frozen=True)


class PlayerScore(BaseModel):
    player_id: str = Field(..., min_length=1)
    player_name: str = ""
    sport: Sport
    breakdown: Tuple[BreakdownEntry, ...] = ()
    fantasy_points: float = 0.0

    model_config = ConfigDict(frozen=True)

    def points_for(self, category: str) -> float:
        for entry in self.breakdown:
            if entry.category == category:
                return entry.points
        return 0.0


class LineupScore(BaseModel):
    lineup_id: str
    player_scores: Tuple[PlayerScore, ...] = ()
    total_points: float = 0.0
    calculated_at: datetime

    model_config = ConfigDict(frozen=True)
