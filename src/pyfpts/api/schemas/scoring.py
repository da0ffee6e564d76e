from __future__ import annotations

from typing import Any, List

from pydantic import BaseModel, Field


class LineupScoreRequest(BaseModel):
    lineup_id: str = Field(..., min_length=1)
    players: List[dict[str, Any]] = Field(default_factory=list)
    boosters: List[dict[str, Any]] = Field(default_factory=list)


class WeeklyScoreRequest(BaseModel):
    lineups: List[LineupScoreRequest] = Field(default_factory=list)
