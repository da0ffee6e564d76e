"""Booster effect inputs and the boosted lineup record."""

from __future__ import annotations

from enum import Enum
from typing import FrozenSet, Optional, Tuple

from pydantic import BaseModel
from pydantic.alias_generators import to_camel
from pydantic.config import ConfigDict

from .score import LineupScore


class BoosterType(str, Enum):
    SCORE_MULTIPLIER = "score_multiplier"
    EXTRA_POINTS = "extra_points"
    RANDOM_BONUS = "random_bonus"
    LINEUP_PROTECTION = "lineup_protection"


class BoosterEffect(BaseModel):
    """One modifier applied to a lineup total.

    ``value`` is a factor for ``score_multiplier`` and an absolute point
    amount for ``extra_points`` and ``random_bonus``. A ``random_bonus`` value
    is already resolved by the caller. ``applied_to`` limits the effect to the
    named players; ``None`` means the whole lineup.
    """

    type: BoosterType
    value: float = 0.0
    applied_to: Optional[FrozenSet[str]] = None
    description: str = ""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


class BoosterContribution(BaseModel):
    type: BoosterType
    description: str = ""
    applied_to: Optional[Tuple[str, ...]] = None
    total_before: float
    total_after: float
    delta: float

    model_config = ConfigDict(frozen=True)


class BoostedLineupScore(BaseModel):
    lineup: LineupScore
    total_points: float
    booster_contributions: Tuple[BoosterContribution, ...] = ()

    model_config = ConfigDict(frozen=True)

    @property
    def lineup_id(self) -> str:
        return self.lineup.lineup_id

    @property
    def base_points(self) -> float:
        return self.lineup.total_points

    @property
    def bonus_points(self) -> float:
        return self.total_points - self.lineup.total_points
