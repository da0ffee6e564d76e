"""Apply booster effects to a computed lineup total."""

from __future__ import annotations

import logging
import math
from decimal import Decimal
from typing import Any, FrozenSet, List, Mapping, Optional, Sequence

from pydantic import ValidationError

from pyfpts.errors import InvalidBoosterEffectError
from pyfpts.models import (
    BoostedLineupScore,
    BoosterContribution,
    BoosterEffect,
    BoosterType,
    LineupScore,
)
from pyfpts.points import round_points, to_decimal


logger = logging.getLogger(__name__)


def coerce_effect(raw: Any) -> BoosterEffect:
    if isinstance(raw, BoosterEffect):
        return raw
    if isinstance(raw, Mapping):
        try:
            return BoosterEffect.model_validate(raw)
        except ValidationError as exc:
            raise InvalidBoosterEffectError(f"Invalid booster effect: {exc.errors()[0]['msg']}", effect=raw) from exc
    raise InvalidBoosterEffectError(f"Expected BoosterEffect or mapping, got {type(raw).__name__}", effect=raw)


def check_effect(effect: BoosterEffect) -> None:
    """Reject structurally invalid effects; suspicious but valid ones are only logged."""

    if not isinstance(effect.type, BoosterType):
        raise InvalidBoosterEffectError(f"Unsupported booster type {effect.type!r}", effect=effect)
    if not math.isfinite(effect.value):
        raise InvalidBoosterEffectError(f"{effect.type.value} value must be finite", effect=effect)
    if effect.applied_to is not None and not effect.applied_to:
        raise InvalidBoosterEffectError(f"{effect.type.value} applied_to must name at least one player", effect=effect)
    if effect.type is BoosterType.SCORE_MULTIPLIER:
        if effect.value < 0:
            raise InvalidBoosterEffectError(
                f"score_multiplier value must not be negative, got {effect.value}", effect=effect
            )
        if effect.value == 0:
            logger.warning("score_multiplier of 0 will wipe out the affected points")
    elif effect.type in (BoosterType.EXTRA_POINTS, BoosterType.RANDOM_BONUS):
        if effect.value < 0:
            raise InvalidBoosterEffectError(
                f"{effect.type.value} value must not be negative, got {effect.value}", effect=effect
            )


def _scoped_subtotal(lineup: LineupScore, player_ids: FrozenSet[str]) -> tuple[Decimal, bool]:
    subtotal = Decimal(0)
    matched = False
    for score in lineup.player_scores:
        if score.player_id in player_ids:
            subtotal += to_decimal(score.fantasy_points)
            matched = True
    return subtotal, matched


def _effect_delta(effect: BoosterEffect, base: Decimal) -> Decimal:
    value = to_decimal(effect.value)
    if effect.type is BoosterType.SCORE_MULTIPLIER:
        return base * value - base
    if effect.type in (BoosterType.EXTRA_POINTS, BoosterType.RANDOM_BONUS):
        return value
    if effect.type is BoosterType.LINEUP_PROTECTION:
        return max(Decimal(0), -base)
    raise InvalidBoosterEffectError(f"Unsupported booster type {effect.type!r}", effect=effect)


class BoosterEffectApplier:
    """Applies effects in list order; each effect sees the total left by the previous one.

    The running total stays unrounded between effects and is rounded once at
    the end. Contribution figures are rounded for display.
    """

    def apply(self, lineup: LineupScore, effects: Sequence[BoosterEffect | Mapping[str, Any]]) -> BoostedLineupScore:
        resolved = [coerce_effect(raw) for raw in effects]
        for effect in resolved:
            check_effect(effect)

        current = to_decimal(lineup.total_points)
        contributions: List[BoosterContribution] = []
        for effect in resolved:
            if effect.applied_to is None:
                delta = _effect_delta(effect, current)
            else:
                subtotal, matched = _scoped_subtotal(lineup, effect.applied_to)
                delta = _effect_delta(effect, subtotal) if matched else Decimal(0)
            after = current + delta
            contributions.append(
                BoosterContribution(
                    type=effect.type,
                    description=effect.description,
                    applied_to=tuple(sorted(effect.applied_to)) if effect.applied_to is not None else None,
                    total_before=float(round_points(current)),
                    total_after=float(round_points(after)),
                    delta=float(round_points(delta)),
                )
            )
            logger.debug("Applied %s to lineup %s: %s -> %s", effect.type.value, lineup.lineup_id, current, after)
            current = after

        return BoostedLineupScore(
            lineup=lineup,
            total_points=float(round_points(current)),
            booster_contributions=tuple(contributions),
        )


def apply_booster_effects(
    lineup: LineupScore,
    effects: Optional[Sequence[BoosterEffect | Mapping[str, Any]]] = None,
) -> BoostedLineupScore:
    return BoosterEffectApplier().apply(lineup, effects or [])
