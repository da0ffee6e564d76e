"""Catalog of booster presets offered to users."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Dict, Iterable, Literal, Optional

from pyfpts.errors import InvalidBoosterEffectError
from pyfpts.models import BoosterEffect, BoosterType
from pyfpts.points import round_points, to_decimal

RANDOM_BONUS_MINIMUM = 5.0


@dataclass(frozen=True)
class BoosterPreset:
    key: str
    name: str
    effect_type: BoosterType
    effect_value: float
    duration_hours: int
    description: str
    rarity: Literal["Common", "Rare", "Epic", "Legendary"] = "Common"

    def to_effect(
        self,
        *,
        applied_to: Optional[Iterable[str]] = None,
        rng: Optional[random.Random] = None,
    ) -> BoosterEffect:
        """Build a concrete effect; ``random_bonus`` presets need ``rng`` to resolve their draw."""

        value = self.effect_value
        if self.effect_type is BoosterType.RANDOM_BONUS:
            if rng is None:
                raise InvalidBoosterEffectError(
                    f"Preset {self.key!r} draws a random bonus; pass a seeded rng to resolve it"
                )
            value = resolve_random_bonus(self.effect_value, rng)
        return BoosterEffect(
            type=self.effect_type,
            value=value,
            applied_to=frozenset(applied_to) if applied_to is not None else None,
            description=self.description,
        )


def resolve_random_bonus(
    max_value: float,
    rng: random.Random,
    *,
    minimum: float = RANDOM_BONUS_MINIMUM,
) -> float:
    """Draw a bonus in ``[minimum, max_value]`` rounded to one decimal."""

    if max_value < minimum:
        raise InvalidBoosterEffectError(
            f"random bonus ceiling {max_value} is below the minimum of {minimum}"
        )
    draw = minimum + rng.random() * (max_value - minimum)
    return float(round_points(to_decimal(draw)))


BOOSTER_CATALOG: Dict[str, BoosterPreset] = {
    "energy": BoosterPreset(
        key="energy",
        name="Disney Energy",
        effect_type=BoosterType.SCORE_MULTIPLIER,
        effect_value=1.05,
        duration_hours=168,
        description="+5% score multiplier for one week",
    ),
    "luck": BoosterPreset(
        key="luck",
        name="Disney Luck",
        effect_type=BoosterType.RANDOM_BONUS,
        effect_value=25.0,
        duration_hours=24,
        description="Random bonus points (5-25) for one lineup",
    ),
    "energy_boost": BoosterPreset(
        key="energy_boost",
        name="Energy Boost",
        effect_type=BoosterType.SCORE_MULTIPLIER,
        effect_value=1.05,
        duration_hours=168,
        description="+5% score multiplier for one week",
    ),
    "luck_charm": BoosterPreset(
        key="luck_charm",
        name="Luck Charm",
        effect_type=BoosterType.RANDOM_BONUS,
        effect_value=25.0,
        duration_hours=24,
        description="Random bonus points (5-25) for one lineup",
    ),
    "power_surge": BoosterPreset(
        key="power_surge",
        name="Power Surge",
        effect_type=BoosterType.SCORE_MULTIPLIER,
        effect_value=1.10,
        duration_hours=168,
        description="+10% score multiplier for premium users",
        rarity="Rare",
    ),
    "lineup_shield": BoosterPreset(
        key="lineup_shield",
        name="Lineup Shield",
        effect_type=BoosterType.LINEUP_PROTECTION,
        effect_value=1.0,
        duration_hours=168,
        description="Protects lineup from one bad performance",
        rarity="Epic",
    ),
}


def iter_presets() -> Iterable[BoosterPreset]:
    return BOOSTER_CATALOG.values()


def get_preset(key: str) -> BoosterPreset:
    """Fetch a preset by key, raising KeyError if missing."""

    normalized = key.strip().lower()
    if normalized not in BOOSTER_CATALOG:
        raise KeyError(f"No booster preset configured for key={key!r}")
    return BOOSTER_CATALOG[normalized]
