import random

import pytest

from pyfpts.config import BOOSTER_CATALOG, get_preset, iter_presets, resolve_random_bonus
from pyfpts.errors import InvalidBoosterEffectError
from pyfpts.models import BoosterType
from pyfpts.scoring import apply_booster_effects, calculate_lineup_score


def test_get_preset_is_case_insensitive():
    preset = get_preset("POWER_SURGE")

    assert preset.effect_type is BoosterType.SCORE_MULTIPLIER
    assert preset.effect_value == pytest.approx(1.10)
    assert preset.rarity == "Rare"


def test_get_preset_missing_raises():
    with pytest.raises(KeyError):
        get_preset("mega")


def test_catalog_keys_match_presets():
    assert {preset.key for preset in iter_presets()} == set(BOOSTER_CATALOG)


def test_random_bonus_requires_rng():
    with pytest.raises(InvalidBoosterEffectError):
        get_preset("luck").to_effect()


def test_random_bonus_is_reproducible_with_seed():
    first = get_preset("luck_charm").to_effect(rng=random.Random(7))
    second = get_preset("luck_charm").to_effect(rng=random.Random(7))

    assert first == second
    assert first.type is BoosterType.RANDOM_BONUS
    assert 5.0 <= first.value <= 25.0


def test_resolve_random_bonus_bounds():
    rng = random.Random(11)
    draws = [resolve_random_bonus(25.0, rng) for _ in range(50)]

    assert all(5.0 <= draw <= 25.0 for draw in draws)
    with pytest.raises(InvalidBoosterEffectError):
        resolve_random_bonus(3.0, rng)


def test_preset_effect_applies_to_lineup():
    lineup = calculate_lineup_score("L001", [{"player_id": "p1", "sport": "NBA", "stats": {"points": 40}}])
    effect = get_preset("energy").to_effect(applied_to=["p1"])

    boosted = apply_booster_effects(lineup, [effect])

    assert effect.applied_to == frozenset({"p1"})
    assert boosted.total_points == pytest.approx(42.0)


def test_resolve_random_bonus_rounds_half_up(monkeypatch):
    rng = random.Random(0)
    monkeypatch.setattr(rng, "random", lambda: 0.0625)

    assert resolve_random_bonus(25.0, rng) == 6.3
