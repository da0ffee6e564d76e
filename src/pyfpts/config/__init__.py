"""Scoring configuration: stat schemas, weight tables and booster presets."""

from .boosters import BOOSTER_CATALOG, BoosterPreset, get_preset, iter_presets, resolve_random_bonus
from .rules import DEFAULT_RULE_TABLE, ScoringRule, ScoringRuleTable, resolve_category, weights_for
from .schema import DEFAULT_SCHEMA_REGISTRY, StatCategory, StatKind, StatSchemaRegistry, categories_for

__all__ = [
    "BOOSTER_CATALOG",
    "BoosterPreset",
    "DEFAULT_RULE_TABLE",
    "DEFAULT_SCHEMA_REGISTRY",
    "ScoringRule",
    "ScoringRuleTable",
    "StatCategory",
    "StatKind",
    "StatSchemaRegistry",
    "categories_for",
    "get_preset",
    "iter_presets",
    "resolve_category",
    "resolve_random_bonus",
    "weights_for",
]
