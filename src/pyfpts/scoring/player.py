"""Per-player fantasy point calculation."""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import Any, List, Mapping, Optional

from pyfpts.config import DEFAULT_RULE_TABLE, DEFAULT_SCHEMA_REGISTRY, ScoringRuleTable, StatSchemaRegistry
from pyfpts.models import BreakdownEntry, PlayerScore, Sport, parse_player_stats
from pyfpts.models.stats import NBAPlayerStats, NFLPlayerStats
from pyfpts.points import round_points, to_decimal


logger = logging.getLogger(__name__)


def coerce_player_stats(stats: Any) -> NBAPlayerStats | NFLPlayerStats:
    if isinstance(stats, (NBAPlayerStats, NFLPlayerStats)):
        return stats
    if isinstance(stats, Mapping):
        return parse_player_stats(stats)
    raise TypeError(f"Expected PlayerStats or mapping, got {type(stats).__name__}")


class PlayerScoreCalculator:
    """Scores one player's game using an injected schema registry and rule table."""

    def __init__(
        self,
        rules: Optional[ScoringRuleTable] = None,
        registry: Optional[StatSchemaRegistry] = None,
    ):
        self.rules = rules if rules is not None else DEFAULT_RULE_TABLE
        self.registry = registry if registry is not None else DEFAULT_SCHEMA_REGISTRY

    def calculate(self, stats: NBAPlayerStats | NFLPlayerStats | Mapping[str, Any]) -> PlayerScore:
        record = coerce_player_stats(stats)
        sport = Sport.parse(record.sport)
        schema = self.registry.schema_for(sport)
        rules = {rule.name: rule for rule in self.rules.rules_for(sport)}

        breakdown: List[BreakdownEntry] = []
        total = Decimal(0)
        for category in schema:
            rule = rules.get(category.name)
            if rule is None:
                logger.debug("No %s weight for %s; category not scored", sport.value, category.name)
                continue
            if rule.points_per_unit == 0:
                continue
            raw_value = record.stats.value_of(category.key)
            points = round_points(to_decimal(raw_value) * to_decimal(rule.points_per_unit))
            total += points
            breakdown.append(
                BreakdownEntry(
                    category=category.name,
                    raw_value=raw_value,
                    weight=rule.points_per_unit,
                    points=float(points),
                    description=rule.description or category.label,
                )
            )

        return PlayerScore(
            player_id=record.player_id,
            player_name=record.player_name,
            sport=sport,
            breakdown=tuple(breakdown),
            fantasy_points=float(round_points(total)),
        )


def calculate_player_score(
    stats: NBAPlayerStats | NFLPlayerStats | Mapping[str, Any],
    *,
    rules: Optional[ScoringRuleTable] = None,
    registry: Optional[StatSchemaRegistry] = None,
) -> PlayerScore:
    return PlayerScoreCalculator(rules, registry).calculate(stats)
