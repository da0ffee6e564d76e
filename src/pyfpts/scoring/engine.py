"""Facade wiring the calculator, aggregator, booster applier and validator together."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

from pyfpts.config import DEFAULT_SCHEMA_REGISTRY, ScoringRuleTable, StatSchemaRegistry
from pyfpts.config_loader import resolve_rule_table
from pyfpts.models import BoostedLineupScore, BoosterEffect, LineupScore, PlayerScore, Sport

from .boosters import BoosterEffectApplier
from .lineup import LineupAggregator, utcnow
from .player import PlayerScoreCalculator
from .validator import ScoringRuleValidator


class ScoringEngine:
    """Stateless scoring entry point bound to one rule table and schema registry.

    When ``rules`` is omitted the defaults are used, with any override profile
    named by ``PYFPTS_RULES_PATH`` layered on top.
    """

    def __init__(
        self,
        rules: Optional[ScoringRuleTable] = None,
        registry: Optional[StatSchemaRegistry] = None,
        *,
        clock: Callable[[], datetime] = utcnow,
    ):
        self.rules = rules if rules is not None else resolve_rule_table()
        self.registry = registry if registry is not None else DEFAULT_SCHEMA_REGISTRY
        self.calculator = PlayerScoreCalculator(self.rules, self.registry)
        self.aggregator = LineupAggregator(self.calculator, clock=clock)
        self.applier = BoosterEffectApplier()
        self.validator = ScoringRuleValidator(self.rules, self.registry)

    def calculate_player_score(self, stats: Any) -> PlayerScore:
        return self.calculator.calculate(stats)

    def calculate_lineup_score(self, lineup_id: str, players: Sequence[Any]) -> LineupScore:
        return self.aggregator.aggregate(lineup_id, players)

    def score_lineups(
        self,
        lineups: Iterable[Tuple[str, Sequence[Any]]] | Mapping[str, Sequence[Any]],
    ) -> List[LineupScore]:
        return self.aggregator.score_lineups(lineups)

    def apply_boosters(
        self,
        lineup: LineupScore,
        effects: Sequence[BoosterEffect | Mapping[str, Any]] = (),
    ) -> BoostedLineupScore:
        return self.applier.apply(lineup, effects)

    def score_lineup_with_boosters(
        self,
        lineup_id: str,
        players: Sequence[Any],
        effects: Sequence[BoosterEffect | Mapping[str, Any]] = (),
    ) -> BoostedLineupScore:
        return self.apply_boosters(self.calculate_lineup_score(lineup_id, players), effects)

    def validate_rules(self, sport: Sport | str) -> bool:
        return self.validator.validate(sport)

    def check_rules(self, sport: Sport | str) -> None:
        self.validator.check(sport)

    def validate_all_rules(self) -> Dict[Sport, bool]:
        return self.validator.validate_all()
