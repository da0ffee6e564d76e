"""Consistency checks between stat schemas and scoring rule tables."""

from __future__ import annotations

import logging
import math
from collections import Counter
from typing import Dict, List, Optional

from pyfpts.config import DEFAULT_RULE_TABLE, DEFAULT_SCHEMA_REGISTRY, ScoringRuleTable, StatSchemaRegistry
from pyfpts.errors import ConfigurationInconsistencyError
from pyfpts.models import Sport


logger = logging.getLogger(__name__)


class ScoringRuleValidator:
    """Confirms every schema category of a sport has exactly one finite weight.

    Intended for startup and CI checks rather than the per-request path.
    """

    def __init__(
        self,
        rules: Optional[ScoringRuleTable] = None,
        registry: Optional[StatSchemaRegistry] = None,
    ):
        self.rules = rules if rules is not None else DEFAULT_RULE_TABLE
        self.registry = registry if registry is not None else DEFAULT_SCHEMA_REGISTRY

    def problems(self, sport: Sport | str) -> List[str]:
        resolved = Sport.parse(sport)
        schema_names = [category.name for category in self.registry.schema_for(resolved)]
        if resolved not in self.rules.sports():
            return [f"no weight table registered for {resolved.value}"]

        rules = self.rules.rules_for(resolved)
        issues: List[str] = []
        counts = Counter(rule.name for rule in rules)
        for name, count in counts.items():
            if count > 1:
                issues.append(f"duplicate weight for {name!r}")
        for rule in rules:
            if not math.isfinite(rule.points_per_unit):
                issues.append(f"non-finite weight for {rule.name!r}")
        weighted = set(counts)
        for name in schema_names:
            if name not in weighted:
                issues.append(f"missing weight for {name!r}")
        known = set(schema_names)
        for name in counts:
            if name not in known:
                issues.append(f"weight for unknown category {name!r}")
        return issues

    def validate(self, sport: Sport | str) -> bool:
        issues = self.problems(sport)
        for issue in issues:
            logger.warning("Scoring rules for %s: %s", Sport.parse(sport).value, issue)
        return not issues

    def check(self, sport: Sport | str) -> None:
        """Raise ``ConfigurationInconsistencyError`` if ``sport`` fails validation."""

        issues = self.problems(sport)
        if issues:
            resolved = Sport.parse(sport)
            raise ConfigurationInconsistencyError(
                f"Scoring rules for {resolved.value} are inconsistent: {'; '.join(issues)}",
                sport=resolved,
                problems=issues,
            )

    def validate_all(self) -> Dict[Sport, bool]:
        return {sport: self.validate(sport) for sport in self.registry.sports()}


def validate_scoring_rules(
    sport: Sport | str,
    *,
    rules: Optional[ScoringRuleTable] = None,
    registry: Optional[StatSchemaRegistry] = None,
) -> bool:
    return ScoringRuleValidator(rules, registry).validate(sport)
