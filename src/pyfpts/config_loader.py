"""Persist and load scoring rule override profiles."""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Optional

from pyfpts.config import DEFAULT_RULE_TABLE, ScoringRuleTable
from pyfpts.errors import ConfigurationInconsistencyError, UnsupportedSportError
from pyfpts.models import Sport


logger = logging.getLogger(__name__)

RULES_PATH_ENV = "PYFPTS_RULES_PATH"


@dataclass
class RuleProfile:
    """Weight overrides keyed by sport, e.g. ``{"NBA": {"rebounds": 1.25}}``."""

    weights: Dict[str, Dict[str, float]] = field(default_factory=dict)

    @classmethod
    def load(cls, path: Path) -> "RuleProfile":
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as exc:
            raise ConfigurationInconsistencyError(f"Rule profile {path} is not valid JSON: {exc}") from exc
        return cls.from_mapping(data, source=str(path))

    @classmethod
    def from_mapping(cls, data: object, *, source: str = "<mapping>") -> "RuleProfile":
        if not isinstance(data, dict):
            raise ConfigurationInconsistencyError(f"Rule profile {source} must be a JSON object keyed by sport")
        weights: Dict[str, Dict[str, float]] = {}
        for sport, table in data.items():
            if not isinstance(table, dict):
                raise ConfigurationInconsistencyError(
                    f"Rule profile {source}: weights for {sport!r} must be an object of category -> weight"
                )
            weights[str(sport)] = dict(table)
        return cls(weights=weights)

    def save(self, path: Path) -> None:
        path.write_text(json.dumps(self.weights, indent=2, sort_keys=True), encoding="utf-8")

    def apply(self, table: ScoringRuleTable = DEFAULT_RULE_TABLE) -> ScoringRuleTable:
        """Layer these overrides on top of ``table`` and return the new table."""

        result = table
        for sport_key, weights in self.weights.items():
            try:
                sport = Sport.parse(sport_key)
                result = result.with_overrides(sport, weights)
            except UnsupportedSportError as exc:
                raise ConfigurationInconsistencyError(
                    f"Rule profile references unsupported sport {sport_key!r}", sport=sport_key
                ) from exc
        return result

    @classmethod
    def from_table(cls, table: ScoringRuleTable) -> "RuleProfile":
        return cls(
            weights={
                sport.value: {rule.name: rule.points_per_unit for rule in table.rules_for(sport)}
                for sport in table.sports()
            }
        )


def resolve_rule_table(
    path: Optional[Path] = None,
    *,
    base: ScoringRuleTable = DEFAULT_RULE_TABLE,
) -> ScoringRuleTable:
    """Return ``base`` with the profile at ``path`` (or ``$PYFPTS_RULES_PATH``) applied."""

    if path is not None:
        return RuleProfile.load(path).apply(base)

    raw = os.getenv(RULES_PATH_ENV)
    if not raw:
        return base
    env_path = Path(raw)
    if not env_path.is_file():
        logger.warning("%s points at missing file %s; using default scoring rules", RULES_PATH_ENV, raw)
        return base
    logger.info("Loading scoring rule overrides from %s", env_path)
    return RuleProfile.load(env_path).apply(base)
