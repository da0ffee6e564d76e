"""Per-sport scoring weights (points awarded per unit of a stat)."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Dict, Iterable, List, Mapping, Tuple

from pyfpts.errors import ConfigurationInconsistencyError, UnsupportedSportError
from pyfpts.models import STAT_ENUMS, NBAStat, NFLStat, Sport


@dataclass(frozen=True)
class ScoringRule:
    category: Enum
    points_per_unit: float
    description: str = ""

    @property
    def name(self) -> str:
        return str(self.category.value)


def _untracked(category: Enum) -> ScoringRule:
    return ScoringRule(category, 0.0, "Tracked, not scored")


_NBA_RULES: Tuple[ScoringRule, ...] = (
    _untracked(NBAStat.MINUTES),
    ScoringRule(NBAStat.POINTS, 1.0, "1 point per point scored"),
    ScoringRule(NBAStat.REBOUNDS, 1.2, "1.2 points per rebound"),
    ScoringRule(NBAStat.ASSISTS, 1.5, "1.5 points per assist"),
    ScoringRule(NBAStat.STEALS, 3.0, "3 points per steal"),
    ScoringRule(NBAStat.BLOCKS, 3.0, "3 points per block"),
    ScoringRule(NBAStat.TURNOVERS, -1.0, "-1 point per turnover"),
    _untracked(NBAStat.FIELD_GOALS_MADE),
    _untracked(NBAStat.FIELD_GOALS_ATTEMPTED),
    ScoringRule(NBAStat.THREE_POINTERS_MADE, 0.5, "0.5 bonus points per 3PM"),
    _untracked(NBAStat.THREE_POINTERS_ATTEMPTED),
    _untracked(NBAStat.FREE_THROWS_MADE),
    _untracked(NBAStat.FREE_THROWS_ATTEMPTED),
    _untracked(NBAStat.PERSONAL_FOULS),
    _untracked(NBAStat.PLUS_MINUS),
)

_NFL_RULES: Tuple[ScoringRule, ...] = (
    ScoringRule(NFLStat.PASSING_YARDS, 0.04, "1 point per 25 passing yards"),
    ScoringRule(NFLStat.PASSING_TOUCHDOWNS, 4.0, "4 points per passing TD"),
    ScoringRule(NFLStat.INTERCEPTIONS, -2.0, "-2 points per interception thrown"),
    _untracked(NFLStat.COMPLETIONS),
    _untracked(NFLStat.ATTEMPTS),
    ScoringRule(NFLStat.RUSHING_YARDS, 0.1, "1 point per 10 rushing yards"),
    ScoringRule(NFLStat.RUSHING_TOUCHDOWNS, 6.0, "6 points per rushing TD"),
    _untracked(NFLStat.RUSHING_ATTEMPTS),
    ScoringRule(NFLStat.RECEIVING_YARDS, 0.1, "1 point per 10 receiving yards"),
    ScoringRule(NFLStat.RECEIVING_TOUCHDOWNS, 6.0, "6 points per receiving TD"),
    ScoringRule(NFLStat.RECEPTIONS, 0.5, "0.5 points per reception (PPR)"),
    _untracked(NFLStat.TARGETS),
    _untracked(NFLStat.TACKLES),
    _untracked(NFLStat.SACKS),
    _untracked(NFLStat.FORCED_FUMBLES),
    _untracked(NFLStat.INTERCEPTIONS_CAUGHT),
    ScoringRule(NFLStat.FIELD_GOALS_MADE, 3.0, "3 points per field goal"),
    _untracked(NFLStat.FIELD_GOALS_ATTEMPTED),
    ScoringRule(NFLStat.EXTRA_POINTS_MADE, 1.0, "1 point per extra point"),
    _untracked(NFLStat.EXTRA_POINTS_ATTEMPTED),
)


def _snake_case(value: str) -> str:
    return re.sub(r"(?<!^)(?=[A-Z])", "_", value.strip()).lower()


def resolve_category(sport: Sport | str, key: Enum | str) -> Enum:
    """Map ``key`` (enum member, snake_case or camelCase) to a category of ``sport``."""

    resolved_sport = Sport.parse(sport)
    enum_cls = STAT_ENUMS.get(resolved_sport)
    if enum_cls is None:
        raise UnsupportedSportError(sport)
    if isinstance(key, enum_cls):
        return key
    text = key.value if isinstance(key, Enum) else str(key)
    for candidate in (text, _snake_case(text)):
        try:
            return enum_cls(candidate)
        except ValueError:
            continue
    raise ConfigurationInconsistencyError(
        f"Unknown {resolved_sport.value} stat category {text!r}",
        sport=resolved_sport,
        problems=[f"unknown category {text!r}"],
    )


def _coerce_weight(sport: Sport, category: Enum, raw: object) -> float:
    if isinstance(raw, bool):
        raw = None
    try:
        value = float(raw)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        value = math.nan
    if not math.isfinite(value):
        raise ConfigurationInconsistencyError(
            f"Weight for {sport.value} {category.value!r} must be a finite number, got {raw!r}",
            sport=sport,
            problems=[f"invalid weight for {category.value!r}"],
        )
    return value


@dataclass(frozen=True)
class ScoringRuleTable:
    """Immutable mapping of sport -> ordered scoring rules.

    Use ``with_overrides``/``with_sport`` to derive an adjusted table; the
    receiver is never modified.
    """

    tables: Mapping[Sport, Tuple[ScoringRule, ...]] = field(default_factory=dict)

    def sports(self) -> Tuple[Sport, ...]:
        return tuple(self.tables)

    def rules_for(self, sport: Sport | str) -> Tuple[ScoringRule, ...]:
        key = Sport.parse(sport)
        if key not in self.tables:
            raise UnsupportedSportError(sport)
        return self.tables[key]

    def weights_for(self, sport: Sport | str) -> Dict[Enum, float]:
        """Return ``{category: points_per_unit}`` for ``sport``."""

        return {rule.category: rule.points_per_unit for rule in self.rules_for(sport)}

    def rule_for(self, sport: Sport | str, category: Enum | str) -> ScoringRule | None:
        name = category.value if isinstance(category, Enum) else category
        for rule in self.rules_for(sport):
            if rule.name == name:
                return rule
        return None

    def with_sport(self, sport: Sport | str, rules: Iterable[ScoringRule]) -> "ScoringRuleTable":
        tables: Dict[Sport, Tuple[ScoringRule, ...]] = dict(self.tables)
        tables[Sport.parse(sport)] = tuple(rules)
        return ScoringRuleTable(tables)

    def with_overrides(
        self,
        sport: Sport | str,
        weights: Mapping[Enum | str, object],
    ) -> "ScoringRuleTable":
        """Return a copy with ``weights`` replacing (or adding) rules for ``sport``."""

        resolved = Sport.parse(sport)
        current = self.rules_for(resolved)
        overrides: Dict[Enum, float] = {}
        for key, raw in weights.items():
            category = resolve_category(resolved, key)
            overrides[category] = _coerce_weight(resolved, category, raw)

        updated: List[ScoringRule] = []
        for rule in current:
            if rule.category in overrides:
                weight = overrides.pop(rule.category)
                updated.append(replace(rule, points_per_unit=weight, description=_describe(rule, weight)))
            else:
                updated.append(rule)
        for category, weight in overrides.items():
            updated.append(ScoringRule(category, weight, f"{weight:g} points per {category.value}"))
        return self.with_sport(resolved, updated)


def _describe(rule: ScoringRule, weight: float) -> str:
    if weight == rule.points_per_unit:
        return rule.description
    if weight == 0:
        return "Tracked, not scored"
    return f"{weight:g} points per {rule.category.value}"


DEFAULT_RULE_TABLE = ScoringRuleTable(
    {
        Sport.NBA: _NBA_RULES,
        Sport.NFL: _NFL_RULES,
    }
)


def weights_for(sport: Sport | str) -> Dict[Enum, float]:
    return DEFAULT_RULE_TABLE.weights_for(sport)
