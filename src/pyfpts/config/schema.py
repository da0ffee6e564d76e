"""Stat categories recognised for each supported sport."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterable, Mapping, Tuple

from pyfpts.errors import UnsupportedSportError
from pyfpts.models import NBAStat, NFLStat, Sport


class StatKind(str, Enum):
    COUNT = "count"
    YARDS = "yards"
    MINUTES = "minutes"
    DIFFERENTIAL = "differential"


@dataclass(frozen=True)
class StatCategory:
    key: Enum
    label: str
    kind: StatKind = StatKind.COUNT

    @property
    def name(self) -> str:
        return str(self.key.value)


_NBA_SCHEMA: Tuple[StatCategory, ...] = (
    StatCategory(NBAStat.MINUTES, "Minutes", StatKind.MINUTES),
    StatCategory(NBAStat.POINTS, "Points"),
    StatCategory(NBAStat.REBOUNDS, "Rebounds"),
    StatCategory(NBAStat.ASSISTS, "Assists"),
    StatCategory(NBAStat.STEALS, "Steals"),
    StatCategory(NBAStat.BLOCKS, "Blocks"),
    StatCategory(NBAStat.TURNOVERS, "Turnovers"),
    StatCategory(NBAStat.FIELD_GOALS_MADE, "Field Goals Made"),
    StatCategory(NBAStat.FIELD_GOALS_ATTEMPTED, "Field Goals Attempted"),
    StatCategory(NBAStat.THREE_POINTERS_MADE, "3-Pointers Made"),
    StatCategory(NBAStat.THREE_POINTERS_ATTEMPTED, "3-Pointers Attempted"),
    StatCategory(NBAStat.FREE_THROWS_MADE, "Free Throws Made"),
    StatCategory(NBAStat.FREE_THROWS_ATTEMPTED, "Free Throws Attempted"),
    StatCategory(NBAStat.PERSONAL_FOULS, "Personal Fouls"),
    StatCategory(NBAStat.PLUS_MINUS, "Plus/Minus", StatKind.DIFFERENTIAL),
)

_NFL_SCHEMA: Tuple[StatCategory, ...] = (
    StatCategory(NFLStat.PASSING_YARDS, "Passing Yards", StatKind.YARDS),
    StatCategory(NFLStat.PASSING_TOUCHDOWNS, "Passing TDs"),
    StatCategory(NFLStat.INTERCEPTIONS, "Interceptions Thrown"),
    StatCategory(NFLStat.COMPLETIONS, "Completions"),
    StatCategory(NFLStat.ATTEMPTS, "Pass Attempts"),
    StatCategory(NFLStat.RUSHING_YARDS, "Rushing Yards", StatKind.YARDS),
    StatCategory(NFLStat.RUSHING_TOUCHDOWNS, "Rushing TDs"),
    StatCategory(NFLStat.RUSHING_ATTEMPTS, "Rushing Attempts"),
    StatCategory(NFLStat.RECEIVING_YARDS, "Receiving Yards", StatKind.YARDS),
    StatCategory(NFLStat.RECEIVING_TOUCHDOWNS, "Receiving TDs"),
    StatCategory(NFLStat.RECEPTIONS, "Receptions"),
    StatCategory(NFLStat.TARGETS, "Targets"),
    StatCategory(NFLStat.TACKLES, "Tackles"),
    StatCategory(NFLStat.SACKS, "Sacks"),
    StatCategory(NFLStat.FORCED_FUMBLES, "Forced Fumbles"),
    StatCategory(NFLStat.INTERCEPTIONS_CAUGHT, "Interceptions Caught"),
    StatCategory(NFLStat.FIELD_GOALS_MADE, "Field Goals Made"),
    StatCategory(NFLStat.FIELD_GOALS_ATTEMPTED, "Field Goals Attempted"),
    StatCategory(NFLStat.EXTRA_POINTS_MADE, "Extra Points Made"),
    StatCategory(NFLStat.EXTRA_POINTS_ATTEMPTED, "Extra Points Attempted"),
)


@dataclass(frozen=True)
class StatSchemaRegistry:
    """Per-sport lookup of ordered stat categories."""

    schemas: Mapping[Sport, Tuple[StatCategory, ...]] = field(default_factory=dict)

    def sports(self) -> Tuple[Sport, ...]:
        return tuple(self.schemas)

    def schema_for(self, sport: Sport | str) -> Tuple[StatCategory, ...]:
        key = Sport.parse(sport)
        if key not in self.schemas:
            raise UnsupportedSportError(sport)
        return self.schemas[key]

    def categories_for(self, sport: Sport | str) -> Tuple[Enum, ...]:
        """Return the ordered category identifiers for ``sport``."""

        return tuple(category.key for category in self.schema_for(sport))

    def label_for(self, sport: Sport | str, category: Enum | str) -> str:
        name = category.value if isinstance(category, Enum) else category
        for entry in self.schema_for(sport):
            if entry.name == name:
                return entry.label
        raise KeyError(f"No category {name!r} registered for sport={sport!r}")

    def with_sport(self, sport: Sport, categories: Iterable[StatCategory]) -> "StatSchemaRegistry":
        schemas: Dict[Sport, Tuple[StatCategory, ...]] = dict(self.schemas)
        schemas[sport] = tuple(categories)
        return StatSchemaRegistry(schemas)


DEFAULT_SCHEMA_REGISTRY = StatSchemaRegistry(
    {
        Sport.NBA: _NBA_SCHEMA,
        Sport.NFL: _NFL_SCHEMA,
    }
)


def categories_for(sport: Sport | str) -> Tuple[Enum, ...]:
    return DEFAULT_SCHEMA_REGISTRY.categories_for(sport)
