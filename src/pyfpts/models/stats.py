"""Raw per-game statistics supplied by the ingestion layer.

Each sport has its own closed set of stat categories and its own stat bag
model. ``PlayerStats`` is a union of per-sport variants tagged by ``sport``,
so a payload can only carry the categories its sport defines.
"""

from __future__ import annotations

from datetime import date
from enum import Enum
from typing import Annotated, Any, Literal, Mapping, Union

from pydantic import BaseModel, Field, TypeAdapter
from pydantic.alias_generators import to_camel
from pydantic.config import ConfigDict

from pyfpts.errors import UnsupportedSportError


class Sport(str, Enum):
    NBA = "NBA"
    NFL = "NFL"

    @classmethod
    def parse(cls, value: "Sport | str") -> "Sport":
        """Resolve a sport from an enum member or a case-insensitive key."""

        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            raise UnsupportedSportError(value)
        try:
            return cls(value.strip().upper())
        except ValueError:
            raise UnsupportedSportError(value) from None


class GameStatus(str, Enum):
    SCHEDULED = "scheduled"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    POSTPONED = "postponed"


class NBAStat(str, Enum):
    MINUTES = "minutes"
    POINTS = "points"
    REBOUNDS = "rebounds"
    ASSISTS = "assists"
    STEALS = "steals"
    BLOCKS = "blocks"
    TURNOVERS = "turnovers"
    FIELD_GOALS_MADE = "field_goals_made"
    FIELD_GOALS_ATTEMPTED = "field_goals_attempted"
    THREE_POINTERS_MADE = "three_pointers_made"
    THREE_POINTERS_ATTEMPTED = "three_pointers_attempted"
    FREE_THROWS_MADE = "free_throws_made"
    FREE_THROWS_ATTEMPTED = "free_throws_attempted"
    PERSONAL_FOULS = "personal_fouls"
    PLUS_MINUS = "plus_minus"


class NFLStat(str, Enum):
    PASSING_YARDS = "passing_yards"
    PASSING_TOUCHDOWNS = "passing_touchdowns"
    INTERCEPTIONS = "interceptions"
    COMPLETIONS = "completions"
    ATTEMPTS = "attempts"
    RUSHING_YARDS = "rushing_yards"
    RUSHING_TOUCHDOWNS = "rushing_touchdowns"
    RUSHING_ATTEMPTS = "rushing_attempts"
    RECEIVING_YARDS = "receiving_yards"
    RECEIVING_TOUCHDOWNS = "receiving_touchdowns"
    RECEPTIONS = "receptions"
    TARGETS = "targets"
    TACKLES = "tackles"
    SACKS = "sacks"
    FORCED_FUMBLES = "forced_fumbles"
    INTERCEPTIONS_CAUGHT = "interceptions_caught"
    FIELD_GOALS_MADE = "field_goals_made"
    FIELD_GOALS_ATTEMPTED = "field_goals_attempted"
    EXTRA_POINTS_MADE = "extra_points_made"
    EXTRA_POINTS_ATTEMPTED = "extra_points_attempted"


StatCategoryId = Union[NBAStat, NFLStat]

STAT_ENUMS: Mapping[Sport, type[Enum]] = {
    Sport.NBA: NBAStat,
    Sport.NFL: NFLStat,
}


class StatBag(BaseModel):
    """Numeric categories for one game. Missing categories read as zero."""

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        alias_generator=to_camel,
        populate_by_name=True,
        allow_inf_nan=False,
    )

    def value_of(self, category: Enum | str) -> float:
        key = category.value if isinstance(category, Enum) else category
        return float(getattr(self, key, 0.0) or 0.0)


class NBAStats(StatBag):
    minutes: float = 0.0
    points: float = 0.0
    rebounds: float = 0.0
    assists: float = 0.0
    steals: float = 0.0
    blocks: float = 0.0
    turnovers: float = 0.0
    field_goals_made: float = 0.0
    field_goals_attempted: float = 0.0
    three_pointers_made: float = 0.0
    three_pointers_attempted: float = 0.0
    free_throws_made: float = 0.0
    free_throws_attempted: float = 0.0
    personal_fouls: float = 0.0
    plus_minus: float = 0.0


class NFLStats(StatBag):
    passing_yards: float = 0.0
    passing_touchdowns: float = 0.0
    interceptions: float = 0.0
    completions: float = 0.0
    attempts: float = 0.0
    rushing_yards: float = 0.0
    rushing_touchdowns: float = 0.0
    rushing_attempts: float = 0.0
    receiving_yards: float = 0.0
    receiving_touchdowns: float = 0.0
    receptions: float = 0.0
    targets: float = 0.0
    tackles: float = 0.0
    sacks: float = 0.0
    forced_fumbles: float = 0.0
    interceptions_caught: float = 0.0
    field_goals_made: float = 0.0
    field_goals_attempted: float = 0.0
    extra_points_made: float = 0.0
    extra_points_attempted: float = 0.0


class _PlayerStatsBase(BaseModel):
    player_id: str = Field(..., min_length=1)
    player_name: str = ""
    team: str = ""
    opponent: str = ""
    game_date: date | None = None
    game_status: GameStatus = GameStatus.COMPLETED

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


class NBAPlayerStats(_PlayerStatsBase):
    sport: Literal["NBA"] = "NBA"
    stats: NBAStats = Field(default_factory=NBAStats)


class NFLPlayerStats(_PlayerStatsBase):
    sport: Literal["NFL"] = "NFL"
    stats: NFLStats = Field(default_factory=NFLStats)


PlayerStats = Annotated[Union[NBAPlayerStats, NFLPlayerStats], Field(discriminator="sport")]

_PLAYER_STATS_ADAPTER: TypeAdapter[Any] = TypeAdapter(PlayerStats)


def parse_player_stats(payload: Mapping[str, Any]) -> NBAPlayerStats | NFLPlayerStats:
    """Build the sport-specific ``PlayerStats`` variant from a raw mapping.

    The sport key is normalised first so an unknown sport surfaces as
    ``UnsupportedSportError`` rather than a generic validation failure.
    """

    data = dict(payload)
    data["sport"] = Sport.parse(data.get("sport", "")).value
    return _PLAYER_STATS_ADAPTER.validate_python(data)


__all__ = [
    "GameStatus",
    "NBAPlayerStats",
    "NBAStat",
    "NBAStats",
    "NFLPlayerStats",
    "NFLStat",
    "NFLStats",
    "PlayerStats",
    "STAT_ENUMS",
    "Sport",
    "StatBag",
    "StatCategoryId",
    "parse_player_stats",
]
