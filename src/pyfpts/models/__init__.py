"""Canonical models shared by the scoring engine, API and CLI."""

from .booster import BoostedLineupScore, BoosterContribution, BoosterEffect, BoosterType
from .score import BreakdownEntry, LineupScore, PlayerScore
from .stats import (
    STAT_ENUMS,
    GameStatus,
    NBAPlayerStats,
    NBAStat,
    NBAStats,
    NFLPlayerStats,
    NFLStat,
    NFLStats,
    PlayerStats,
    Sport,
    StatBag,
    StatCategoryId,
    parse_player_stats,
)

__all__ = [
    "BoostedLineupScore",
    "BoosterContribution",
    "BoosterEffect",
    "BoosterType",
    "BreakdownEntry",
    "GameStatus",
    "LineupScore",
    "NBAPlayerStats",
    "NBAStat",
    "NBAStats",
    "NFLPlayerStats",
    "NFLStat",
    "NFLStats",
    "PlayerScore",
    "PlayerStats",
    "STAT_ENUMS",
    "Sport",
    "StatBag",
    "StatCategoryId",
    "parse_player_stats",
]
