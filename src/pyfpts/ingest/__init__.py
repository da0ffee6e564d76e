"""Input adapters that turn local stat files into ``PlayerStats`` records."""

from .stats import (
    load_player_stats,
    load_player_stats_csv,
    load_player_stats_json,
    row_to_payload,
)

__all__ = [
    "load_player_stats",
    "load_player_stats_csv",
    "load_player_stats_json",
    "row_to_payload",
]
