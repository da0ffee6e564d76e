"""Load raw per-game player statistics from local CSV or JSON files."""

from __future__ import annotations

import csv
import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional

from pyfpts.config import resolve_category
from pyfpts.models import Sport, parse_player_stats
from pyfpts.models.stats import NBAPlayerStats, NFLPlayerStats


logger = logging.getLogger(__name__)

PlayerStatsRecord = NBAPlayerStats | NFLPlayerStats

_IDENTITY_COLUMNS = {
    "player_id": "player_id",
    "playerid": "player_id",
    "id": "player_id",
    "player_name": "player_name",
    "playername": "player_name",
    "name": "player_name",
    "team": "team",
    "opponent": "opponent",
    "sport": "sport",
    "game_date": "game_date",
    "gamedate": "game_date",
    "game_status": "game_status",
    "gamestatus": "game_status",
}


def _parse_stat(raw: str, *, column: str) -> float:
    text = raw.strip()
    if not text:
        return 0.0
    try:
        return float(text)
    except ValueError:
        raise ValueError(f"stat '{column}' value '{raw}' is not numeric") from None


def row_to_payload(row: Mapping[str, Optional[str]], *, sport: Sport | str | None = None) -> Dict[str, Any]:
    """Split a flat CSV row into identity fields and a sport-specific stat bag."""

    identity: Dict[str, Any] = {}
    stat_columns: Dict[str, str] = {}
    for column, value in row.items():
        if column is None:
            continue
        key = column.strip()
        target = _IDENTITY_COLUMNS.get(key.lower())
        if target is not None:
            if value not in (None, ""):
                identity[target] = value.strip() if isinstance(value, str) else value
        else:
            stat_columns[key] = value or ""

    if "game_status" in identity:
        identity["game_status"] = str(identity["game_status"]).lower().replace("-", "_")

    resolved = Sport.parse(sport if sport is not None else identity.get("sport", ""))
    identity["sport"] = resolved.value
    stats: Dict[str, float] = {}
    for column, raw in stat_columns.items():
        if not raw.strip():
            continue
        category = resolve_category(resolved, column)
        stats[str(category.value)] = _parse_stat(raw, column=column)
    identity["stats"] = stats
    return identity


def load_player_stats_csv(path: Path, *, sport: Sport | str | None = None) -> List[PlayerStatsRecord]:
    with path.open(newline="", encoding="utf-8") as f:
        reader = csv.DictReader(f)
        records = [parse_player_stats(row_to_payload(row, sport=sport)) for row in reader]
    logger.info("Loaded %d player stat rows from %s", len(records), path)
    return records


def load_player_stats_json(path: Path) -> List[PlayerStatsRecord]:
    """Read a JSON list of player stat payloads (or ``{"players": [...]}``)."""

    data = json.loads(path.read_text(encoding="utf-8"))
    if isinstance(data, dict):
        data = data.get("players", [])
    if not isinstance(data, list):
        raise ValueError(f"{path} must contain a list of player stat objects")
    records = [parse_player_stats(item) for item in data]
    logger.info("Loaded %d player stat records from %s", len(records), path)
    return records


def load_player_stats(path: Path, *, sport: Sport | str | None = None) -> List[PlayerStatsRecord]:
    if path.suffix.lower() == ".json":
        return load_player_stats_json(path)
    return load_player_stats_csv(path, sport=sport)
