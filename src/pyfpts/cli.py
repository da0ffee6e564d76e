"""Command-line interface for scoring a lineup from a stats file."""

from __future__ import annotations

import argparse
import csv
import logging
from pathlib import Path
from typing import List

from pyfpts.config_loader import resolve_rule_table
from pyfpts.errors import ScoringError
from pyfpts.ingest import load_player_stats
from pyfpts.models import BoosterEffect, BoosterType
from pyfpts.scoring import ScoringEngine


def _parse_args(argv: List[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Score a fantasy lineup from raw player stats")
    parser.add_argument("stats", type=Path, nargs="?", help="Player stats CSV or JSON")
    parser.add_argument("--sport", default=None, help="Sport for every CSV row (e.g., NBA, NFL)")
    parser.add_argument("--lineup-id", default="L001", help="Identifier reported for the lineup")
    parser.add_argument(
        "--booster",
        action="append",
        default=[],
        help="Booster effect TYPE:VALUE[:PLAYER_ID,PLAYER_ID] (e.g., score_multiplier:1.1)",
    )
    parser.add_argument("--rules", type=Path, default=None, help="JSON rule profile overriding default weights")
    parser.add_argument("--output", type=Path, default=None, help="Optional path to write breakdown CSV")
    parser.add_argument("--validate", action="store_true", help="Check rule consistency for every sport and exit")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def _parse_booster(entry: str) -> BoosterEffect:
    parts = entry.split(":")
    if len(parts) not in (2, 3):
        raise ValueError(f"Invalid booster entry '{entry}', expected TYPE:VALUE[:IDS]")
    kind, raw_value = parts[0].strip().lower(), parts[1].strip()
    try:
        booster_type = BoosterType(kind)
    except ValueError:
        raise ValueError(f"Unknown booster type '{kind}'") from None
    try:
        value = float(raw_value)
    except ValueError:
        raise ValueError(f"Booster value '{raw_value}' is not numeric") from None
    applied_to = None
    if len(parts) == 3:
        applied_to = frozenset(pid.strip() for pid in parts[2].split(",") if pid.strip())
    return BoosterEffect(type=booster_type, value=value, applied_to=applied_to)


def main(argv: List[str] | None = None) -> None:
    args = _parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    try:
        engine = ScoringEngine(resolve_rule_table(args.rules))
    except ScoringError as exc:
        raise SystemExit(f"Invalid rule profile: {exc}") from exc

    if args.validate:
        results = engine.validate_all_rules()
        for sport, ok in results.items():
            problems = engine.validator.problems(sport)
            status = "ok" if ok else "; ".join(problems)
            print(f"{sport.value}: {status}")
        if not all(results.values()):
            raise SystemExit(1)
        return

    if args.stats is None:
        raise SystemExit("A stats file is required unless --validate is given")

    try:
        boosters = [_parse_booster(entry) for entry in args.booster]
    except ValueError as exc:
        raise SystemExit(str(exc)) from exc

    try:
        players = load_player_stats(args.stats, sport=args.sport)
        boosted = engine.score_lineup_with_boosters(args.lineup_id, players, boosters)
    except (ScoringError, ValueError) as exc:
        raise SystemExit(f"Scoring failed: {exc}") from exc

    lineup = boosted.lineup
    for score in lineup.player_scores:
        print(f"{score.player_id} ({score.sport.value}): {score.fantasy_points:.1f}")
    print(f"Lineup {lineup.lineup_id} base total: {lineup.total_points:.1f}")
    for contribution in boosted.booster_contributions:
        print(f"  {contribution.type.value}: {contribution.delta:+.1f}")
    print(f"Lineup {lineup.lineup_id} boosted total: {boosted.total_points:.1f}")

    if args.output:
        with args.output.open("w", newline="", encoding="utf-8") as f:
            writer = csv.writer(f)
            writer.writerow(["player_id", "sport", "category", "raw_value", "weight", "points"])
            for score in lineup.player_scores:
                for entry in score.breakdown:
                    writer.writerow([
                        score.player_id,
                        score.sport.value,
                        entry.category,
                        entry.raw_value,
                        entry.weight,
                        entry.points,
                    ])
        print(f"Wrote breakdown to {args.output}")


if __name__ == "__main__":
    main()
