"""Lightweight REST client for the pyfpts API."""

from __future__ import annotations

import argparse
import json
from pathlib import Path

import httpx


def build_boosters(raw: str) -> list[dict]:
    if not raw:
        return []
    try:
        boosters = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise SystemExit(f"Invalid boosters JSON: {exc}") from exc
    if not isinstance(boosters, list):
        raise SystemExit("boosters JSON must be a list of effect objects")
    return boosters


def main() -> None:
    parser = argparse.ArgumentParser(description="Interact with the pyfpts REST API")
    parser.add_argument("base_url", help="Base URL of the API, e.g. http://localhost:8000")
    parser.add_argument("stats", type=Path, nargs="?", help="JSON file with a list of player stat objects")
    parser.add_argument("--lineup-id", default="L001", help="Lineup identifier to report")
    parser.add_argument("--boosters", default="", help="JSON list of booster effects")
    parser.add_argument("--rules", metavar="SPORT", help="Print the scoring rules for a sport and exit")
    parser.add_argument("--catalog", action="store_true", help="Print the booster catalog and exit")
    args = parser.parse_args()

    if args.rules or args.catalog:
        with httpx.Client(base_url=args.base_url) as client:
            if args.rules:
                resp = client.get(f"/rules/{args.rules}")
                if resp.status_code == 404:
                    raise SystemExit(f"sport {args.rules} not supported")
                resp.raise_for_status()
                print(json.dumps(resp.json(), indent=2))
            if args.catalog:
                resp = client.get("/boosters/catalog")
                resp.raise_for_status()
                print(json.dumps(resp.json(), indent=2))
        return

    if args.stats is None:
        raise SystemExit("a stats file is required unless using --rules/--catalog")

    players = json.loads(args.stats.read_text(encoding="utf-8"))
    payload = {
        "lineup_id": args.lineup_id,
        "players": players,
        "boosters": build_boosters(args.boosters),
    }

    with httpx.Client(base_url=args.base_url) as client:
        resp = client.post("/score/lineup", json=payload)
        if resp.status_code == 422:
            raise SystemExit(f"scoring rejected: {resp.json().get('detail')}")
        resp.raise_for_status()
        result = resp.json()
        print(f"Base total: {result['lineup']['total_points']}")
        print(f"Boosted total: {result['total_points']}")
        print(json.dumps(result["booster_contributions"], indent=2))


if __name__ == "__main__":
    main()
