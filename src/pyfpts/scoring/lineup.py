"""Combine per-player scores into a lineup total."""

from __future__ import annotations

from datetime import datetime, timezone
from decimal import Decimal
from typing import Any, Callable, Iterable, List, Mapping, Optional, Sequence, Tuple

from pyfpts.models import LineupScore, PlayerScore
from pyfpts.points import round_points, to_decimal

from .player import PlayerScoreCalculator


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def sum_points(scores: Iterable[PlayerScore]) -> Decimal:
    return sum((to_decimal(score.fantasy_points) for score in scores), Decimal(0))


class LineupAggregator:
    """Scores every player in a lineup and sums their fantasy points.

    Players are scored from raw stats on each call so the total always agrees
    with the per-player breakdowns. Any player failure aborts the lineup.
    """

    def __init__(
        self,
        calculator: Optional[PlayerScoreCalculator] = None,
        *,
        clock: Callable[[], datetime] = utcnow,
    ):
        self.calculator = calculator or PlayerScoreCalculator()
        self.clock = clock

    def aggregate(self, lineup_id: str, players: Sequence[Any]) -> LineupScore:
        player_scores = tuple(self.calculator.calculate(stats) for stats in players)
        return LineupScore(
            lineup_id=lineup_id,
            player_scores=player_scores,
            total_points=float(round_points(sum_points(player_scores))),
            calculated_at=self.clock(),
        )

    def score_lineups(
        self,
        lineups: Iterable[Tuple[str, Sequence[Any]]] | Mapping[str, Sequence[Any]],
    ) -> List[LineupScore]:
        """Score a batch of lineups (e.g. a week's slate), preserving input order."""

        items = lineups.items() if isinstance(lineups, Mapping) else lineups
        return [self.aggregate(lineup_id, players) for lineup_id, players in items]


def calculate_lineup_score(
    lineup_id: str,
    players: Sequence[Any],
    *,
    calculator: Optional[PlayerScoreCalculator] = None,
) -> LineupScore:
    return LineupAggregator(calculator).aggregate(lineup_id, players)
