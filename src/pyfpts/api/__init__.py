"""REST API exposing the scoring engine."""

from __future__ import annotations

import logging
import os
from typing import Any, List, Optional

from fastapi import Body, FastAPI, HTTPException

from pyfpts.api.schemas import (
    BoosterPresetResponse,
    LineupScoreRequest,
    RuleTableResponse,
    ScoringRuleResponse,
    WeeklyScoreRequest,
)
from pyfpts.config import iter_presets
from pyfpts.errors import (
    ConfigurationInconsistencyError,
    InvalidBoosterEffectError,
    UnsupportedSportError,
)
from pyfpts.models import BoostedLineupScore, LineupScore, PlayerScore, Sport
from pyfpts.scoring import ScoringEngine


logger = logging.getLogger("uvicorn.error")

_HOST_ENV = "PYFPTS_API_HOST"
_PORT_ENV = "PYFPTS_API_PORT"
_DEFAULT_HOST = "127.0.0.1"
_DEFAULT_PORT = 8000


def _env_int(name: str, default: int, *, min_value: int | None = None) -> int:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning("Invalid int for %s: %s; using default %d", name, raw, default)
        return default
    if min_value is not None:
        value = max(min_value, value)
    return value


def _unprocessable(exc: Exception) -> HTTPException:
    return HTTPException(status_code=422, detail=str(exc))


def create_app(engine: Optional[ScoringEngine] = None) -> FastAPI:
    app = FastAPI(title="pyfpts scoring")
    app.state.engine = engine or ScoringEngine()

    def get_engine() -> ScoringEngine:
        return app.state.engine

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.get("/rules/{sport}", response_model=RuleTableResponse)
    async def rules(sport: str) -> RuleTableResponse:
        current = get_engine()
        try:
            resolved = Sport.parse(sport)
            schema = current.registry.schema_for(resolved)
            table = current.rules.rules_for(resolved)
        except UnsupportedSportError as exc:
            raise HTTPException(status_code=404, detail=str(exc)) from exc
        labels = {category.name: category.label for category in schema}
        problems = current.validator.problems(resolved)
        return RuleTableResponse(
            sport=resolved.value,
            valid=not problems,
            problems=problems,
            rules=[
                ScoringRuleResponse(
                    category=rule.name,
                    label=labels.get(rule.name, rule.name),
                    points_per_unit=rule.points_per_unit,
                    description=rule.description,
                )
                for rule in table
            ],
        )

    @app.get("/boosters/catalog", response_model=List[BoosterPresetResponse])
    async def booster_catalog() -> List[BoosterPresetResponse]:
        return [
            BoosterPresetResponse(
                key=preset.key,
                name=preset.name,
                effect_type=preset.effect_type.value,
                effect_value=preset.effect_value,
                duration_hours=preset.duration_hours,
                description=preset.description,
                rarity=preset.rarity,
            )
            for preset in iter_presets()
        ]

    @app.post("/score/player", response_model=PlayerScore)
    async def score_player(payload: dict[str, Any] = Body(...)) -> PlayerScore:
        try:
            return get_engine().calculate_player_score(payload)
        except (UnsupportedSportError, ValueError) as exc:
            raise _unprocessable(exc) from exc

    @app.post("/score/lineup", response_model=BoostedLineupScore)
    async def score_lineup(request: LineupScoreRequest) -> BoostedLineupScore:
        try:
            return get_engine().score_lineup_with_boosters(
                request.lineup_id,
                request.players,
                request.boosters,
            )
        except (
            UnsupportedSportError,
            InvalidBoosterEffectError,
            ConfigurationInconsistencyError,
            ValueError,
        ) as exc:
            raise _unprocessable(exc) from exc

    @app.post("/score/weekly", response_model=List[LineupScore])
    async def score_weekly(request: WeeklyScoreRequest) -> List[LineupScore]:
        try:
            return get_engine().score_lineups(
                [(lineup.lineup_id, lineup.players) for lineup in request.lineups]
            )
        except (UnsupportedSportError, ValueError) as exc:
            raise _unprocessable(exc) from exc

    return app


def main() -> None:
    import uvicorn

    host = os.getenv(_HOST_ENV, _DEFAULT_HOST)
    port = _env_int(_PORT_ENV, _DEFAULT_PORT, min_value=1)
    uvicorn.run(create_app(), host=host, port=port)
