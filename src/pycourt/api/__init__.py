"""REST API for the pycourt analytics engine."""

from __future__ import annotations

import logging
from dataclasses import asdict
from typing import Sequence

from fastapi import FastAPI, File, HTTPException, UploadFile

from pycourt.analytics import (
    build_player_radar,
    calculate_scenario_sensitivity,
    detect_game_anomalies,
    estimate_playoff_odds,
    evaluate_lineup_chemistry,
    generate_recommendations,
    net_rating,
    penalized_win_probability,
    project_win_probability,
    run_monte_carlo,
    team_momentum,
)
from pycourt.api.schemas import (
    AnomalyResponse,
    ChemistryRequest,
    ChemistryResponse,
    ContenderResponse,
    LineupRequest,
    LineupResponse,
    MonteCarloResponse,
    PlanBatchResponse,
    PlanRequest,
    ProjectionResponse,
    RadarResponse,
    RecommendationResponse,
    ScenarioRequest,
    SensitivityResponse,
    SimulationRequest,
    TeamOutlookRequest,
    TeamOutlookResponse,
)
from pycourt.config import default_simulation_runs, max_pool_size
from pycourt.ingest import parse_team_csv, rank_teams_by_contender_score
from pycourt.models import Player
from pycourt.optimizer import optimize_lineup, optimize_lineup_with_constraints
from pycourt.planner import build_plan_report


logger = logging.getLogger(__name__)


def _check_pool_size(players: Sequence[Player]) -> None:
    limit = max_pool_size()
    if len(players) > limit:
        raise HTTPException(
            status_code=400,
            detail=f"Player pool has {len(players)} players; the lineup search accepts at most {limit}",
        )


def create_app() -> FastAPI:
    app = FastAPI(title="pycourt", version="0.1.0")

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.post("/lineups/optimize", response_model=LineupResponse)
    def optimize(request: LineupRequest) -> LineupResponse:
        _check_pool_size(request.players)
        if request.constraints is None:
            result = optimize_lineup(request.players, request.budget, request.slots)
        else:
            result = optimize_lineup_with_constraints(
                request.players,
                request.budget,
                request.constraints,
                request.slots,
            )
        return LineupResponse.model_validate(asdict(result))

    @app.post("/lineups/chemistry", response_model=ChemistryResponse)
    def chemistry(request: ChemistryRequest) -> ChemistryResponse:
        return ChemistryResponse.model_validate(asdict(evaluate_lineup_chemistry(request.players)))

    @app.post("/players/radar", response_model=list[RadarResponse])
    def radar(player: Player) -> list[RadarResponse]:
        return [RadarResponse.model_validate(asdict(stat)) for stat in build_player_radar(player)]

    @app.post("/scenarios/projection", response_model=ProjectionResponse)
    def projection(request: ScenarioRequest) -> ProjectionResponse:
        return ProjectionResponse(
            net_rating=net_rating(request.team),
            win_probability=project_win_probability(request.team, request.scenario),
            adjusted_win_probability=penalized_win_probability(
                request.team,
                request.scenario,
                request.opponent_net_rating,
            ),
        )

    @app.post("/scenarios/simulation", response_model=MonteCarloResponse)
    def simulation(request: SimulationRequest) -> MonteCarloResponse:
        iterations = request.iterations if request.iterations is not None else default_simulation_runs()
        summary = run_monte_carlo(
            request.team,
            request.scenario,
            request.opponent_net_rating,
            iterations,
            seed=request.seed,
        )
        return MonteCarloResponse.model_validate(asdict(summary))

    @app.post("/scenarios/sensitivity", response_model=list[SensitivityResponse])
    def sensitivity(request: ScenarioRequest) -> list[SensitivityResponse]:
        impacts = calculate_scenario_sensitivity(request.team, request.scenario, request.opponent_net_rating)
        return [SensitivityResponse.model_validate(asdict(impact)) for impact in impacts]

    @app.post("/scenarios/recommendations", response_model=list[RecommendationResponse])
    def recommendations(request: ScenarioRequest) -> list[RecommendationResponse]:
        items = generate_recommendations(request.team, request.scenario, request.opponent_net_rating)
        return [RecommendationResponse.model_validate(asdict(item)) for item in items]

    @app.post("/teams/outlook", response_model=TeamOutlookResponse)
    def team_outlook(request: TeamOutlookRequest) -> TeamOutlookResponse:
        return TeamOutlookResponse(
            name=request.team.name,
            net_rating=net_rating(request.team),
            playoff_odds=estimate_playoff_odds(request.team),
            momentum=team_momentum(request.games),
            anomalies=[
                AnomalyResponse.model_validate(asdict(anomaly))
                for anomaly in detect_game_anomalies(request.games)
            ],
        )

    @app.post("/teams/rank", response_model=list[ContenderResponse])
    async def rank_teams(teams_csv: UploadFile = File(...)) -> list[ContenderResponse]:
        contents = await teams_csv.read()
        try:
            text = contents.decode("utf-8-sig")
        except UnicodeDecodeError as exc:
            raise HTTPException(status_code=400, detail="Team CSV must be UTF-8 encoded") from exc
        rows = parse_team_csv(text)
        if not rows:
            raise HTTPException(
                status_code=400,
                detail="No valid team rows found; expected name,offensiveRating,defensiveRating,pace",
            )
        return [ContenderResponse.model_validate(asdict(row)) for row in rank_teams_by_contender_score(rows)]

    @app.post("/plans", response_model=PlanBatchResponse)
    def plans(request: PlanRequest) -> PlanBatchResponse:
        _check_pool_size(request.players)
        runs = request.simulation_runs if request.simulation_runs is not None else default_simulation_runs()
        try:
            report = build_plan_report(
                request.team,
                request.players,
                request.budget,
                plan_id=request.plan_id,
                opponent_net_rating=request.opponent_net_rating,
                formation=request.formation,
                priority=request.priority,
                intensity=request.intensity,
                min_minutes=request.min_minutes,
                excluded_player_ids=request.injured_player_ids,
                iterations=runs,
                seed=request.seed,
            )
        except KeyError as exc:
            raise HTTPException(status_code=400, detail=str(exc.args[0])) from exc
        if request.plan_id is not None and report.selected.plan_id != request.plan_id:
            logger.info("Unknown plan_id %s requested; falling back to %s", request.plan_id, report.selected.plan_id)
        return PlanBatchResponse.model_validate(asdict(report))

    return app
