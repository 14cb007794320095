from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field

from pycourt.models import Player, ScenarioInputs, TeamProfile

from .lineup import ChemistryResponse, LineupResponse
from .scenario import MonteCarloResponse, RecommendationResponse, SensitivityResponse


class PlanRequest(BaseModel):
    team: TeamProfile
    players: List[Player]
    budget: int = Field(default=36_000, gt=0)
    formation: str = Field(default="balanced")
    priority: str = Field(default="balanced")
    intensity: float = Field(default=6, ge=0, le=10)
    min_minutes: float = Field(default=22, ge=0)
    injured_player_ids: List[str] = Field(default_factory=list)
    opponent_net_rating: float = 0.0
    simulation_runs: int | None = Field(default=None, ge=1)
    seed: int | None = None
    plan_id: str | None = None


class PlanResponse(BaseModel):
    plan_id: str
    label: str
    scenario: ScenarioInputs
    lineup: LineupResponse
    chemistry: ChemistryResponse
    win_probability: float
    monte_carlo: MonteCarloResponse
    risk_index: float
    score: float


class PlanBatchResponse(BaseModel):
    plans: List[PlanResponse]
    selected: PlanResponse
    sensitivity: List[SensitivityResponse]
    recommendations: List[RecommendationResponse]
    opponent_net_rating: float
