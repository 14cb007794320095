from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field

from pycourt.models import ScenarioInputs, TeamProfile


class ScenarioRequest(BaseModel):
    team: TeamProfile
    scenario: ScenarioInputs = Field(default_factory=ScenarioInputs)
    opponent_net_rating: float = 0.0


class SimulationRequest(ScenarioRequest):
    # Out-of-range counts are clamped by the simulator, not rejected.
    iterations: int | None = None
    seed: int | None = None


class ProjectionResponse(BaseModel):
    net_rating: float
    win_probability: int
    adjusted_win_probability: float


class SimulationBinResponse(BaseModel):
    range: str
    frequency: int


class MonteCarloResponse(BaseModel):
    iterations: int
    win_rate: float
    average_margin: float
    floor_margin: float
    ceiling_margin: float
    distribution: List[SimulationBinResponse]


class SensitivityResponse(BaseModel):
    factor: str
    delta_win_probability: float


class RecommendationResponse(BaseModel):
    title: str
    detail: str
    impact: float
