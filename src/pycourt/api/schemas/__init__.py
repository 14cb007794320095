"""Pydantic models for API I/O."""

from .lineup import ChemistryRequest, ChemistryResponse, LineupRequest, LineupResponse, RadarResponse
from .plan import PlanBatchResponse, PlanRequest, PlanResponse
from .scenario import (
    MonteCarloResponse,
    ProjectionResponse,
    RecommendationResponse,
    ScenarioRequest,
    SensitivityResponse,
    SimulationBinResponse,
    SimulationRequest,
)
from .team import AnomalyResponse, ContenderResponse, TeamOutlookRequest, TeamOutlookResponse

__all__ = [
    "AnomalyResponse",
    "ChemistryRequest",
    "ChemistryResponse",
    "ContenderResponse",
    "LineupRequest",
    "LineupResponse",
    "MonteCarloResponse",
    "PlanBatchResponse",
    "PlanRequest",
    "PlanResponse",
    "ProjectionResponse",
    "RadarResponse",
    "RecommendationResponse",
    "ScenarioRequest",
    "SensitivityResponse",
    "SimulationBinResponse",
    "SimulationRequest",
    "TeamOutlookRequest",
    "TeamOutlookResponse",
]
