from __future__ import annotations

from typing import List, Literal

from pydantic import BaseModel, Field

from pycourt.models import LineupConstraints, Player


class LineupRequest(BaseModel):
    players: List[Player]
    budget: int = Field(..., gt=0)
    constraints: LineupConstraints | None = None
    slots: int = Field(default=5, ge=1, le=10)


class LineupResponse(BaseModel):
    lineup: List[Player]
    total_salary: int
    projected_points: float
    projected_defense_impact: float
    feasibility: Literal["optimal", "infeasible"]


class ChemistryRequest(BaseModel):
    players: List[Player]


class ChemistryResponse(BaseModel):
    ball_movement: float
    spacing: float
    defense_switchability: float
    overall: float


class RadarResponse(BaseModel):
    metric: str
    value: int
