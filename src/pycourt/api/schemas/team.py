from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field

from pycourt.models import GameSample, TeamProfile


class TeamOutlookRequest(BaseModel):
    team: TeamProfile
    games: List[GameSample] = Field(default_factory=list)


class AnomalyResponse(BaseModel):
    game: str
    opponent: str
    anomaly_score: float
    label: str


class TeamOutlookResponse(BaseModel):
    name: str
    net_rating: float
    playoff_odds: int
    momentum: float
    anomalies: List[AnomalyResponse]


class ContenderResponse(BaseModel):
    name: str
    offensive_rating: float
    defensive_rating: float
    pace: float
    net: float
    contender_score: float
