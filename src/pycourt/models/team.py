"""Team-level records: profiles, game logs and uploaded opponent rows."""

from __future__ import annotations

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class TeamProfile(BaseModel):
    name: str
    conference: str = ""
    offensive_rating: float
    defensive_rating: float
    pace: float
    # Momentum proxy, usually within [-1, 1]; deliberately not clamped.
    recent_form: float = 0.0

    model_config = ConfigDict(frozen=True)


class GameSample(BaseModel):
    game: str
    opponent: str
    points_for: float
    points_against: float
    pace: float = 0.0
    efg: float = 0.0
    turnovers: float = 0.0
    rebounding: float = 0.0

    model_config = ConfigDict(frozen=True)


class TeamCsvRow(BaseModel):
    """Opponent record parsed from an uploaded CSV."""

    name: str = Field(..., min_length=1)
    offensive_rating: float
    defensive_rating: float
    pace: float

    model_config = ConfigDict(frozen=True)
