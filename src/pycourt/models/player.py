"""Canonical player models shared by the optimizer and scorers."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class Position(str, Enum):
    GUARD = "G"
    FORWARD = "F"
    CENTER = "C"


class Player(BaseModel):
    """Roster reference data with per-game box-score rates."""

    player_id: str = Field(..., min_length=1)
    name: str
    position: Position
    team: str = ""
    salary: int = Field(..., gt=0)
    minutes: float = Field(..., ge=0.0)
    points: float = 0.0
    assists: float = 0.0
    rebounds: float = 0.0
    steals: float = 0.0
    blocks: float = 0.0
    turnovers: float = 0.0
    fg_pct: float = 0.0
    three_pct: float = 0.0
    usage: float = 0.0

    model_config = ConfigDict(frozen=True)
