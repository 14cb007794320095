"""Persist and load CLI scenario profiles."""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel, Field

from pycourt.models import GameSample, Player, TeamProfile


class ScenarioProfile(BaseModel):
    team: TeamProfile
    players: List[Player]
    games: List[GameSample] = Field(default_factory=list)
    budget: int = Field(default=36_000, gt=0)
    formation: str = "balanced"
    priority: str = "balanced"
    intensity: float = Field(default=6, ge=0, le=10)
    min_minutes: float = 22
    injured_player_ids: List[str] = Field(default_factory=list)
    simulation_runs: Optional[int] = None
    seed: Optional[int] = None

    @classmethod
    def load(cls, path: Path) -> "ScenarioProfile":
        return cls.model_validate_json(path.read_text(encoding="utf-8"))

    def save(self, path: Path) -> None:
        path.write_text(self.model_dump_json(indent=2), encoding="utf-8")
