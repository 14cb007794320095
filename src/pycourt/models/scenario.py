"""Hypothetical scenario inputs and lineup eligibility rules."""

from __future__ import annotations

from typing import FrozenSet

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class ScenarioInputs(BaseModel):
    """Signed tactical deltas applied on top of a team profile."""

    pace_delta: float = 0.0
    shooting_delta: float = 0.0
    turnover_delta: float = 0.0

    model_config = ConfigDict(frozen=True)


class LineupConstraints(BaseModel):
    """Exact positional counts plus eligibility filters for a lineup search.

    Counts that cannot be met by the filtered pool are not rejected here; the
    optimizer reports them as an infeasible result.
    """

    guards: int = Field(default=2, ge=0)
    forwards: int = Field(default=2, ge=0)
    centers: int = Field(default=1, ge=0)
    min_minutes: float = 0.0
    excluded_player_ids: FrozenSet[str] = Field(default_factory=frozenset)

    model_config = ConfigDict(frozen=True)

    @property
    def slot_total(self) -> int:
        return self.guards + self.forwards + self.centers
