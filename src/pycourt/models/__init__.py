"""Input models consumed by the analytics engine."""

from .player import Player, Position
from .scenario import LineupConstraints, ScenarioInputs
from .team import GameSample, TeamCsvRow, TeamProfile

__all__ = [
    "GameSample",
    "LineupConstraints",
    "Player",
    "Position",
    "ScenarioInputs",
    "TeamCsvRow",
    "TeamProfile",
]
