"""Constrained exhaustive lineup search."""

from .service import (
    LineupResult,
    adjusted_score,
    defense_impact,
    eligible_players,
    fantasy_projection,
    optimize_lineup,
    optimize_lineup_with_constraints,
)

__all__ = [
    "LineupResult",
    "adjusted_score",
    "defense_impact",
    "eligible_players",
    "fantasy_projection",
    "optimize_lineup",
    "optimize_lineup_with_constraints",
]
