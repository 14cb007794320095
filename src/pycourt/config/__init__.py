"""Configuration helpers for formations, strategies and engine limits."""

from .settings import default_simulation_runs, max_pool_size
from .strategy import (
    Formation,
    PriorityWeights,
    StrategyArchetype,
    get_archetype,
    get_formation,
    get_priority_weights,
    iter_archetypes,
    iter_formations,
)

__all__ = [
    "Formation",
    "PriorityWeights",
    "StrategyArchetype",
    "default_simulation_runs",
    "get_archetype",
    "get_formation",
    "get_priority_weights",
    "iter_archetypes",
    "iter_formations",
    "max_pool_size",
]
