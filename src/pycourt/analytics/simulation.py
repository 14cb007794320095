"""Monte Carlo simulation of point margins for a scenario."""

from __future__ import annotations

import logging
import math
import random
from dataclasses import dataclass
from statistics import fmean
from typing import Optional, Tuple

from pycourt.models import ScenarioInputs, TeamProfile

from .numeric import clamp, round_half_up, to_fixed
from .projection import net_rating


logger = logging.getLogger(__name__)

MIN_ITERATIONS = 200
MAX_ITERATIONS = 10_000
MARGIN_SPREAD = 8.4
OPPONENT_WEIGHT = 0.75

# (label, exclusive lower bound, inclusive upper bound)
_BINS: Tuple[Tuple[str, float, float], ...] = (
    ("< -10", -math.inf, -10.0),
    ("-10 to -5", -10.0, -5.0),
    ("-5 to 0", -5.0, 0.0),
    ("0 to +5", 0.0, 5.0),
    ("+5 to +10", 5.0, 10.0),
    ("> +10", 10.0, math.inf),
)


@dataclass(frozen=True)
class SimulationBin:
    range: str
    frequency: int


@dataclass(frozen=True)
class MonteCarloSummary:
    iterations: int
    win_rate: float
    average_margin: float
    floor_margin: float
    ceiling_margin: float
    distribution: Tuple[SimulationBin, ...]


class BoxMullerSampler:
    """Standard-normal draws from two uniform(0, 1) draws.

    Any object exposing ``sample() -> float`` can stand in for this class.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self._rng = rng or random.Random()

    def _uniform(self) -> float:
        value = 0.0
        while value == 0.0:
            value = self._rng.random()
        return value

    def sample(self) -> float:
        first = self._uniform()
        second = self._uniform()
        return math.sqrt(-2.0 * math.log(first)) * math.cos(2.0 * math.pi * second)


def clamp_iterations(iterations: float) -> int:
    return round_half_up(clamp(iterations, MIN_ITERATIONS, MAX_ITERATIONS))


def scenario_edge(scenario: ScenarioInputs) -> float:
    return scenario.shooting_delta * 0.38 - scenario.turnover_delta * 0.44 + scenario.pace_delta * 0.14


def run_monte_carlo(
    team: TeamProfile,
    scenario: ScenarioInputs,
    opponent_net_rating: float,
    iterations: float,
    *,
    sampler=None,
    seed: Optional[int] = None,
) -> MonteCarloSummary:
    """Simulate ``iterations`` games and summarize the margin distribution.

    Without ``sampler`` or ``seed`` the draws are not reproducible. ``seed`` is
    ignored when a sampler is supplied.
    """

    runs = clamp_iterations(iterations)
    if sampler is None:
        sampler = BoxMullerSampler(random.Random(seed))

    base_edge = net_rating(team) + scenario_edge(scenario) - opponent_net_rating * OPPONENT_WEIGHT

    margins: list[float] = []
    wins = 0
    for _ in range(runs):
        margin = base_edge + sampler.sample() * MARGIN_SPREAD
        margins.append(margin)
        if margin > 0:
            wins += 1

    margins.sort()
    distribution = tuple(
        SimulationBin(range=label, frequency=sum(1 for m in margins if lower < m <= upper))
        for label, lower, upper in _BINS
    )

    summary = MonteCarloSummary(
        iterations=runs,
        win_rate=to_fixed(wins / runs * 100, 1),
        average_margin=to_fixed(fmean(margins), 2),
        floor_margin=to_fixed(margins[math.floor(runs * 0.1)], 2),
        ceiling_margin=to_fixed(margins[math.floor(runs * 0.9)], 2),
        distribution=distribution,
    )
    logger.debug(
        "Monte Carlo %s runs (edge %.2f): win rate %.1f%%, average margin %.2f",
        runs,
        base_edge,
        summary.win_rate,
        summary.average_margin,
    )
    return summary
