"""Exhaustive lineup search under salary and positional constraints.

The search enumerates every ``C(n, slots)`` combination of the pool in index
order, so runtime grows exponentially with pool size. Callers must cap the pool
(see :func:`pycourt.config.max_pool_size`) before invoking it.
"""

from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass
from typing import List, Literal, Mapping, Optional, Sequence, Tuple

from pycourt.analytics.numeric import to_fixed
from pycourt.models import LineupConstraints, Player, Position


logger = logging.getLogger(__name__)

DEFAULT_SLOTS = 5
DEFENSE_WEIGHT = 0.8

Feasibility = Literal["optimal", "infeasible"]


@dataclass(frozen=True)
class LineupResult:
    lineup: Tuple[Player, ...]
    total_salary: int
    projected_points: float
    projected_defense_impact: float
    feasibility: Feasibility

    @property
    def is_feasible(self) -> bool:
        return self.feasibility == "optimal"


INFEASIBLE = LineupResult(
    lineup=(),
    total_salary=0,
    projected_points=0.0,
    projected_defense_impact=0.0,
    feasibility="infeasible",
)


def fantasy_projection(player: Player) -> float:
    return (
        player.points
        + player.rebounds * 1.2
        + player.assists * 1.5
        + player.steals * 3
        + player.blocks * 3
        - player.turnovers
    )


def defense_impact(player: Player) -> float:
    return player.steals * 1.7 + player.blocks * 1.9 + player.rebounds * 0.4


def adjusted_score(lineup: Sequence[Player]) -> float:
    """Fantasy points plus the weighted defensive term used to rank lineups."""

    total_points = sum(fantasy_projection(player) for player in lineup)
    total_defense = sum(defense_impact(player) for player in lineup)
    return total_points + total_defense * DEFENSE_WEIGHT


def _to_result(lineup: Sequence[Player], salary: int) -> LineupResult:
    return LineupResult(
        lineup=tuple(lineup),
        total_salary=salary,
        projected_points=to_fixed(sum(fantasy_projection(p) for p in lineup), 1),
        projected_defense_impact=to_fixed(sum(defense_impact(p) for p in lineup), 1),
        feasibility="optimal",
    )


class _Search:
    """Backtracking state for one optimizer invocation."""

    def __init__(
        self,
        pool: Sequence[Player],
        budget: int,
        slots: int,
        position_limits: Optional[Mapping[Position, int]] = None,
    ):
        self.pool = pool
        self.budget = budget
        self.slots = slots
        self.position_limits = position_limits
        self.best_lineup: Optional[Tuple[Player, ...]] = None
        self.best_salary = 0
        self.best_score: Optional[float] = None
        self.evaluated = 0

    def run(self) -> LineupResult:
        self._backtrack(0, [], 0, Counter())
        logger.debug(
            "Lineup search evaluated %s full combinations from pool=%s (slots=%s, budget=%s)",
            self.evaluated,
            len(self.pool),
            self.slots,
            self.budget,
        )
        if self.best_lineup is None:
            return INFEASIBLE
        return _to_result(self.best_lineup, self.best_salary)

    def _exact_positions(self, counts: Counter) -> bool:
        if self.position_limits is None:
            return True
        return all(counts[pos] == required for pos, required in self.position_limits.items())

    def _exceeds_positions(self, counts: Counter) -> bool:
        if self.position_limits is None:
            return False
        return any(counts[pos] > required for pos, required in self.position_limits.items())

    def _backtrack(self, start: int, chosen: List[Player], salary: int, counts: Counter) -> None:
        if len(chosen) == self.slots:
            self.evaluated += 1
            if not self._exact_positions(counts):
                return
            score = adjusted_score(chosen)
            # Strict comparison keeps the first maximum in enumeration order.
            if salary <= self.budget and (self.best_score is None or score > self.best_score):
                self.best_lineup = tuple(chosen)
                self.best_salary = salary
                self.best_score = score
            return

        for index in range(start, len(self.pool)):
            player = self.pool[index]
            if salary + player.salary > self.budget:
                continue
            counts[player.position] += 1
            if not self._exceeds_positions(counts):
                chosen.append(player)
                self._backtrack(index + 1, chosen, salary + player.salary, counts)
                chosen.pop()
            counts[player.position] -= 1


def optimize_lineup(pool: Sequence[Player], budget: int, slots: int = DEFAULT_SLOTS) -> LineupResult:
    """Return the highest adjusted-score lineup of ``slots`` players within ``budget``."""

    return _Search(list(pool), budget, slots).run()


def eligible_players(pool: Sequence[Player], constraints: LineupConstraints) -> List[Player]:
    """Drop excluded players and those below the minimum minutes threshold."""

    excluded = constraints.excluded_player_ids
    return [
        player
        for player in pool
        if player.player_id not in excluded and player.minutes >= constraints.min_minutes
    ]


def optimize_lineup_with_constraints(
    pool: Sequence[Player],
    budget: int,
    constraints: LineupConstraints,
    slots: int = DEFAULT_SLOTS,
) -> LineupResult:
    """Like :func:`optimize_lineup` but with exact guard/forward/center counts."""

    available = eligible_players(pool, constraints)
    if len(available) != len(pool):
        logger.debug("Eligibility filter trimmed pool from %s to %s players", len(pool), len(available))
    limits = {
        Position.GUARD: constraints.guards,
        Position.FORWARD: constraints.forwards,
        Position.CENTER: constraints.centers,
    }
    return _Search(available, budget, slots, limits).run()
