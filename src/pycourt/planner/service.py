"""Strategy tournament: score each archetype scenario and pick a plan."""

from __future__ import annotations

import logging
import random
import time
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Tuple

from pycourt.analytics import (
    LineupChemistry,
    MonteCarloSummary,
    Recommendation,
    SensitivityImpact,
    calculate_scenario_sensitivity,
    evaluate_lineup_chemistry,
    generate_recommendations,
    penalized_win_probability,
    run_monte_carlo,
)
from pycourt.analytics.numeric import clamp, to_fixed
from pycourt.config import get_formation, get_priority_weights, iter_archetypes
from pycourt.config.strategy import BASE_INTENSITY, StrategyArchetype
from pycourt.models import Player, ScenarioInputs, TeamProfile
from pycourt.optimizer import LineupResult, optimize_lineup_with_constraints


logger = logging.getLogger(__name__)

INFEASIBLE_PENALTY = 30


@dataclass(frozen=True)
class StrategyPlan:
    plan_id: str
    label: str
    scenario: ScenarioInputs
    lineup: LineupResult
    chemistry: LineupChemistry
    win_probability: float
    monte_carlo: MonteCarloSummary
    risk_index: float
    score: float


@dataclass(frozen=True)
class PlanReport:
    plans: Tuple[StrategyPlan, ...]
    selected: StrategyPlan
    sensitivity: Tuple[SensitivityImpact, ...]
    recommendations: Tuple[Recommendation, ...]
    opponent_net_rating: float


def risk_index(archetype: StrategyArchetype, scenario: ScenarioInputs, chemistry: LineupChemistry) -> float:
    raw = archetype.risk * 100 + abs(scenario.turnover_delta) * 4 + (100 - chemistry.overall) * 0.12
    return clamp(raw, 1, 100)


def build_strategy_plans(
    team: TeamProfile,
    players: Sequence[Player],
    budget: int,
    *,
    formation: str = "balanced",
    priority: str = "balanced",
    intensity: float = BASE_INTENSITY,
    min_minutes: float = 22,
    excluded_player_ids: Iterable[str] = (),
    opponent_net_rating: float = 0.0,
    iterations: int = 2500,
    seed: Optional[int] = None,
) -> List[StrategyPlan]:
    """Evaluate every strategy archetype against the same lineup search.

    Raises KeyError for an unknown formation or priority key. Each archetype
    simulates with its own generator derived from ``seed``.
    """

    weights = get_priority_weights(priority)
    constraints = get_formation(formation).constraints(
        min_minutes=min_minutes,
        excluded_player_ids=excluded_player_ids,
    )
    master = random.Random(seed)
    run_start = time.perf_counter()

    logger.info(
        "Starting strategy tournament - pool=%s, budget=%s, formation=%s, priority=%s, intensity=%s, runs=%s",
        len(players),
        budget,
        formation,
        priority,
        intensity,
        iterations,
    )

    # Lineup is scenario-independent and shared by every plan.
    lineup = optimize_lineup_with_constraints(players, budget, constraints)
    chemistry = evaluate_lineup_chemistry(lineup.lineup)
    if not lineup.is_feasible:
        logger.info("No feasible lineup for formation %s; plans carry the infeasible penalty", formation)

    plans: List[StrategyPlan] = []
    for archetype in iter_archetypes():
        scenario = archetype.scenario(intensity)
        win_probability = penalized_win_probability(team, scenario, opponent_net_rating)
        monte = run_monte_carlo(
            team,
            scenario,
            opponent_net_rating,
            iterations,
            seed=master.randint(1, 2 ** 31 - 1),
        )
        risk = risk_index(archetype, scenario, chemistry)
        penalty = 0 if lineup.is_feasible else INFEASIBLE_PENALTY
        score = (
            weights.win * win_probability
            + weights.monte * monte.win_rate
            + weights.chemistry * chemistry.overall
            - weights.risk_penalty * risk
            - penalty
        )
        plans.append(
            StrategyPlan(
                plan_id=archetype.key,
                label=archetype.label,
                scenario=scenario,
                lineup=lineup,
                chemistry=chemistry,
                win_probability=to_fixed(win_probability, 1),
                monte_carlo=monte,
                risk_index=to_fixed(risk, 1),
                score=to_fixed(score, 2),
            )
        )

    logger.info(
        "Strategy tournament completed - %s plans in %.2fs (%s)",
        len(plans),
        time.perf_counter() - run_start,
        ", ".join(f"{plan.plan_id}={plan.score:.2f}" for plan in plans),
    )
    return plans


def select_plan(plans: Sequence[StrategyPlan], plan_id: Optional[str] = None) -> StrategyPlan:
    """Return ``plan_id`` when present, otherwise the first highest-scoring plan."""

    if not plans:
        raise ValueError("select_plan requires at least one plan")
    if plan_id is not None:
        for plan in plans:
            if plan.plan_id == plan_id:
                return plan
    return sorted(plans, key=lambda plan: plan.score, reverse=True)[0]


def build_plan_report(
    team: TeamProfile,
    players: Sequence[Player],
    budget: int,
    *,
    plan_id: Optional[str] = None,
    opponent_net_rating: float = 0.0,
    **kwargs,
) -> PlanReport:
    """Run the tournament and explain the selected plan."""

    plans = build_strategy_plans(team, players, budget, opponent_net_rating=opponent_net_rating, **kwargs)
    selected = select_plan(plans, plan_id)
    return PlanReport(
        plans=tuple(plans),
        selected=selected,
        sensitivity=tuple(calculate_scenario_sensitivity(team, selected.scenario, opponent_net_rating)),
        recommendations=tuple(generate_recommendations(team, selected.scenario, opponent_net_rating)),
        opponent_net_rating=opponent_net_rating,
    )
