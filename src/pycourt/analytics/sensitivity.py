"""Finite-difference sensitivity of win probability to each scenario lever."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List

from pycourt.models import ScenarioInputs, TeamProfile

from .numeric import to_fixed
from .projection import penalized_win_probability


SENSITIVITY_STEP = 2

# Display name -> ScenarioInputs field, in reporting order.
FACTORS = (
    ("Pace", "pace_delta"),
    ("Shooting", "shooting_delta"),
    ("Turnovers", "turnover_delta"),
)


@dataclass(frozen=True)
class SensitivityImpact:
    factor: str
    delta_win_probability: float


def calculate_scenario_sensitivity(
    team: TeamProfile,
    scenario: ScenarioInputs,
    opponent_net_rating: float,
) -> List[SensitivityImpact]:
    """Return per-factor win probability deltas, largest magnitude first."""

    baseline = penalized_win_probability(team, scenario, opponent_net_rating)
    impacts = []
    for factor, field in FACTORS:
        shifted = scenario.model_copy(update={field: getattr(scenario, field) + SENSITIVITY_STEP})
        probability = penalized_win_probability(team, shifted, opponent_net_rating)
        impacts.append(SensitivityImpact(factor, to_fixed(probability - baseline, 2)))
    return sorted(impacts, key=lambda impact: abs(impact.delta_win_probability), reverse=True)
