"""Rule-based tactical suggestions for a scenario."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List

from pycourt.models import ScenarioInputs, TeamProfile

from .numeric import to_fixed
from .projection import net_rating


@dataclass(frozen=True)
class Recommendation:
    title: str
    detail: str
    impact: float


DEFAULT_RECOMMENDATION = Recommendation(
    title="Maintain current game model",
    detail="Current setup is balanced. Prioritize execution consistency and rotation discipline.",
    impact=4.5,
)


def generate_recommendations(
    team: TeamProfile,
    scenario: ScenarioInputs,
    opponent_net_rating: float,
) -> List[Recommendation]:
    """Evaluate each rule independently and return them by descending impact."""

    recommendations: List[Recommendation] = []

    if scenario.pace_delta > 2:
        recommendations.append(
            Recommendation(
                title="Push transition volume",
                detail="Increase early-clock actions and rim pressure to leverage tempo edge.",
                impact=to_fixed(abs(scenario.pace_delta) * 1.6 + 4, 1),
            )
        )

    if scenario.turnover_delta > 1:
        recommendations.append(
            Recommendation(
                title="Prioritize low-risk sets",
                detail="Run more two-man actions and reduce cross-court passing against pressure.",
                impact=to_fixed(scenario.turnover_delta * 2.5 + 2, 1),
            )
        )

    if scenario.shooting_delta < 0:
        recommendations.append(
            Recommendation(
                title="Shift shot profile inward",
                detail="Compensate for cold perimeter shooting with paint touches and cut actions.",
                impact=to_fixed(abs(scenario.shooting_delta) * 2.1 + 1.5, 1),
            )
        )

    if net_rating(team) < opponent_net_rating:
        recommendations.append(
            Recommendation(
                title="Defensive rebounding emphasis",
                detail="Limit opponent second-chance points by tagging crashers and securing long rebounds.",
                impact=6.8,
            )
        )

    if not recommendations:
        recommendations.append(DEFAULT_RECOMMENDATION)

    return sorted(recommendations, key=lambda rec: rec.impact, reverse=True)
