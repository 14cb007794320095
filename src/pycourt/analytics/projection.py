"""Closed-form win model and team outlook helpers."""

from __future__ import annotations

from statistics import fmean
from typing import Sequence

from pycourt.models import GameSample, ScenarioInputs, TeamProfile

from .numeric import clamp, round_half_up, sigmoid, to_fixed


OPPONENT_PENALTY = 0.7
MOMENTUM_WINDOW = 3


def net_rating(team: TeamProfile) -> float:
    return team.offensive_rating - team.defensive_rating


def scenario_boost(scenario: ScenarioInputs) -> float:
    return scenario.shooting_delta * 0.35 - scenario.turnover_delta * 0.4 + scenario.pace_delta * 0.12


def project_win_probability(team: TeamProfile, scenario: ScenarioInputs) -> int:
    """Win probability in [1, 99] before any opponent adjustment."""

    score = 0.18 * (net_rating(team) + scenario_boost(scenario)) + 0.75 * team.recent_form
    return round_half_up(clamp(sigmoid(score) * 100, 1, 99))


def apply_opponent_penalty(probability: float, opponent_net_rating: float) -> float:
    return clamp(probability - opponent_net_rating * OPPONENT_PENALTY, 1, 99)


def penalized_win_probability(
    team: TeamProfile,
    scenario: ScenarioInputs,
    opponent_net_rating: float,
) -> float:
    """Projected win probability with the opponent penalty always applied."""

    return apply_opponent_penalty(project_win_probability(team, scenario), opponent_net_rating)


def estimate_playoff_odds(team: TeamProfile) -> int:
    score = 1.15 * team.recent_form + 0.06 * net_rating(team) - 0.015 * abs(team.pace - 100)
    return round_half_up(sigmoid(score) * 100)


def team_momentum(games: Sequence[GameSample]) -> float:
    """Mean point differential over the most recent games (0.0 when none)."""

    latest = list(games)[-MOMENTUM_WINDOW:]
    if not latest:
        return 0.0
    return to_fixed(fmean(game.points_for - game.points_against for game in latest), 1)
