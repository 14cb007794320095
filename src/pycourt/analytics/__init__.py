"""Win models, simulation, explainability and descriptive scorers."""

from .projection import (
    apply_opponent_penalty,
    estimate_playoff_odds,
    net_rating,
    penalized_win_probability,
    project_win_probability,
    team_momentum,
)
from .recommendations import Recommendation, generate_recommendations
from .scoring import (
    GameAnomaly,
    LineupChemistry,
    PlayerRadarStats,
    build_player_radar,
    detect_game_anomalies,
    evaluate_lineup_chemistry,
)
from .sensitivity import SensitivityImpact, calculate_scenario_sensitivity
from .simulation import BoxMullerSampler, MonteCarloSummary, SimulationBin, run_monte_carlo

__all__ = [
    "BoxMullerSampler",
    "GameAnomaly",
    "LineupChemistry",
    "MonteCarloSummary",
    "PlayerRadarStats",
    "Recommendation",
    "SensitivityImpact",
    "SimulationBin",
    "apply_opponent_penalty",
    "build_player_radar",
    "calculate_scenario_sensitivity",
    "detect_game_anomalies",
    "estimate_playoff_odds",
    "evaluate_lineup_chemistry",
    "generate_recommendations",
    "net_rating",
    "penalized_win_probability",
    "project_win_probability",
    "run_monte_carlo",
    "team_momentum",
]
