import pytest

from pycourt.analytics import (
    apply_opponent_penalty,
    estimate_playoff_odds,
    net_rating,
    penalized_win_probability,
    project_win_probability,
    team_momentum,
)
from pycourt.analytics.numeric import round_half_up, to_fixed
from pycourt.models import ScenarioInputs, TeamProfile

from tests.sample_data import neutral_team, sample_games, sample_team


def test_zero_scenario_projection_is_stable():
    team = sample_team()
    scenario = ScenarioInputs()

    first = project_win_probability(team, scenario)
    second = project_win_probability(team, scenario)

    assert net_rating(team) == pytest.approx(8.8)
    assert first == second == 89


def test_projection_clamps_to_bounds():
    juggernaut = TeamProfile(name="Top", offensive_rating=150, defensive_rating=90, pace=100, recent_form=1.0)
    cellar = TeamProfile(name="Bottom", offensive_rating=90, defensive_rating=150, pace=100, recent_form=-1.0)

    assert project_win_probability(juggernaut, ScenarioInputs()) == 99
    assert project_win_probability(cellar, ScenarioInputs()) == 1


def test_scenario_deltas_move_projection():
    team = neutral_team()

    assert project_win_probability(team, ScenarioInputs()) == 50
    assert project_win_probability(team, ScenarioInputs(shooting_delta=2)) == 53
    assert project_win_probability(team, ScenarioInputs(turnover_delta=2)) == 46


def test_opponent_penalty_is_applied_and_reclamped():
    team = sample_team()

    assert apply_opponent_penalty(89, 10) == pytest.approx(82.0)
    assert apply_opponent_penalty(50, 200) == 1
    assert apply_opponent_penalty(95, -20) == 99
    assert penalized_win_probability(team, ScenarioInputs(), 10) == pytest.approx(82.0)


def test_playoff_odds_and_momentum():
    assert estimate_playoff_odds(sample_team()) == 79
    assert team_momentum(sample_games()) == pytest.approx(5.3)
    assert team_momentum([]) == 0.0


def test_display_rounding_matches_half_up_policy():
    assert round_half_up(2.5) == 3
    assert round_half_up(-1.5) == -1
    assert to_fixed(0.125, 2) == 0.13
    assert to_fixed(-0.125, 2) == -0.13
    # 1.005 is stored just below the midpoint.
    assert to_fixed(1.005, 2) == 1.0


def test_extreme_negative_scores_clamp_instead_of_overflowing():
    collapsing = TeamProfile(name="Collapse", offensive_rating=100, defensive_rating=110, pace=100, recent_form=-1000)

    assert project_win_probability(collapsing, ScenarioInputs()) == 1
    assert penalized_win_probability(neutral_team(), ScenarioInputs(turnover_delta=10_000), 0) == 1
    assert estimate_playoff_odds(collapsing) == 0
