import pytest

from pycourt.analytics import calculate_scenario_sensitivity, penalized_win_probability
from pycourt.models import ScenarioInputs, TeamProfile

from tests.sample_data import neutral_team, sample_team


def test_factors_sorted_by_magnitude():
    impacts = calculate_scenario_sensitivity(neutral_team(), ScenarioInputs(), 0)

    assert [impact.factor for impact in impacts] == ["Turnovers", "Shooting", "Pace"]
    assert [impact.delta_win_probability for impact in impacts] == [-4.0, 3.0, 1.0]


def test_equal_magnitudes_keep_declaration_order():
    impacts = calculate_scenario_sensitivity(sample_team(), ScenarioInputs(), 0)

    assert [impact.factor for impact in impacts] == ["Pace", "Shooting", "Turnovers"]
    assert [impact.delta_win_probability for impact in impacts] == [1.0, 1.0, -1.0]


def test_deltas_match_baseline_subtraction_with_opponent_penalty():
    team = sample_team()
    scenario = ScenarioInputs(pace_delta=3, shooting_delta=-1, turnover_delta=2)
    opponent = 6.5

    impacts = {impact.factor: impact.delta_win_probability for impact in calculate_scenario_sensitivity(team, scenario, opponent)}
    baseline = penalized_win_probability(team, scenario, opponent)
    shifted = penalized_win_probability(team, scenario.model_copy(update={"shooting_delta": 1}), opponent)

    assert sorted(impacts) == ["Pace", "Shooting", "Turnovers"]
    assert impacts["Shooting"] == pytest.approx(round(shifted - baseline, 2))


def test_clamped_probability_reports_zero_sensitivity():
    # A huge opponent edge pins every evaluation at the 1% floor.
    impacts = calculate_scenario_sensitivity(sample_team(), ScenarioInputs(), 200)

    assert all(impact.delta_win_probability == 0 for impact in impacts)


def test_saturated_projection_has_zero_impacts():
    collapsing = TeamProfile(name="Collapse", offensive_rating=100, defensive_rating=110, pace=100, recent_form=-1000)

    impacts = calculate_scenario_sensitivity(collapsing, ScenarioInputs(), 0)

    assert [impact.factor for impact in impacts] == ["Pace", "Shooting", "Turnovers"]
    assert [impact.delta_win_probability for impact in impacts] == [0.0, 0.0, 0.0]
