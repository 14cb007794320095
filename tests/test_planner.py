import pytest

from pycourt.analytics import penalized_win_probability
from pycourt.planner import build_plan_report, build_strategy_plans, select_plan

from tests.sample_data import sample_pool, sample_team


def _plans(**kwargs):
    params = dict(budget=36_000, iterations=400, seed=42)
    params.update(kwargs)
    budget = params.pop("budget")
    return build_strategy_plans(sample_team(), sample_pool(), budget, **params)


def test_plans_cover_every_archetype_with_shared_lineup():
    plans = _plans()

    assert [plan.plan_id for plan in plans] == ["aggressive", "balanced", "defensive"]
    lineup_ids = {tuple(p.player_id for p in plan.lineup.lineup) for plan in plans}
    assert lineup_ids == {("p2", "p3", "p4", "p5", "p6")}
    assert all(plan.lineup.is_feasible for plan in plans)
    assert all(plan.monte_carlo.iterations == 400 for plan in plans)


def test_plan_win_probability_uses_opponent_penalty():
    plans = _plans(opponent_net_rating=4.0)

    for plan in plans:
        expected = penalized_win_probability(sample_team(), plan.scenario, 4.0)
        assert plan.win_probability == pytest.approx(round(expected, 1))


def test_plans_are_reproducible_with_seed():
    assert _plans(seed=5) == _plans(seed=5)


def test_infeasible_lineup_penalizes_every_plan():
    plans = _plans(budget=10_000)

    aggressive = plans[0]
    assert not aggressive.lineup.is_feasible
    assert aggressive.chemistry.overall == 0
    # 0.72 * 100 + |3| * 4 + (100 - 0) * 0.12
    assert aggressive.risk_index == pytest.approx(96.0)

    weights_total = (
        0.45 * aggressive.win_probability
        + 0.25 * aggressive.monte_carlo.win_rate
        - 0.11 * aggressive.risk_index
        - 30
    )
    assert aggressive.score == pytest.approx(weights_total, abs=0.01)


def test_select_plan_prefers_requested_then_best():
    plans = _plans()

    assert select_plan(plans, "defensive").plan_id == "defensive"
    best = select_plan(plans)
    assert best.score == max(plan.score for plan in plans)
    assert select_plan(plans, "missing") == best

    with pytest.raises(ValueError):
        select_plan([])


def test_plan_report_explains_selected_plan():
    report = build_plan_report(
        sample_team(),
        sample_pool(),
        36_000,
        plan_id="balanced",
        opponent_net_rating=2.0,
        iterations=300,
        seed=9,
    )

    assert report.selected.plan_id == "balanced"
    assert sorted(impact.factor for impact in report.sensitivity) == ["Pace", "Shooting", "Turnovers"]
    assert report.recommendations
    assert report.opponent_net_rating == 2.0


def test_unknown_formation_raises():
    with pytest.raises(KeyError):
        _plans(formation="box-and-one")
