from pycourt.analytics import generate_recommendations
from pycourt.models import ScenarioInputs

from tests.sample_data import sample_team


def test_pace_push_only():
    recs = generate_recommendations(sample_team(), ScenarioInputs(pace_delta=3), 0)

    assert [(rec.title, rec.impact) for rec in recs] == [("Push transition volume", 8.8)]


def test_default_when_no_rule_fires():
    recs = generate_recommendations(sample_team(), ScenarioInputs(), 0)

    assert len(recs) == 1
    assert recs[0].title == "Maintain current game model"
    assert recs[0].impact == 4.5


def test_all_rules_fire_and_sort_by_impact():
    scenario = ScenarioInputs(pace_delta=4, turnover_delta=2, shooting_delta=-2)

    recs = generate_recommendations(sample_team(), scenario, 20)

    assert [(rec.title, rec.impact) for rec in recs] == [
        ("Push transition volume", 10.4),
        ("Prioritize low-risk sets", 7.0),
        ("Defensive rebounding emphasis", 6.8),
        ("Shift shot profile inward", 5.7),
    ]


def test_thresholds_are_strict():
    scenario = ScenarioInputs(pace_delta=2, turnover_delta=1, shooting_delta=0)

    recs = generate_recommendations(sample_team(), scenario, 0)

    assert [rec.title for rec in recs] == ["Maintain current game model"]


def test_tied_impacts_keep_rule_order():
    scenario = ScenarioInputs(pace_delta=3, turnover_delta=2.72)

    recs = generate_recommendations(sample_team(), scenario, 0)

    assert [rec.impact for rec in recs] == [8.8, 8.8]
    assert [rec.title for rec in recs] == ["Push transition volume", "Prioritize low-risk sets"]
