import pytest

from pycourt.analytics import build_player_radar, detect_game_anomalies, evaluate_lineup_chemistry
from pycourt.models import GameSample, Player

from tests.sample_data import sample_games, sample_pool


def _player(**stats) -> Player:
    return Player(player_id="x", name="Role Player", position="F", salary=4000, minutes=20, **stats)


def test_empty_lineup_chemistry_is_zero():
    chemistry = evaluate_lineup_chemistry([])

    assert (chemistry.ball_movement, chemistry.spacing, chemistry.defense_switchability, chemistry.overall) == (
        0,
        0,
        0,
        0,
    )


def test_chemistry_scales_and_weights():
    chemistry = evaluate_lineup_chemistry([_player(assists=4, three_pct=0.2, steals=1.5, blocks=0.5)])

    assert chemistry.ball_movement == 50.0
    assert chemistry.spacing == 46.0
    assert chemistry.defense_switchability == 60.0
    assert chemistry.overall == pytest.approx(52.3)


def test_chemistry_clamps_to_100():
    chemistry = evaluate_lineup_chemistry([_player(assists=12, three_pct=0.6, steals=3, blocks=2)])

    assert chemistry.ball_movement == 100.0
    assert chemistry.spacing == 100.0
    assert chemistry.defense_switchability == 100.0
    assert chemistry.overall == 100.0


def test_anomalies_rank_top_four():
    anomalies = detect_game_anomalies(sample_games())

    assert [a.game for a in anomalies] == ["G2", "G6", "G5", "G3"]
    assert [a.label for a in anomalies] == ["Negative Outlier", "Positive Outlier", "Normal", "Normal"]
    assert anomalies[0].anomaly_score == pytest.approx(162.5)
    assert anomalies[1].anomaly_score == pytest.approx(144.5)


def test_zero_variance_log_has_no_outliers():
    games = [GameSample(game=f"G{i}", opponent="Same", points_for=105, points_against=100) for i in range(6)]

    anomalies = detect_game_anomalies(games)

    assert [a.game for a in anomalies] == ["G0", "G1", "G2", "G3"]
    assert all(a.anomaly_score == 0 and a.label == "Normal" for a in anomalies)


def test_empty_game_log():
    assert detect_game_anomalies([]) == []


def test_player_radar_metrics():
    radar = build_player_radar(sample_pool()[0])

    assert [(stat.metric, stat.value) for stat in radar] == [
        ("Scoring", 92),
        ("Playmaking", 77),
        ("Rebounding", 44),
        ("Shooting", 96),
        ("Defense", 55),
        ("Efficiency", 75),
    ]


def test_player_radar_clamps():
    radar = {stat.metric: stat.value for stat in build_player_radar(_player(points=40, turnovers=10))}

    assert radar["Scoring"] == 100
    assert radar["Efficiency"] == 0
