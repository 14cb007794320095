"""Descriptive scorers: lineup chemistry, game anomalies and player radar."""

from __future__ import annotations

from dataclasses import dataclass
from statistics import fmean, pstdev
from typing import List, Sequence

from pycourt.models import GameSample, Player

from .numeric import clamp, round_half_up, to_fixed


OUTLIER_Z = 1.2
MAX_ANOMALIES = 4


@dataclass(frozen=True)
class LineupChemistry:
    ball_movement: float
    spacing: float
    defense_switchability: float
    overall: float


@dataclass(frozen=True)
class GameAnomaly:
    game: str
    opponent: str
    anomaly_score: float
    label: str


@dataclass(frozen=True)
class PlayerRadarStats:
    metric: str
    value: int


def evaluate_lineup_chemistry(lineup: Sequence[Player]) -> LineupChemistry:
    if not lineup:
        return LineupChemistry(ball_movement=0.0, spacing=0.0, defense_switchability=0.0, overall=0.0)

    average_assists = fmean(player.assists for player in lineup)
    average_three_pct = fmean(player.three_pct for player in lineup)
    wingspan_proxy = fmean(player.steals + player.blocks for player in lineup)

    ball_movement = clamp(average_assists * 12.5, 0, 100)
    spacing = clamp(average_three_pct * 230, 0, 100)
    switchability = clamp(wingspan_proxy * 30, 0, 100)
    overall = ball_movement * 0.35 + spacing * 0.3 + switchability * 0.35

    return LineupChemistry(
        ball_movement=to_fixed(ball_movement, 1),
        spacing=to_fixed(spacing, 1),
        defense_switchability=to_fixed(switchability, 1),
        overall=to_fixed(overall, 1),
    )


def _anomaly_label(z_score: float) -> str:
    if z_score >= OUTLIER_Z:
        return "Positive Outlier"
    if z_score <= -OUTLIER_Z:
        return "Negative Outlier"
    return "Normal"


def detect_game_anomalies(games: Sequence[GameSample]) -> List[GameAnomaly]:
    """Score games by point-differential z-score and keep the strongest outliers."""

    if not games:
        return []

    differences = [game.points_for - game.points_against for game in games]
    mean = fmean(differences)
    # Zero-variance logs score every game as 0 instead of dividing by zero.
    std_dev = pstdev(differences, mean) or 1.0

    anomalies = []
    for game, diff in zip(games, differences):
        z_score = (diff - mean) / std_dev
        anomalies.append(
            GameAnomaly(
                game=game.game,
                opponent=game.opponent,
                anomaly_score=to_fixed(abs(z_score) * 100, 1),
                label=_anomaly_label(z_score),
            )
        )
    anomalies.sort(key=lambda anomaly: anomaly.anomaly_score, reverse=True)
    return anomalies[:MAX_ANOMALIES]


def build_player_radar(player: Player) -> List[PlayerRadarStats]:
    scores = {
        "Scoring": player.points * 3.4,
        "Playmaking": player.assists * 9.2,
        "Rebounding": player.rebounds * 8.4,
        "Shooting": player.fg_pct * 140 + player.three_pct * 60,
        "Defense": player.steals * 25 + player.blocks * 18,
        "Efficiency": 115 - player.turnovers * 13,
    }
    return [
        PlayerRadarStats(metric=metric, value=round_half_up(clamp(value, 0, 100)))
        for metric, value in scores.items()
    ]
