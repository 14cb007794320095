"""Shared roster, team and game log used across the test modules."""

from __future__ import annotations

from pycourt.models import GameSample, Player, TeamProfile


def sample_team() -> TeamProfile:
    return TeamProfile(
        name="Hackalytics United",
        conference="Future League East",
        offensive_rating=118.6,
        defensive_rating=109.8,
        pace=101.2,
        recent_form=0.72,
    )


def neutral_team() -> TeamProfile:
    return TeamProfile(name="Even Keel", offensive_rating=110.0, defensive_rating=110.0, pace=100.0, recent_form=0.0)


def sample_pool() -> list[Player]:
    rows = [
        ("p1", "Jaden Brooks", "G", 9200, 35, 27.1, 8.4, 5.2, 1.9, 0.4, 3.1, 0.51, 0.41, 30.5),
        ("p2", "Marco Ilyas", "G", 7700, 33, 19.3, 6.1, 4.8, 1.6, 0.2, 2.4, 0.47, 0.39, 24.2),
        ("p3", "Nico Rivers", "F", 8400, 34, 22.5, 3.7, 9.8, 1.3, 1.0, 2.7, 0.54, 0.36, 26.1),
        ("p4", "Elijah Stone", "F", 6400, 30, 15.6, 2.9, 7.2, 1.1, 0.9, 1.9, 0.49, 0.34, 20.7),
        ("p5", "Darius Cole", "C", 8100, 31, 18.4, 2.1, 11.5, 0.8, 2.0, 2.2, 0.59, 0.21, 23.4),
        ("p6", "Theo Vale", "G", 5300, 24, 11.2, 4.2, 3.1, 1.0, 0.2, 1.5, 0.45, 0.37, 17.8),
        ("p7", "Kian Murphy", "F", 5900, 27, 13.8, 2.5, 6.9, 0.9, 0.7, 1.6, 0.50, 0.35, 19.4),
        ("p8", "Owen Hart", "C", 4800, 20, 9.4, 1.1, 7.3, 0.5, 1.4, 1.3, 0.57, 0.12, 14.9),
    ]
    return [
        Player(
            player_id=pid,
            name=name,
            position=pos,
            team="HU",
            salary=salary,
            minutes=minutes,
            points=points,
            assists=assists,
            rebounds=rebounds,
            steals=steals,
            blocks=blocks,
            turnovers=turnovers,
            fg_pct=fg_pct,
            three_pct=three_pct,
            usage=usage,
        )
        for pid, name, pos, salary, minutes, points, assists, rebounds, steals, blocks, turnovers, fg_pct, three_pct, usage in rows
    ]


def sample_games() -> list[GameSample]:
    rows = [
        ("G1", "Phoenix", 118, 112),
        ("G2", "Dallas", 110, 115),
        ("G3", "Boston", 124, 117),
        ("G4", "Miami", 113, 108),
        ("G5", "Denver", 119, 120),
        ("G6", "Milwaukee", 128, 116),
    ]
    return [
        GameSample(game=game, opponent=opponent, points_for=points_for, points_against=points_against)
        for game, opponent, points_for, points_against in rows
    ]
