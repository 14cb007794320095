"""Input adapters that turn raw opponent data into team rows."""

from .teams import (
    ContenderRow,
    find_contender,
    load_team_csv,
    parse_team_csv,
    rank_teams_by_contender_score,
)

__all__ = [
    "ContenderRow",
    "find_contender",
    "load_team_csv",
    "parse_team_csv",
    "rank_teams_by_contender_score",
]
