"""Parse opponent team CSV text and rank teams by contender score."""

from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Sequence

from pycourt.analytics.numeric import to_fixed
from pycourt.models import TeamCsvRow


logger = logging.getLogger(__name__)

_LINE_SPLIT = re.compile(r"\r?\n")
_NUMBER = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


@dataclass(frozen=True)
class ContenderRow:
    name: str
    offensive_rating: float
    defensive_rating: float
    pace: float
    net: float
    contender_score: float


def _parse_number(raw: str) -> Optional[float]:
    text = raw.strip()
    if not _NUMBER.fullmatch(text):
        return None
    value = float(text)
    return value if math.isfinite(value) else None


def _parse_row(cells: Sequence[str]) -> Optional[TeamCsvRow]:
    name = cells[0].strip()
    offensive = _parse_number(cells[1])
    defensive = _parse_number(cells[2])
    pace = _parse_number(cells[3])
    if not name or offensive is None or defensive is None or pace is None:
        return None
    return TeamCsvRow(name=name, offensive_rating=offensive, defensive_rating=defensive, pace=pace)


def parse_team_csv(text: str) -> List[TeamCsvRow]:
    """Parse ``name,offensiveRating,defensiveRating,pace`` rows, skipping the header.

    Rows with fewer than four cells or a non-numeric rating are dropped; an
    empty result means the text held no valid rows.
    """

    lines = [line for line in _LINE_SPLIT.split(text) if line]
    if len(lines) <= 1:
        return []

    rows: List[TeamCsvRow] = []
    for line_no, line in enumerate(lines[1:], start=2):
        cells = line.split(",")
        row = _parse_row(cells) if len(cells) >= 4 else None
        if row is None:
            logger.debug("Dropping team CSV line %s: %r", line_no, line)
            continue
        rows.append(row)
    return rows


def load_team_csv(path: Path) -> List[TeamCsvRow]:
    return parse_team_csv(path.read_text(encoding="utf-8"))


def rank_teams_by_contender_score(teams: Sequence[TeamCsvRow]) -> List[ContenderRow]:
    """Score teams on net rating with a penalty for extreme tempo, best first."""

    ranked = []
    for team in teams:
        net = team.offensive_rating - team.defensive_rating
        tempo_penalty = abs(team.pace - 100) * 0.15
        ranked.append(
            ContenderRow(
                name=team.name,
                offensive_rating=team.offensive_rating,
                defensive_rating=team.defensive_rating,
                pace=team.pace,
                net=net,
                contender_score=to_fixed(net * 3.2 - tempo_penalty, 2),
            )
        )
    ranked.sort(key=lambda row: row.contender_score, reverse=True)
    logger.info("Ranked %s teams by contender score", len(ranked))
    return ranked


def find_contender(ranked: Sequence[ContenderRow], name: str) -> Optional[ContenderRow]:
    for row in ranked:
        if row.name == name:
            return row
    return None
