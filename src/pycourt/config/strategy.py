"""Formations, strategy archetypes and plan-score weights."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable

from pycourt.analytics.numeric import round_half_up
from pycourt.models import LineupConstraints, ScenarioInputs


BASE_INTENSITY = 6


@dataclass(frozen=True)
class Formation:
    key: str
    label: str
    guards: int
    forwards: int
    centers: int

    def constraints(self, *, min_minutes: float = 0.0, excluded_player_ids: Iterable[str] = ()) -> LineupConstraints:
        return LineupConstraints(
            guards=self.guards,
            forwards=self.forwards,
            centers=self.centers,
            min_minutes=min_minutes,
            excluded_player_ids=frozenset(excluded_player_ids),
        )


@dataclass(frozen=True)
class StrategyArchetype:
    key: str
    label: str
    pace: float
    shooting: float
    turnover: float
    risk: float

    def scenario(self, intensity: float = BASE_INTENSITY) -> ScenarioInputs:
        """Scale the archetype deltas by ``intensity`` relative to the base level."""

        scale = intensity / BASE_INTENSITY
        return ScenarioInputs(
            pace_delta=round_half_up(self.pace * scale),
            shooting_delta=round_half_up(self.shooting * scale),
            turnover_delta=round_half_up(self.turnover * scale),
        )


@dataclass(frozen=True)
class PriorityWeights:
    key: str
    win: float
    monte: float
    chemistry: float
    risk_penalty: float


_FORMATIONS: Dict[str, Formation] = {
    "balanced": Formation(key="balanced", label="Balanced", guards=2, forwards=2, centers=1),
    "guard_heavy": Formation(key="guard_heavy", label="Guard Heavy", guards=3, forwards=1, centers=1),
    "wing_heavy": Formation(key="wing_heavy", label="Wing Heavy", guards=1, forwards=3, centers=1),
}

_ARCHETYPES: Dict[str, StrategyArchetype] = {
    "aggressive": StrategyArchetype(
        key="aggressive", label="Aggressive Tempo", pace=6, shooting=4, turnover=3, risk=0.72
    ),
    "balanced": StrategyArchetype(
        key="balanced", label="Balanced Control", pace=2, shooting=2, turnover=0, risk=0.45
    ),
    "defensive": StrategyArchetype(
        key="defensive", label="Defensive Grind", pace=-3, shooting=1, turnover=-2, risk=0.31
    ),
}

_PRIORITY_WEIGHTS: Dict[str, PriorityWeights] = {
    "upside": PriorityWeights(key="upside", win=0.52, monte=0.28, chemistry=0.1, risk_penalty=0.14),
    "balanced": PriorityWeights(key="balanced", win=0.45, monte=0.25, chemistry=0.18, risk_penalty=0.11),
    "stability": PriorityWeights(key="stability", win=0.38, monte=0.24, chemistry=0.24, risk_penalty=0.08),
}


def _normalize_key(key: str) -> str:
    return key.strip().lower().replace("-", "_")


def iter_formations() -> Iterable[Formation]:
    return _FORMATIONS.values()


def get_formation(key: str) -> Formation:
    """Fetch a formation by key, raising KeyError if missing."""

    normalized = _normalize_key(key)
    if normalized not in _FORMATIONS:
        raise KeyError(f"No formation configured for {key!r}")
    return _FORMATIONS[normalized]


def iter_archetypes() -> Iterable[StrategyArchetype]:
    """Return archetypes in tournament order."""

    return _ARCHETYPES.values()


def get_archetype(key: str) -> StrategyArchetype:
    normalized = _normalize_key(key)
    if normalized not in _ARCHETYPES:
        raise KeyError(f"No strategy archetype configured for {key!r}")
    return _ARCHETYPES[normalized]


def get_priority_weights(key: str) -> PriorityWeights:
    normalized = _normalize_key(key)
    if normalized not in _PRIORITY_WEIGHTS:
        raise KeyError(f"No priority weights configured for {key!r}")
    return _PRIORITY_WEIGHTS[normalized]
