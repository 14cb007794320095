"""Environment-driven engine settings."""

from __future__ import annotations

import logging
import os


logger = logging.getLogger(__name__)

_MAX_POOL_ENV = "PYCOURT_MAX_POOL"
_SIM_RUNS_ENV = "PYCOURT_SIM_RUNS"

_MAX_POOL_DEFAULT = 40
_SIM_RUNS_DEFAULT = 2500


def _env_int(name: str, default: int, *, min_value: int | None = None, max_value: int | None = None) -> int:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning("Invalid int for %s: %s; using default %d", name, raw, default)
        return default
    if min_value is not None:
        value = max(min_value, value)
    if max_value is not None:
        value = min(max_value, value)
    return value


def max_pool_size() -> int:
    """Largest player pool callers may hand to the exhaustive lineup search."""

    return _env_int(_MAX_POOL_ENV, _MAX_POOL_DEFAULT, min_value=5)


def default_simulation_runs() -> int:
    return _env_int(_SIM_RUNS_ENV, _SIM_RUNS_DEFAULT, min_value=200, max_value=10_000)
