# simulation.py
import math
import random
import logging
from dataclasses import dataclass, asdict

from config import DEFAULT_TRIALS
from odds_math import clamp_probability

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SimulationResult:
    probability: float
    success_count: int
    failure_count: int
    trial_count: int
    observed_rate: float

    @property
    def y_axis_max(self) -> int:
        """Bar chart ceiling with ~10% headroom over the taller bar."""
        return math.ceil(max(self.success_count, self.failure_count) * 1.1)

    def to_dict(self) -> dict:
        d = asdict(self)
        d["y_axis_max"] = self.y_axis_max
        return d


def coerce_trial_count(n, default: int = DEFAULT_TRIALS) -> int:
    """
    Trial counts come straight from a select box / text field.
    Anything that isn't a positive number falls back to `default`;
    fractional values are truncated ('250.7' -> 250).
    """
    if isinstance(n, bool):
        return default
    try:
        value = int(float(str(n).strip()))
    except (TypeError, ValueError, OverflowError):
        return default
    return value if value > 0 else default


def run_trials(p: float, n, rng=None) -> SimulationResult:
    """
    Run `n` independent Bernoulli trials with success probability `p`.

    `p` is silently clamped into [0, 1]; an invalid `n` falls back to
    DEFAULT_TRIALS. `rng` only needs a `random()` method (defaults to the
    `random` module; pass `random.Random(seed)` for repeatable runs).
    """
    rng = rng or random
    p = clamp_probability(p)
    n = coerce_trial_count(n)

    successes = 0
    for _ in range(n):
        if rng.random() < p:
            successes += 1

    result = SimulationResult(
        probability=p,
        success_count=successes,
        failure_count=n - successes,
        trial_count=n,
        observed_rate=successes / n,
    )
    logger.debug("simulated p=%s n=%d -> %d successes", p, n, successes)
    return result
