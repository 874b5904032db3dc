# odds_math.py
import math
from decimal import Decimal, ROUND_HALF_UP
from typing import List, Sequence, Tuple

from config import DISPLAY_DIGITS, ODDS_CHART_CAP

# Denser near the boundaries where the logit curve bends hardest
LOGIT_CURVE_POINTS = (
    0.01, 0.02, 0.03, 0.05, 0.1, 0.15, 0.2, 0.25, 0.3, 0.35, 0.4, 0.45,
    0.5, 0.55, 0.6, 0.65, 0.7, 0.75, 0.8, 0.85, 0.9, 0.95, 0.97, 0.98, 0.99,
)


# ---------- rounding / clamping ----------
def round_to_precision(value: float, digits: int = DISPLAY_DIGITS) -> float:
    """
    Round for display, half away from zero ('0.0005' -> 0.001, '-0.0005' -> -0.001).
    Works on the shortest decimal repr of the float so 2.675 rounds to 2.68.
    inf / nan are returned unchanged.
    """
    if not math.isfinite(value):
        return value
    quant = Decimal(1).scaleb(-digits)
    return float(Decimal(repr(float(value))).quantize(quant, rounding=ROUND_HALF_UP))


def clamp_probability(p: float) -> float:
    if math.isnan(p):
        return 0.0
    return min(max(p, 0.0), 1.0)


# ---------- conversions ----------
def probability_to_odds(p: float) -> float:
    """odds = p / (1 - p); saturates to inf at p >= 1 and 0 at p <= 0."""
    if p >= 1:
        return math.inf
    if p <= 0:
        return 0.0
    return p / (1 - p)


def probability_to_log_odds(p: float) -> float:
    """logit = ln(p / (1 - p)); +inf at p >= 1, -inf at p <= 0."""
    if p >= 1:
        return math.inf
    if p <= 0:
        return -math.inf
    return math.log(p / (1 - p))


def log_odds_to_probability(log_odds: float) -> float:
    """Logistic sigmoid e^l / (1 + e^l)."""
    if log_odds >= 0:
        return 1.0 / (1.0 + math.exp(-log_odds))
    e = math.exp(log_odds)
    return e / (1.0 + e)


def odds_to_probability(odds: float) -> float:
    if odds == math.inf:
        return 1.0
    if odds <= 0:
        return 0.0
    return odds / (1.0 + odds)


# ---------- chart series ----------
def logit_curve(probabilities: Sequence[float] = LOGIT_CURVE_POINTS) -> List[Tuple[float, float]]:
    return [(p, probability_to_log_odds(p)) for p in probabilities]


def comparison_curve(start: float = 0.01, stop: float = 0.99, step: float = 0.02,
                     odds_cap: float = ODDS_CHART_CAP) -> List[Tuple[float, float, float]]:
    """
    Rows of (label, probability, odds) for the probability-vs-odds chart.
    Odds are capped so the right axis stays readable.
    """
    rows = []
    steps = int(round((stop - start) / step))
    for i in range(steps + 1):
        p = start + i * step
        rows.append((round_to_precision(p), p, min(probability_to_odds(p), odds_cap)))
    return rows


def readout(p: float, digits: int = DISPLAY_DIGITS) -> dict:
    """Rounded probability / odds / log-odds for the slider read-outs."""
    return {
        "probability": round_to_precision(p, digits),
        "odds": round_to_precision(probability_to_odds(p), digits),
        "log_odds": round_to_precision(probability_to_log_odds(p), digits),
    }
