# likelihood.py
from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP

from odds_math import clamp_probability


@dataclass(frozen=True)
class Likelihood:
    lower: float
    upper: float       # exclusive, except the last bin which includes 1.0
    label: str
    template: str      # filled with {pct}

    def describe(self, p: float) -> str:
        return self.template.format(pct=percent(p))


# Ordered, half-open [lower, upper) bins covering [0, 1]
BINS = (
    Likelihood(0.0, 0.02, "very rare",
               "Very rare (~{pct}%). Example: Winning a small lottery prize or a very unlikely event."),
    Likelihood(0.02, 0.08, "uncommon",
               'Uncommon (~{pct}%). Example: Getting a "6" on a fair die is about 16.7% (close to this range).'),
    Likelihood(0.08, 0.2, "occasional",
               "Occasional (~{pct}%). Example: About the chance of rolling a specific number on a 6-sided die (≈16.7%)."),
    Likelihood(0.2, 0.4, "somewhat likely",
               "Somewhat likely (~{pct}%). Example: A somewhat likely weather event or underdog winning."),
    Likelihood(0.4, 0.6, "about even",
               "About 50/50 (~{pct}%). Example: A fair coin toss has p = 50%."),
    Likelihood(0.6, 0.8, "likely",
               "Likely (~{pct}%). Example: A favored sports team winning a match."),
    Likelihood(0.8, 0.95, "very likely",
               "Very likely (~{pct}%). Example: A heavily favored team or an expected outcome."),
    Likelihood(0.95, 1.0, "near certain",
               "Near certain (~{pct}%). Example: Almost guaranteed events (close to certain)."),
)


def percent(p: float) -> int:
    """Whole percent, half rounded up (0.125 -> 13)."""
    return int(Decimal(repr(float(p))).scaleb(2).quantize(Decimal(1), rounding=ROUND_HALF_UP))


def classify(p: float) -> Likelihood:
    p = clamp_probability(p)
    for b in BINS:
        if p < b.upper:
            return b
    return BINS[-1]


def describe(p: float) -> str:
    p = clamp_probability(p)
    return classify(p).describe(p)
