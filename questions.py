# questions.py
import math
import random
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple, Union

from config import DEFAULT_QUESTION_COUNT
from odds_math import (
    round_to_precision,
    probability_to_odds,
    probability_to_log_odds,
    log_odds_to_probability,
)

logger = logging.getLogger(__name__)

r3 = round_to_precision


class QuestionKind(str, Enum):
    LOGIT_CONVERSION = "logit-conversion"
    ODDS_GROWTH = "odds-growth"
    LOGIT_INTERPRETATION = "logit-interpretation"
    PROBABILITY_CONVERSION = "probability-conversion"
    COMPARE_METRICS = "compare-metrics"


# index % 5 picks the kind, in this order
KIND_CYCLE = (
    QuestionKind.LOGIT_CONVERSION,
    QuestionKind.ODDS_GROWTH,
    QuestionKind.LOGIT_INTERPRETATION,
    QuestionKind.PROBABILITY_CONVERSION,
    QuestionKind.COMPARE_METRICS,
)

TRUE_FALSE_KINDS = frozenset({QuestionKind.ODDS_GROWTH, QuestionKind.COMPARE_METRICS})


@dataclass(frozen=True)
class Question:
    kind: QuestionKind
    prompt: str
    expected_answer: Union[float, str]
    explanation: str
    draw: Optional[float] = None   # the (rounded) random value the question was built from

    @property
    def input_mode(self) -> str:
        return "boolean" if self.kind in TRUE_FALSE_KINDS else "numeric"

    def to_dict(self, index: int) -> dict:
        """Public view for the UI; leaves the answer out."""
        return {
            "index": index,
            "kind": self.kind.value,
            "prompt": self.prompt,
            "input_mode": self.input_mode,
        }


@dataclass(frozen=True)
class QuestionSet:
    questions: Tuple[Question, ...] = field(default_factory=tuple)

    def __len__(self):
        return len(self.questions)

    def __iter__(self):
        return iter(self.questions)

    def __getitem__(self, idx):
        return self.questions[idx]

    def to_dict(self) -> dict:
        return {
            "count": len(self.questions),
            "questions": [q.to_dict(i) for i, q in enumerate(self.questions)],
        }

    def answer_key(self) -> list:
        return [
            {
                "number": i + 1,
                "question": q.prompt,
                "answer": q.expected_answer,
                "explanation": q.explanation,
            }
            for i, q in enumerate(self.questions)
        ]


# ---------- generators (one per kind) ----------
def gen_logit_conversion(rng) -> Question:
    p = r3(rng.uniform(0.1, 0.9))
    logit = r3(probability_to_log_odds(p))
    return Question(
        kind=QuestionKind.LOGIT_CONVERSION,
        prompt=f"If probability = {p}, what is the log-odds (logit)?",
        expected_answer=logit,
        explanation=f"log-odds = ln({p} / (1 - {p})) = ln({r3(p / (1 - p))}) = {logit}",
        draw=p,
    )


def gen_odds_growth(rng) -> Question:
    return Question(
        kind=QuestionKind.ODDS_GROWTH,
        prompt="True or False: Odds grow much faster than probability as p approaches 1.",
        expected_answer="True",
        explanation=("Odds = p/(1-p). As p→1, the denominator (1-p)→0, causing odds→∞. "
                     "Probability stays bounded at 1."),
    )


def gen_logit_interpretation(rng) -> Question:
    logit = r3(rng.uniform(-2.0, 2.0))
    p = r3(log_odds_to_probability(logit))
    e = math.exp(logit)
    return Question(
        kind=QuestionKind.LOGIT_INTERPRETATION,
        prompt=f"If log-odds = {logit}, what is the probability?",
        expected_answer=p,
        explanation=f"p = e^{logit} / (1 + e^{logit}) = {r3(e)} / {r3(1 + e)} = {p}",
        draw=logit,
    )


def gen_probability_conversion(rng) -> Question:
    p = r3(rng.uniform(0.15, 0.85))
    odds = r3(probability_to_odds(p))
    return Question(
        kind=QuestionKind.PROBABILITY_CONVERSION,
        prompt=f"Convert probability = {p} to odds.",
        expected_answer=odds,
        explanation=f"odds = {p} / (1 - {p}) = {p} / {r3(1 - p)} = {odds}",
        draw=p,
    )


def gen_compare_metrics(rng) -> Question:
    return Question(
        kind=QuestionKind.COMPARE_METRICS,
        prompt="True or False: A positive log-odds (logit > 0) indicates the event is more likely than not.",
        expected_answer="True",
        explanation="log-odds = ln(p/(1-p)) > 0 implies p > 0.5, so the event is more likely than not.",
    )


GEN_BY_KIND = {
    QuestionKind.LOGIT_CONVERSION: gen_logit_conversion,
    QuestionKind.ODDS_GROWTH: gen_odds_growth,
    QuestionKind.LOGIT_INTERPRETATION: gen_logit_interpretation,
    QuestionKind.PROBABILITY_CONVERSION: gen_probability_conversion,
    QuestionKind.COMPARE_METRICS: gen_compare_metrics,
}


def kind_for_index(index: int) -> QuestionKind:
    return KIND_CYCLE[index % len(KIND_CYCLE)]


def coerce_question_count(count, default: int = DEFAULT_QUESTION_COUNT) -> int:
    if isinstance(count, bool):
        return default
    try:
        value = int(str(count).strip())
    except (TypeError, ValueError):
        return default
    return value if value >= 0 else default


def generate(count=DEFAULT_QUESTION_COUNT, rng=None) -> QuestionSet:
    """
    Build a fresh QuestionSet of `count` questions, cycling through KIND_CYCLE.
    `rng` needs `uniform()`; defaults to the `random` module.
    """
    rng = rng or random
    count = coerce_question_count(count)
    qs = tuple(GEN_BY_KIND[kind_for_index(i)](rng) for i in range(count))
    logger.debug("generated %d questions", len(qs))
    return QuestionSet(qs)
