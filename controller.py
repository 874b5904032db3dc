# controller.py
import math
import logging
from dataclasses import dataclass, field
from typing import Dict, Optional

from config import DEFAULT_QUESTION_COUNT, ODDS_CHART_CAP
from grading import GradingResult, grade
from likelihood import classify
from odds_math import clamp_probability, probability_to_odds, probability_to_log_odds, readout
from questions import QuestionSet, generate
from simulation import SimulationResult, run_trials

logger = logging.getLogger(__name__)


# ---------------------------
# Input sanitizing (raw slider / text box values)
# ---------------------------
def _to_float(raw) -> float:
    try:
        return float(str(raw).strip())
    except (TypeError, ValueError):
        return math.nan


def slider_probability(raw) -> float:
    return clamp_probability(_to_float(raw))


def comparison_probability(raw) -> float:
    p = _to_float(raw)
    if math.isnan(p) or p < 0:
        return 0.01
    if p > 1:
        return 0.99
    return p


def simulation_probability(raw) -> float:
    p = _to_float(raw)
    if math.isnan(p):
        return 0.5
    if p <= 0:
        return 0.01
    if p >= 1:
        return 0.99
    return p


# ---------------------------
# Per-session state
# ---------------------------
@dataclass
class StudySession:
    """
    Everything the UI keeps between clicks: the current question set, the
    answers typed so far, and the last simulation. Values are replaced whole,
    never edited in place.
    """
    question_count: int = DEFAULT_QUESTION_COUNT
    rng: Optional[object] = None
    question_set: QuestionSet = field(default_factory=QuestionSet)
    answers: Dict[int, str] = field(default_factory=dict)
    simulation: Optional[SimulationResult] = None
    last_grade: Optional[GradingResult] = None

    def new_questions(self, count=None) -> QuestionSet:
        self.question_set = generate(self.question_count if count is None else count, rng=self.rng)
        self.answers = {}
        self.last_grade = None
        logger.info("new question set (%d questions)", len(self.question_set))
        return self.question_set

    def record_answer(self, index: int, text: str) -> bool:
        if not 0 <= index < len(self.question_set):
            return False
        self.answers = {**self.answers, index: text}
        return True

    def check(self, answers: Optional[Dict[int, str]] = None) -> GradingResult:
        if answers is not None:
            self.answers = dict(answers)
        self.last_grade = grade(self.question_set, self.answers)
        logger.info(self.last_grade.score_text)
        return self.last_grade

    def simulate(self, raw_p, raw_n) -> SimulationResult:
        p = simulation_probability(raw_p)
        self.simulation = run_trials(p, raw_n, rng=self.rng)
        return self.simulation

    # read-outs are stateless; kept here so adapters have one entry point
    def logit_view(self, raw_p) -> dict:
        p = slider_probability(raw_p)
        bin_ = classify(p)
        view = readout(p)
        view.update({
            "marker": {"x": p, "y": _json_number(probability_to_log_odds(p))},
            "likelihood": bin_.label,
            "example": bin_.describe(p),
        })
        return _json_safe(view)

    def comparison_view(self, raw_p) -> dict:
        p = comparison_probability(raw_p)
        view = readout(p)
        view.pop("log_odds")
        view["odds_marker"] = {"x": p, "y": min(probability_to_odds(p), ODDS_CHART_CAP)}
        view["probability_marker"] = {"x": p, "y": p}
        return _json_safe(view)


def _json_number(v: float):
    """inf / -inf as strings so they survive JSON."""
    if isinstance(v, float) and math.isinf(v):
        return "Infinity" if v > 0 else "-Infinity"
    return v


def _json_safe(d: dict) -> dict:
    return {k: (_json_safe(v) if isinstance(v, dict) else _json_number(v)) for k, v in d.items()}
