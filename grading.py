# grading.py
import re
import math
import logging
from dataclasses import dataclass
from typing import Mapping, Tuple, Union

from config import ANSWER_TOLERANCE
from questions import QuestionSet

logger = logging.getLogger(__name__)

# Leading number, same reading as a browser's parseFloat: "0.41abc" -> 0.41
_NUMBER_PREFIX = re.compile(r"^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")

# absorbs binary float noise, e.g. |0.406 - 0.405| = 0.0010000000000000009
_FLOAT_SLACK = 1e-9


# ---------- helpers ----------
def parse_number(raw) -> float:
    """
    Read a finite number from the start of `raw`.
    Raises ValueError when there is none ('', 'abc', 'inf', 'nan').
    """
    if isinstance(raw, bool):
        raise ValueError("booleans are not numbers")
    if isinstance(raw, (int, float)):
        value = float(raw)
    else:
        s = (raw or "").strip()
        m = _NUMBER_PREFIX.match(s)
        if not m:
            raise ValueError("no number found")
        value = float(m.group(0))
    if not math.isfinite(value):
        raise ValueError("number is not finite")
    return value


def _numeric_expected(expected):
    try:
        return parse_number(expected)
    except ValueError:
        return None


def check_answer(expected: Union[float, str], user_raw: str,
                 tolerance: float = ANSWER_TOLERANCE) -> bool:
    """
    Numeric expected answers: |user - expected| <= tolerance, unparseable -> wrong.
    Text / true-false answers: case-insensitive exact match, or either string
    contained in the other. Empty input is always wrong.
    """
    expected_num = _numeric_expected(expected)
    if expected_num is not None:
        try:
            user_num = parse_number(user_raw)
        except ValueError:
            return False
        return abs(user_num - expected_num) <= tolerance + _FLOAT_SLACK

    expected_str = str(expected).strip().lower()
    user_str = str(user_raw or "").strip().lower()
    if not user_str:
        return False
    if user_str == expected_str:
        return True
    # lenient: "tru" passes for "true"
    return expected_str in user_str or user_str in expected_str


# ---------- grading ----------
@dataclass(frozen=True)
class QuestionFeedback:
    index: int
    correct: bool
    user_answer: str
    expected_answer: Union[float, str]

    @property
    def message(self) -> str:
        return "Correct" if self.correct else f"Incorrect — answer: {self.expected_answer}"

    def to_dict(self) -> dict:
        return {
            "index": self.index,
            "correct": self.correct,
            "user_answer": self.user_answer,
            "expected_answer": self.expected_answer,
            "message": self.message,
        }


@dataclass(frozen=True)
class GradingResult:
    feedback: Tuple[QuestionFeedback, ...]

    @property
    def correct_count(self) -> int:
        return sum(1 for f in self.feedback if f.correct)

    @property
    def total_count(self) -> int:
        return len(self.feedback)

    @property
    def score(self) -> float:
        return self.correct_count / self.total_count if self.total_count else 0.0

    @property
    def score_text(self) -> str:
        return f"Score: {self.correct_count} / {self.total_count}"

    @property
    def per_question(self) -> Tuple[bool, ...]:
        return tuple(f.correct for f in self.feedback)

    def to_dict(self) -> dict:
        return {
            "results": [f.to_dict() for f in self.feedback],
            "correct_count": self.correct_count,
            "total_count": self.total_count,
            "score": self.score,
            "score_text": self.score_text,
        }


def grade(question_set: QuestionSet, user_answers: Mapping[int, str]) -> GradingResult:
    """Grade every question in the set; unanswered questions count as wrong."""
    answers = user_answers or {}
    feedback = []
    for idx, q in enumerate(question_set):
        raw = answers.get(idx, "")
        raw = "" if raw is None else str(raw)
        feedback.append(QuestionFeedback(
            index=idx,
            correct=check_answer(q.expected_answer, raw),
            user_answer=raw,
            expected_answer=q.expected_answer,
        ))
    result = GradingResult(tuple(feedback))
    logger.debug("graded %s", result.score_text)
    return result
