# sigfig-lab/checking.py

from __future__ import annotations

import logging
import math
import re
from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict

from notation import ScientificValue, format_decimal, format_scientific, format_standard
from problems import AnswerType, Problem

logger = logging.getLogger("sigfig-lab.checking")

# --- Grading policy ----------------------------------------------------------------
# Scientific answers: coefficient within an absolute slack, exponent must match exactly.
SCIENTIFIC_COEFFICIENT_TOLERANCE = 0.05

# Standard-form conversions: relative slack only.
STANDARD_RELATIVE_TOLERANCE = 0.001

# Rounded / arithmetic answers: relative slack OR an absolute floor for values near zero.
NUMBER_RELATIVE_TOLERANCE = 0.01
NUMBER_ABSOLUTE_TOLERANCE = 0.01

# Longer answers are marked incorrect without being parsed.
LEN_LIMIT = 100

_ANSWER_REQUIRED_MSG = "Answer required."
_TOO_LONG_MSG = f"Answer too long (> {LEN_LIMIT})."
_SCIENTIFIC_FORMAT_MSG = "Use the form coefficient x 10^exponent, e.g. 3.2 x 10^4."
_NUMBER_FORMAT_MSG = "Enter a number."
_INTEGER_FORMAT_MSG = "Enter a whole number."
_COMPARE_FORMAT_MSG = "Enter >, < or =."

# "3.2 x 10^4", "3.2×10^-3", "3.2 * 10 ^ +5", "3.2x104" (caret optional)
_SCIENTIFIC_RE = re.compile(
    r"^(-?(?:\d+(?:\.\d*)?|\.\d+))\s*[x×*]\s*10\s*\^?\s*([+-]?\d+)$",
    re.IGNORECASE,
)
_INTEGER_RE = re.compile(r"^[+-]?\d+$")

COMPARE_SYNONYMS = {"greater": ">", "less": "<", "equal": "="}


class Verdict(BaseModel):
    ok: bool
    correct: bool
    expected: Optional[str] = None
    hint: Optional[str] = None
    feedback: str = ""


class ScoreCounters(BaseModel):
    model_config = ConfigDict(frozen=True)

    correct: int = 0
    total: int = 0
    streak: int = 0


# --- Parsing helpers ---------------------------------------------------------------


def _parse_number(s: str) -> Optional[float]:
    try:
        val = float(s.replace(",", ""))
    except ValueError:
        return None
    return val if math.isfinite(val) else None


def _parse_integer(s: str) -> Optional[int]:
    if _INTEGER_RE.fullmatch(s) is None:
        return None
    return int(s)


def parse_scientific(s: str) -> Optional[ScientificValue]:
    m = _SCIENTIFIC_RE.fullmatch(s.strip())
    if not m:
        return None
    return ScientificValue(coefficient=float(m.group(1)), exponent=int(m.group(2)))


def expected_display(problem: Problem) -> str:
    """
    Human-readable correct answer shown after a wrong submission.
    Scientific values as "c × 10^e", standard form without grouping, everything else raw.
    """
    exp = problem.expected
    if problem.answer_type == AnswerType.SCIENTIFIC and isinstance(exp, ScientificValue):
        return format_scientific(exp)
    if problem.answer_type == AnswerType.STANDARD and isinstance(exp, (int, float)):
        return format_standard(exp)
    if isinstance(exp, (int, float)):
        return format_decimal(exp)
    return str(exp)


# --- Per-type comparison -----------------------------------------------------------


def _check_scientific(problem: Problem, answer: str) -> Tuple[bool, str]:
    user = parse_scientific(answer)
    if user is None:
        return False, _SCIENTIFIC_FORMAT_MSG
    exp = problem.expected
    correct = (
        abs(user.coefficient - exp.coefficient) < SCIENTIFIC_COEFFICIENT_TOLERANCE
        and user.exponent == exp.exponent
    )
    return correct, ""


def _check_standard(problem: Problem, answer: str) -> Tuple[bool, str]:
    user = _parse_number(answer)
    if user is None:
        return False, _NUMBER_FORMAT_MSG
    exp = float(problem.expected)
    return abs(user - exp) < abs(exp * STANDARD_RELATIVE_TOLERANCE), ""


def _check_sigfigs(problem: Problem, answer: str) -> Tuple[bool, str]:
    user = _parse_integer(answer)
    if user is None:
        return False, _INTEGER_FORMAT_MSG
    return user == int(problem.expected), ""


def _check_number(problem: Problem, answer: str) -> Tuple[bool, str]:
    user = _parse_number(answer)
    if user is None:
        return False, _NUMBER_FORMAT_MSG
    exp = float(problem.expected)
    diff = abs(user - exp)
    return diff < abs(exp * NUMBER_RELATIVE_TOLERANCE) or diff < NUMBER_ABSOLUTE_TOLERANCE, ""


def _check_compare(problem: Problem, answer: str) -> Tuple[bool, str]:
    symbol = COMPARE_SYNONYMS.get(answer, answer)
    if symbol not in (">", "<", "="):
        return False, _COMPARE_FORMAT_MSG
    return symbol == problem.expected, ""


def _check_magnitude(problem: Problem, answer: str) -> Tuple[bool, str]:
    user = _parse_integer(answer)
    if user is None:
        return False, _INTEGER_FORMAT_MSG
    tolerance = problem.tolerance or 0
    return abs(user - int(problem.expected)) <= tolerance, ""


_CHECKERS = {
    AnswerType.SCIENTIFIC: _check_scientific,
    AnswerType.STANDARD: _check_standard,
    AnswerType.SIGFIGS: _check_sigfigs,
    AnswerType.ROUNDED: _check_number,
    AnswerType.NUMBER: _check_number,
    AnswerType.COMPARE: _check_compare,
    AnswerType.MAGNITUDE: _check_magnitude,
}


# --- Public API --------------------------------------------------------------------


def check(problem: Problem, raw_input: Optional[str]) -> Verdict:
    """
    Mark one submission against the live problem.

    Empty or whitespace-only input is rejected with ok=False; callers must not score it.
    Anything else gets a verdict, malformed or overlong answers simply being incorrect.
    """
    if raw_input is None or not raw_input.strip():
        logger.debug("rejected empty answer for %s", problem.category.value)
        return Verdict(ok=False, correct=False, feedback=_ANSWER_REQUIRED_MSG)

    answer = raw_input.strip().lower()
    if len(answer) > LEN_LIMIT:
        correct, feedback = False, _TOO_LONG_MSG
    else:
        correct, feedback = _CHECKERS[problem.answer_type](problem, answer)

    return Verdict(
        ok=True,
        correct=bool(correct),
        expected=expected_display(problem),
        hint=problem.hint,
        feedback="" if correct else feedback,
    )


def apply_verdict(score: ScoreCounters, verdict: Verdict) -> ScoreCounters:
    if not verdict.ok:
        return score
    if verdict.correct:
        return ScoreCounters(
            correct=score.correct + 1, total=score.total + 1, streak=score.streak + 1
        )
    return ScoreCounters(correct=score.correct, total=score.total + 1, streak=0)
