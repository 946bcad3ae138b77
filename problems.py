# sigfig-lab/problems.py

from __future__ import annotations

import logging
import random as _rnd
from enum import Enum
from typing import Callable, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, model_validator

from notation import (
    ScientificValue,
    count_significant_figures,
    exact,
    format_decimal,
    format_standard,
    normalize,
    round_half_up,
    round_to_sig_figs,
    to_scientific_notation,
)

logger = logging.getLogger("sigfig-lab.problems")


class Category(str, Enum):
    TO_SCIENTIFIC = "toScientific"
    FROM_SCIENTIFIC = "fromScientific"
    COUNT_SIG_FIGS = "countSigFigs"
    MULTIPLY_SCIENTIFIC = "multiplyScientific"
    DIVIDE_SCIENTIFIC = "divideScientific"
    ROUND_SIG_FIGS = "roundSigFigs"
    MULTIPLY_SIG_FIGS = "multiplySigFigs"
    ADD_SIG_FIGS = "addSigFigs"
    COMPARE_SCIENTIFIC = "compareScientific"
    ORDER_MAGNITUDE = "orderMagnitude"
    SCI_NOTATION_ADD = "sciNotationAdd"
    MIXED = "mixed"


class AnswerType(str, Enum):
    SCIENTIFIC = "scientific"
    STANDARD = "standard"
    SIGFIGS = "sigfigs"
    ROUNDED = "rounded"
    NUMBER = "number"
    COMPARE = "compare"
    MAGNITUDE = "magnitude"


class Problem(BaseModel):
    model_config = ConfigDict(frozen=True)

    category: Category
    question: str
    answer_type: AnswerType
    # ScientificValue for "scientific", a symbol for "compare", a number otherwise
    expected: Union[ScientificValue, int, float, str]
    tolerance: Optional[float] = None
    hint: Optional[str] = None
    target_sig_figs: Optional[int] = None
    instructions: str = ""

    @model_validator(mode="after")
    def _expected_matches_answer_type(self) -> "Problem":
        exp = self.expected
        if self.answer_type == AnswerType.SCIENTIFIC:
            ok = isinstance(exp, ScientificValue)
        elif self.answer_type == AnswerType.COMPARE:
            ok = exp in (">", "<", "=")
        else:
            ok = isinstance(exp, (int, float)) and not isinstance(exp, bool)
        if not ok:
            raise ValueError(f"expected {exp!r} does not fit answer type {self.answer_type.value}")
        return self


CONCRETE_CATEGORIES: List[Category] = [c for c in Category if c is not Category.MIXED]

CATEGORY_CATALOGUE: List[Dict[str, str]] = [
    {"category": "toScientific", "label": "To Scientific", "group": "Scientific Notation"},
    {"category": "fromScientific", "label": "From Scientific", "group": "Scientific Notation"},
    {"category": "multiplyScientific", "label": "Multiply", "group": "Scientific Notation"},
    {"category": "divideScientific", "label": "Divide", "group": "Scientific Notation"},
    {"category": "sciNotationAdd", "label": "Add", "group": "Scientific Notation"},
    {"category": "compareScientific", "label": "Compare", "group": "Scientific Notation"},
    {"category": "countSigFigs", "label": "Count Sig Figs", "group": "Significant Figures"},
    {"category": "roundSigFigs", "label": "Round to Sig Figs", "group": "Significant Figures"},
    {"category": "multiplySigFigs", "label": "Multiply w/ Sig Figs", "group": "Significant Figures"},
    {"category": "addSigFigs", "label": "Add w/ Sig Figs", "group": "Significant Figures"},
    {"category": "orderMagnitude", "label": "Order of Magnitude", "group": "Estimation"},
    {"category": "mixed", "label": "Mixed Practice", "group": "Challenge"},
]

_INSTRUCTIONS = {
    AnswerType.SCIENTIFIC: "Format: coefficient x 10^exponent (e.g., 3.2 x 10^4 or 3.2 x 10^-3)",
    AnswerType.STANDARD: "Enter the number in standard form",
    AnswerType.SIGFIGS: "Enter the count of significant figures",
    AnswerType.COMPARE: "Enter > (greater than), < (less than), or = (equal)",
    AnswerType.MAGNITUDE: "Enter just the exponent (e.g., 5 means 10^5, -3 means 10^-3)",
    AnswerType.NUMBER: "Enter your calculated answer with correct sig figs",
}

# --- Fixed content -----------------------------------------------------------------

# (description, order of magnitude, unit)
MAGNITUDE_SCENARIOS = [
    ("diameter of a human hair", -5, "meters"),
    ("height of Mount Everest", 4, "meters"),
    ("distance from Earth to Moon", 8, "meters"),
    ("width of a bacterium", -6, "meters"),
    ("mass of a car", 3, "kilograms"),
    ("mass of a paperclip", -3, "kilograms"),
    ("population of Earth", 10, "people"),
    ("seconds in a year", 7, "seconds"),
    ("speed of light", 8, "m/s"),
    ("diameter of Earth", 7, "meters"),
    ("thickness of a credit card", -3, "meters"),
    ("mass of an electron", -30, "kilograms"),
]

MAGNITUDE_TOLERANCE = 1
EQUALITY_EPSILON = 1e-7
ARITHMETIC_PLACES = 2


def _digit(r, lo: int = 0, hi: int = 9) -> str:
    return str(r.randint(lo, hi))


SIG_FIG_PATTERNS: List[Callable[[_rnd.Random], str]] = [
    lambda r: f"0.00{_digit(r, 1)}{_digit(r)}0",
    lambda r: f"{_digit(r, 1)}{_digit(r)}.{_digit(r)}0",
    lambda r: f"{_digit(r, 1)}000",
    lambda r: f"{_digit(r, 1)}.{_digit(r)}{_digit(r)}{_digit(r)}",
    lambda r: f"0.{_digit(r, 1)}{_digit(r)}",
    lambda r: f"{_digit(r, 10, 99)}.00",
    lambda r: f"0.000{_digit(r, 1)}{_digit(r)}",
    lambda r: f"{_digit(r, 1)}0{_digit(r, 1)}0",
    lambda r: f"{_digit(r, 1)}.0{_digit(r, 1)}0",
    lambda r: f"{_digit(r, 100, 999)}00",
]


# --- Random draws ------------------------------------------------------------------


def _draw(r, lo: float, hi: float, decimals: int = 0) -> Union[int, float]:
    """Uniform draw over the closed interval [lo, hi] at the given precision."""
    if decimals > 0:
        return round(r.uniform(lo, hi), decimals)
    return r.randint(int(lo), int(hi))


def _sci(coefficient: float, exponent: int) -> str:
    return f"{format_decimal(coefficient)} × 10^{exponent}"


def _problem(
    category: Category,
    question: str,
    answer_type: AnswerType,
    expected: Union[ScientificValue, int, float, str],
    instructions: Optional[str] = None,
    **extra,
) -> Problem:
    return Problem(
        category=category,
        question=question,
        answer_type=answer_type,
        expected=expected,
        instructions=instructions if instructions is not None else _INSTRUCTIONS.get(answer_type, ""),
        **extra,
    )


# --- Scientific arithmetic ---------------------------------------------------------


def multiply_scientific(c1: float, e1: int, c2: float, e2: int) -> ScientificValue:
    """Multiply coefficients, add exponents, then shift back into [1, 10)."""
    return normalize(exact(c1) * exact(c2), e1 + e2, ARITHMETIC_PLACES)


def divide_scientific(c1: float, e1: int, c2: float, e2: int) -> ScientificValue:
    return normalize(exact(c1) / exact(c2), e1 - e2, ARITHMETIC_PLACES)


def add_scientific(c1: float, c2: float, exponent: int) -> ScientificValue:
    return normalize(exact(c1) + exact(c2), exponent, ARITHMETIC_PLACES)


def compare_scientific(c1: float, e1: int, c2: float, e2: int) -> str:
    v1 = exact(c1) * exact(10) ** e1
    v2 = exact(c2) * exact(10) ** e2
    if abs(v1 - v2) < exact(EQUALITY_EPSILON):
        return "="
    return ">" if v1 > v2 else "<"


# --- Per-category synthesis --------------------------------------------------------


def _to_scientific(r) -> Problem:
    magnitude = _draw(r, -5, 8)
    base = _draw(r, 1, 9.99, 2)
    num = exact(base) * exact(10) ** magnitude
    return _problem(
        Category.TO_SCIENTIFIC,
        f"Convert to scientific notation: {format_standard(num)}",
        AnswerType.SCIENTIFIC,
        to_scientific_notation(num),
    )


def _from_scientific(r) -> Problem:
    coef = _draw(r, 1, 9.99, 2)
    exp = _draw(r, -5, 6)
    result = float(exact(coef) * exact(10) ** exp)
    return _problem(
        Category.FROM_SCIENTIFIC,
        f"Convert to standard notation: {_sci(coef, exp)}",
        AnswerType.STANDARD,
        result,
    )


def _count_sig_figs(r) -> Problem:
    numeral = r.choice(SIG_FIG_PATTERNS)(r)
    return _problem(
        Category.COUNT_SIG_FIGS,
        f"How many significant figures are in: {numeral}",
        AnswerType.SIGFIGS,
        count_significant_figures(numeral),
    )


def _multiply_scientific(r) -> Problem:
    c1, e1 = _draw(r, 1, 9, 1), _draw(r, -3, 4)
    c2, e2 = _draw(r, 1, 9, 1), _draw(r, -3, 4)
    return _problem(
        Category.MULTIPLY_SCIENTIFIC,
        f"Multiply: ({_sci(c1, e1)}) × ({_sci(c2, e2)})",
        AnswerType.SCIENTIFIC,
        multiply_scientific(c1, e1, c2, e2),
        hint="Multiply coefficients, add exponents, then adjust if needed",
    )


def _divide_scientific(r) -> Problem:
    c1, e1 = _draw(r, 2, 9, 1), _draw(r, -2, 5)
    c2, e2 = _draw(r, 1, 5, 1), _draw(r, -2, 3)
    return _problem(
        Category.DIVIDE_SCIENTIFIC,
        f"Divide: ({_sci(c1, e1)}) ÷ ({_sci(c2, e2)})",
        AnswerType.SCIENTIFIC,
        divide_scientific(c1, e1, c2, e2),
        hint="Divide coefficients, subtract exponents, then adjust if needed",
    )


def _round_sig_figs(r) -> Problem:
    target = _draw(r, 2, 4)
    precision = _draw(r, 1, 4)
    num = _draw(r, 10, 99999, precision)
    text = f"{num:.{precision}f}"
    return _problem(
        Category.ROUND_SIG_FIGS,
        f"Round {text} to {target} significant figures",
        AnswerType.ROUNDED,
        round_to_sig_figs(text, target),
        target_sig_figs=target,
        instructions=f"Round to exactly {target} significant figures",
    )


def _multiply_sig_figs(r) -> Problem:
    operands = []
    for _ in range(2):
        wanted = _draw(r, 2, 4)
        value = _draw(r, 1, 9) + _draw(r, 0, 99) / 100
        # written with (wanted - 1) decimals; "10.0" from 9.99 really has 3 figures
        text = f"{round_half_up(value, wanted - 1):.{wanted - 1}f}"
        operands.append((text, count_significant_figures(text)))

    (t1, s1), (t2, s2) = operands
    least = min(s1, s2)
    product = exact(t1) * exact(t2)
    return _problem(
        Category.MULTIPLY_SIG_FIGS,
        f"Multiply with correct sig figs: {t1} × {t2}",
        AnswerType.NUMBER,
        round_to_sig_figs(product, least),
        hint=f"{t1} has {s1} sig figs, {t2} has {s2} sig figs → answer needs {least}",
    )


def _add_sig_figs(r) -> Problem:
    d1, d2 = _draw(r, 1, 3), _draw(r, 1, 3)
    t1 = f"{_draw(r, 10, 99, d1):.{d1}f}"
    t2 = f"{_draw(r, 1, 20, d2):.{d2}f}"
    least = min(d1, d2)
    return _problem(
        Category.ADD_SIG_FIGS,
        f"Add with correct sig figs: {t1} + {t2}",
        AnswerType.NUMBER,
        round_half_up(exact(t1) + exact(t2), least),
        hint=f"{t1} has {d1} decimal places, {t2} has {d2} → answer needs {least}",
    )


def _compare_scientific(r) -> Problem:
    c1, e1 = _draw(r, 1, 9, 1), _draw(r, -3, 5)
    c2 = _draw(r, 1, 9, 1)
    e2 = e1 + _draw(r, -2, 2)
    return _problem(
        Category.COMPARE_SCIENTIFIC,
        f"Compare: {_sci(c1, e1)}  ___  {_sci(c2, e2)}",
        AnswerType.COMPARE,
        compare_scientific(c1, e1, c2, e2),
    )


def _order_magnitude(r) -> Problem:
    desc, answer, unit = r.choice(MAGNITUDE_SCENARIOS)
    return _problem(
        Category.ORDER_MAGNITUDE,
        f"Estimate the order of magnitude (power of 10) for the {desc} in {unit}",
        AnswerType.MAGNITUDE,
        answer,
        tolerance=MAGNITUDE_TOLERANCE,
    )


def _sci_notation_add(r) -> Problem:
    exp = _draw(r, 2, 6)
    c1 = _draw(r, 1, 5, 1)
    c2 = _draw(r, 1, 4, 1)
    return _problem(
        Category.SCI_NOTATION_ADD,
        f"Add: ({_sci(c1, exp)}) + ({_sci(c2, exp)})",
        AnswerType.SCIENTIFIC,
        add_scientific(c1, c2, exp),
        hint="When exponents are the same, add the coefficients",
    )


_GENERATORS: Dict[Category, Callable[..., Problem]] = {
    Category.TO_SCIENTIFIC: _to_scientific,
    Category.FROM_SCIENTIFIC: _from_scientific,
    Category.COUNT_SIG_FIGS: _count_sig_figs,
    Category.MULTIPLY_SCIENTIFIC: _multiply_scientific,
    Category.DIVIDE_SCIENTIFIC: _divide_scientific,
    Category.ROUND_SIG_FIGS: _round_sig_figs,
    Category.MULTIPLY_SIG_FIGS: _multiply_sig_figs,
    Category.ADD_SIG_FIGS: _add_sig_figs,
    Category.COMPARE_SCIENTIFIC: _compare_scientific,
    Category.ORDER_MAGNITUDE: _order_magnitude,
    Category.SCI_NOTATION_ADD: _sci_notation_add,
}


# --- Public API --------------------------------------------------------------------


def generate(category: Union[Category, str], rng: Optional[_rnd.Random] = None) -> Problem:
    """
    Build one practice problem for the category.
    "mixed" picks one of the concrete categories; the returned problem carries that pick.
    """
    r = rng or _rnd
    try:
        cat = Category(category)
    except ValueError:
        raise ValueError(f"unknown category: {category!r}") from None

    if cat is Category.MIXED:
        cat = r.choice(CONCRETE_CATEGORIES)

    problem = _GENERATORS[cat](r)
    logger.debug("generated %s problem: %s", cat.value, problem.question)
    return problem
