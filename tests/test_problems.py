import random
import re

import pytest
from pydantic import ValidationError

from notation import ScientificValue, count_significant_figures, exact, round_to_sig_figs
from problems import (
    CATEGORY_CATALOGUE,
    CONCRETE_CATEGORIES,
    AnswerType,
    Category,
    Problem,
    add_scientific,
    compare_scientific,
    divide_scientific,
    generate,
    multiply_scientific,
)

EXPECTED_ANSWER_TYPES = {
    Category.TO_SCIENTIFIC: AnswerType.SCIENTIFIC,
    Category.FROM_SCIENTIFIC: AnswerType.STANDARD,
    Category.COUNT_SIG_FIGS: AnswerType.SIGFIGS,
    Category.MULTIPLY_SCIENTIFIC: AnswerType.SCIENTIFIC,
    Category.DIVIDE_SCIENTIFIC: AnswerType.SCIENTIFIC,
    Category.ROUND_SIG_FIGS: AnswerType.ROUNDED,
    Category.MULTIPLY_SIG_FIGS: AnswerType.NUMBER,
    Category.ADD_SIG_FIGS: AnswerType.NUMBER,
    Category.COMPARE_SCIENTIFIC: AnswerType.COMPARE,
    Category.ORDER_MAGNITUDE: AnswerType.MAGNITUDE,
    Category.SCI_NOTATION_ADD: AnswerType.SCIENTIFIC,
}


def _many(category, n=300, seed=42):
    rng = random.Random(seed)
    return [generate(category, rng=rng) for _ in range(n)]


@pytest.mark.parametrize("category", CONCRETE_CATEGORIES)
def test_generate_each_category(category):
    for p in _many(category, n=50):
        assert p.category == category
        assert p.answer_type == EXPECTED_ANSWER_TYPES[category]
        assert p.question
        assert p.instructions


def test_generate_accepts_wire_tag():
    p = generate("countSigFigs", rng=random.Random(1))
    assert p.category == Category.COUNT_SIG_FIGS


def test_generate_unknown_category_raises():
    with pytest.raises(ValueError):
        generate("longDivision")


def test_mixed_never_returns_mixed():
    seen = set()
    for p in _many(Category.MIXED, n=600):
        assert p.category != Category.MIXED
        assert p.category in CONCRETE_CATEGORIES
        seen.add(p.category)
    # uniform over eleven categories; 600 draws hit all of them
    assert seen == set(CONCRETE_CATEGORIES)


@pytest.mark.parametrize(
    "category",
    [Category.MULTIPLY_SCIENTIFIC, Category.DIVIDE_SCIENTIFIC, Category.SCI_NOTATION_ADD],
)
def test_scientific_arithmetic_answers_are_normalized(category):
    for p in _many(category):
        assert isinstance(p.expected, ScientificValue)
        assert 1 <= abs(p.expected.coefficient) < 10
        assert round(p.expected.coefficient, 2) == p.expected.coefficient
        assert p.hint


def test_to_scientific_answer_matches_question():
    for p in _many(Category.TO_SCIENTIFIC, n=100):
        shown = float(p.question.rsplit(":", 1)[1])
        back = p.expected.coefficient * 10.0**p.expected.exponent
        assert abs(back - shown) / shown < 1e-4


def test_to_scientific_question_shows_drawn_precision():
    # a two-decimal coefficient times a power of ten never prints float residue
    for p in _many(Category.TO_SCIENTIFIC, n=500, seed=3):
        shown = p.question.rsplit(":", 1)[1].strip()
        assert count_significant_figures(shown) <= 3, shown
        assert re.fullmatch(r"\d+(\.\d+)?", shown)


def test_from_scientific_answer_is_exact_product():
    for p in _many(Category.FROM_SCIENTIFIC, n=100):
        m = re.search(r"([\d.]+) × 10\^(-?\d+)", p.question)
        coef, exp = m.group(1), int(m.group(2))
        assert p.expected == float(exact(coef) * exact(10) ** exp)
        assert -5 <= exp <= 6


def test_count_sig_figs_answer_matches_numeral():
    for p in _many(Category.COUNT_SIG_FIGS, n=100):
        numeral = p.question.rsplit(":", 1)[1].strip()
        assert p.expected == count_significant_figures(numeral)
        assert 1 <= p.expected <= 4


def test_round_sig_figs_problem():
    for p in _many(Category.ROUND_SIG_FIGS, n=100):
        m = re.match(r"Round ([\d.]+) to (\d) significant figures", p.question)
        text, target = m.group(1), int(m.group(2))
        assert p.target_sig_figs == target and 2 <= target <= 4
        assert p.expected == round_to_sig_figs(text, target)
        assert str(target) in p.instructions


def test_multiply_sig_figs_uses_fewest_sig_figs():
    for p in _many(Category.MULTIPLY_SIG_FIGS, n=100):
        t1, t2 = p.question.rsplit(":", 1)[1].strip().split(" × ")
        least = min(count_significant_figures(t1), count_significant_figures(t2))
        assert p.expected == round_to_sig_figs(exact(t1) * exact(t2), least)
        assert f"answer needs {least}" in p.hint


class _ScriptedRandom(random.Random):
    """Feeds fixed integer draws in order."""

    def __init__(self, ints):
        super().__init__(0)
        self._ints = iter(ints)

    def randint(self, a, b):
        return next(self._ints)


def test_multiply_sig_figs_counts_figures_as_written():
    # 9.99 wanted at 2 figures is written "10.0", which carries 3
    rng = _ScriptedRandom([2, 9, 99, 4, 2, 50])
    p = generate(Category.MULTIPLY_SIG_FIGS, rng=rng)
    assert p.question.endswith("10.0 × 2.500")
    assert p.hint == "10.0 has 3 sig figs, 2.500 has 4 sig figs → answer needs 3"
    assert p.expected == 25.0


def test_add_sig_figs_uses_fewest_decimal_places():
    for p in _many(Category.ADD_SIG_FIGS, n=100):
        t1, t2 = p.question.rsplit(":", 1)[1].strip().split(" + ")
        least = min(len(t1.split(".")[1]), len(t2.split(".")[1]))
        assert round(p.expected, least) == p.expected
        assert abs(p.expected - (float(t1) + float(t2))) <= 0.5 * 10**-least + 1e-9
        assert f"answer needs {least}" in p.hint


def test_order_magnitude_problem():
    for p in _many(Category.ORDER_MAGNITUDE, n=50):
        assert isinstance(p.expected, int)
        assert p.tolerance == 1


def test_compare_problem_answer_is_a_symbol():
    for p in _many(Category.COMPARE_SCIENTIFIC, n=100):
        assert p.expected in (">", "<", "=")


def test_multiply_scientific_carries_into_exponent():
    v = multiply_scientific(2.5, 3, 4.0, 2)
    assert v.coefficient == 1.0 and v.exponent == 6


def test_multiply_scientific_no_float_noise():
    # 2.3 * 3.1 is 7.129999... in binary floats
    v = multiply_scientific(2.3, 1, 3.1, 1)
    assert v.coefficient == 7.13 and v.exponent == 2


def test_divide_scientific_borrows_from_exponent():
    v = divide_scientific(2.0, 5, 4.0, 2)
    assert v.coefficient == 5.0 and v.exponent == 2


def test_divide_scientific_rounds_to_two_places():
    v = divide_scientific(2.0, 0, 3.0, 0)
    assert v.coefficient == 6.67 and v.exponent == -1


def test_add_scientific_normalizes_overflow():
    assert add_scientific(5.0, 4.0, 3) == ScientificValue(coefficient=9.0, exponent=3)
    assert add_scientific(6.5, 4.5, 2) == ScientificValue(coefficient=1.1, exponent=3)


def test_compare_scientific():
    assert compare_scientific(2.5, 4, 2.5, 4) == "="
    assert compare_scientific(3.0, 2, 9.0, 1) == ">"
    assert compare_scientific(9.9, 1, 1.0, 2) == "<"


def test_problem_round_trips_through_json():
    rng = random.Random(3)
    for category in CONCRETE_CATEGORIES:
        p = generate(category, rng=rng)
        assert Problem.model_validate_json(p.model_dump_json()) == p


def test_problem_rejects_mismatched_expected():
    with pytest.raises(ValidationError):
        Problem(category="addSigFigs", question="q", answer_type="number", expected="<")
    with pytest.raises(ValidationError):
        Problem(category="toScientific", question="q", answer_type="scientific", expected=3.2)


def test_catalogue_lists_every_category_once():
    tags = [c["category"] for c in CATEGORY_CATALOGUE]
    assert sorted(tags) == sorted(c.value for c in Category)
