import pytest

from checking import ScoreCounters, Verdict, apply_verdict, check, expected_display
from notation import ScientificValue
from problems import AnswerType, Category, Problem


def _problem(answer_type, expected, category=Category.TO_SCIENTIFIC, **extra):
    return Problem(
        category=category, question="q", answer_type=answer_type, expected=expected, **extra
    )


SCI = _problem(AnswerType.SCIENTIFIC, ScientificValue(coefficient=3.2, exponent=4))


@pytest.mark.parametrize(
    "answer",
    ["3.2 x 10^4", "3.2×10^4", "3.2 X 10^4", "3.2*10^4", "3.2 x 10 ^ 4", "3.2 x 10^+4", "3.24 x 10^4"],
)
def test_scientific_correct(answer):
    v = check(SCI, answer)
    assert v.ok and v.correct


@pytest.mark.parametrize("answer", ["32 x 10^3", "3.2 x 10^5", "3.3 x 10^4", "0.32 x 10^5"])
def test_scientific_incorrect(answer):
    v = check(SCI, answer)
    assert v.ok and not v.correct
    assert v.expected == "3.2 × 10^4"


@pytest.mark.parametrize("answer", ["3.2e4", "32000", "3.2 x 10^", "three point two"])
def test_scientific_malformed_is_incorrect(answer):
    v = check(SCI, answer)
    assert v.ok and not v.correct
    assert "10^" in v.feedback


def test_scientific_negative_exponent():
    p = _problem(AnswerType.SCIENTIFIC, ScientificValue(coefficient=3.2, exponent=-3))
    assert check(p, "3.2 x 10^-3").correct
    assert not check(p, "3.2 x 10^3").correct


def test_standard_form():
    p = _problem(AnswerType.STANDARD, 32000.0, category=Category.FROM_SCIENTIFIC)
    assert check(p, "32000").correct
    assert check(p, "32,000").correct
    assert check(p, "32020").correct
    assert not check(p, "32100").correct
    assert not check(p, "abc").correct


def test_sigfigs_exact_match():
    p = _problem(AnswerType.SIGFIGS, 3, category=Category.COUNT_SIG_FIGS)
    assert check(p, "3").correct
    assert check(p, " 3 ").correct
    assert not check(p, "4").correct
    assert not check(p, "3.5").correct
    assert not check(p, "three").correct


def test_number_relative_tolerance():
    p = _problem(AnswerType.NUMBER, 8.6, category=Category.MULTIPLY_SIG_FIGS, hint="2 sig figs")
    assert check(p, "8.6").correct
    assert check(p, "8.65").correct
    v = check(p, "8.7")
    assert not v.correct
    assert v.hint == "2 sig figs"


def test_number_absolute_floor_near_zero():
    p = _problem(AnswerType.ROUNDED, 0.004, category=Category.ROUND_SIG_FIGS)
    assert check(p, "0.01").correct
    assert not check(p, "0.02").correct


def test_rounded_accepts_grouping():
    p = _problem(AnswerType.ROUNDED, 12300.0, category=Category.ROUND_SIG_FIGS)
    assert check(p, "12,300").correct
    assert not check(p, "12,500").correct


def test_compare_symbols_and_synonyms():
    p = _problem(AnswerType.COMPARE, "<", category=Category.COMPARE_SCIENTIFIC)
    assert check(p, "less").correct
    assert check(p, "LESS").correct
    assert check(p, "<").correct
    assert not check(p, ">").correct
    assert not check(p, "greater").correct
    assert not check(p, "maybe").correct


def test_magnitude_within_tolerance():
    p = _problem(AnswerType.MAGNITUDE, -5, category=Category.ORDER_MAGNITUDE, tolerance=1)
    assert check(p, "-5").correct
    assert check(p, "-4").correct
    assert check(p, "-6").correct
    assert not check(p, "-3").correct
    assert not check(p, "ten").correct


@pytest.mark.parametrize("answer", ["", "   ", "\t\n", None])
def test_empty_answer_is_rejected(answer):
    v = check(SCI, answer)
    assert v.ok is False and v.correct is False
    assert v.feedback == "Answer required."


def test_empty_answer_never_changes_score():
    score = ScoreCounters(correct=2, total=5, streak=1)
    assert apply_verdict(score, check(SCI, "  ")) == score


def test_apply_verdict_counts_and_streak():
    score = ScoreCounters()
    score = apply_verdict(score, check(SCI, "3.2 x 10^4"))
    score = apply_verdict(score, check(SCI, "3.2 x 10^4"))
    assert score == ScoreCounters(correct=2, total=2, streak=2)

    score = apply_verdict(score, check(SCI, "1 x 10^1"))
    assert score == ScoreCounters(correct=2, total=3, streak=0)


def test_apply_verdict_returns_new_counters():
    score = ScoreCounters()
    new = apply_verdict(score, Verdict(ok=True, correct=True))
    assert score.total == 0 and new.total == 1


def test_expected_display():
    assert expected_display(SCI) == "3.2 × 10^4"
    assert expected_display(_problem(AnswerType.STANDARD, 4.56e-05)) == "0.0000456"
    assert expected_display(_problem(AnswerType.STANDARD, 32000.0)) == "32000"
    assert expected_display(_problem(AnswerType.COMPARE, "=")) == "="
    assert expected_display(_problem(AnswerType.MAGNITUDE, -5, tolerance=1)) == "-5"
    assert expected_display(_problem(AnswerType.NUMBER, 8.6)) == "8.6"


@pytest.mark.parametrize(
    "problem, answer",
    [
        (_problem(AnswerType.SIGFIGS, 3, category=Category.COUNT_SIG_FIGS), "9" * 5000),
        (_problem(AnswerType.MAGNITUDE, 8, category=Category.ORDER_MAGNITUDE, tolerance=1), "1" * 5000),
        (SCI, "3.2 x 10^" + "9" * 5000),
        (_problem(AnswerType.NUMBER, 8.6, category=Category.MULTIPLY_SIG_FIGS), "8.6" + "0" * 200),
    ],
)
def test_overlong_answer_is_incorrect(problem, answer):
    v = check(problem, answer)
    assert v.ok is True and v.correct is False
    assert "too long" in v.feedback.lower()
    assert v.expected
