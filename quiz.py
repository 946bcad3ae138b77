# sigfig-lab/quiz.py

from __future__ import annotations

from typing import Any, Dict, List, Tuple

# Rating bands as a share of the quiz; 7/8 and 5/8 on the built-in eight questions
EXCELLENT_SHARE = 7 / 8
GOOD_SHARE = 5 / 8

RATING_MESSAGES = {
    "excellent": "Excellent! You have a solid understanding!",
    "good": "Good work! A bit more practice and you'll master it.",
    "keep-studying": "Keep studying the rules and try again!",
}


def answer_question(q: Dict[str, Any], selected: int) -> Dict[str, Any]:
    options = q.get("options") or []
    if not 0 <= selected < len(options):
        return {
            "ok": False,
            "correct": False,
            "correct_index": None,
            "explanation": None,
            "feedback": f"Choose an option between 0 and {len(options) - 1}.",
        }
    return {
        "ok": True,
        "correct": selected == q["correct"],
        "correct_index": q["correct"],
        "explanation": q.get("explanation") or "",
        "feedback": "",
    }


def rate(correct: int, total: int) -> Tuple[str, str]:
    share = correct / total if total else 0.0
    if share >= EXCELLENT_SHARE:
        rating = "excellent"
    elif share >= GOOD_SHARE:
        rating = "good"
    else:
        rating = "keep-studying"
    return rating, RATING_MESSAGES[rating]


def grade_quiz(
    questions_by_id: Dict[str, Dict[str, Any]], answers: List[Tuple[str, int]]
) -> Dict[str, Any]:
    """
    Mark a whole quiz run. Unknown ids are reported per item and still count towards the total,
    the same as an unanswered question.
    """
    results: List[Dict[str, Any]] = []
    correct_count = 0

    for qid, selected in answers:
        q = questions_by_id.get(qid)
        if not q:
            res = {
                "ok": False,
                "correct": False,
                "correct_index": None,
                "explanation": None,
                "feedback": "unknown question id",
            }
        else:
            res = answer_question(q, selected)
        results.append({"id": qid, "response": res})
        if res.get("correct"):
            correct_count += 1

    total = len(results)
    rating, message = rate(correct_count, total)
    return {
        "ok": True,
        "total": total,
        "correct": correct_count,
        "rating": rating,
        "message": message,
        "results": results,
    }
