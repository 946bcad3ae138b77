# sigfig-lab/routers/health.py
from fastapi import APIRouter

from bank import get_quiz_questions
from problems import CONCRETE_CATEGORIES
from rules import RULE_SECTIONS

router = APIRouter(prefix="/health", tags=["health"])


@router.get("/bank")
def health_bank():
    n = len(get_quiz_questions())
    return {
        "ok": n > 0,
        "quiz_questions": n,
        "categories": len(CONCRETE_CATEGORIES),
        "rule_sections": len(RULE_SECTIONS),
    }
