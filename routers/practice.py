from __future__ import annotations

import logging
from typing import List

from fastapi import APIRouter, Query

from checking import apply_verdict, check
from problems import CATEGORY_CATALOGUE, Category, Problem, generate
from schemas.practice import CategoryOut, CheckRequest, CheckResponse

logger = logging.getLogger("sigfig-lab.practice")

router = APIRouter(prefix="/practice", tags=["practice"])


@router.get("/categories", response_model=List[CategoryOut])
def list_categories():
    return CATEGORY_CATALOGUE


@router.get("/problem", response_model=Problem)
def new_problem(category: Category = Query(default=Category.TO_SCIENTIFIC)):
    return generate(category)


@router.post("/check", response_model=CheckResponse)
def check_answer(req: CheckRequest):
    verdict = check(req.problem, req.answer)
    score = apply_verdict(req.score, verdict)
    if verdict.ok:
        logger.info(
            "checked %s answer: correct=%s score=%d/%d",
            req.problem.category.value,
            verdict.correct,
            score.correct,
            score.total,
        )
    return {**verdict.model_dump(), "score": score}
