from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, HTTPException

from bank import get_quiz_question, get_quiz_questions
from quiz import answer_question, grade_quiz
from schemas.quiz import (
    QuizAnswerRequest,
    QuizAnswerResponse,
    QuizGradeRequest,
    QuizGradeResponse,
    QuizQuestionOut,
)

router = APIRouter(prefix="/quiz", tags=["quiz"])


@router.get("/questions", response_model=List[QuizQuestionOut])
def list_quiz_questions(topic: Optional[str] = None):
    qs = list(get_quiz_questions())
    if topic:
        qs = [q for q in qs if q.get("topic") == topic]
    # response_model strips "correct" and "explanation"
    return qs


@router.get("/questions/{qid}", response_model=QuizQuestionOut)
def get_quiz_question_detail(qid: str):
    q = get_quiz_question(qid)
    if not q:
        raise HTTPException(status_code=404, detail="question not found")
    return q


@router.post("/answer", response_model=QuizAnswerResponse)
def answer(req: QuizAnswerRequest):
    q = get_quiz_question(req.id)
    if not q:
        return {"ok": False, "correct": False, "feedback": "unknown question id"}
    return answer_question(q, req.selected)


@router.post("/grade", response_model=QuizGradeResponse)
def grade(req: QuizGradeRequest):
    questions_by_id = {q["id"]: q for q in get_quiz_questions()}
    return grade_quiz(questions_by_id, [(a.id, a.selected) for a in req.answers])
