# sigfig-lab/schemas/quiz.py
from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel


class QuizQuestionOut(BaseModel):
    id: str
    topic: str
    question: str
    options: List[str]


# ---------- Answer single ----------


class QuizAnswerRequest(BaseModel):
    id: str
    selected: int


class QuizAnswerResponse(BaseModel):
    ok: bool
    correct: bool
    feedback: str
    correct_index: Optional[int] = None
    explanation: Optional[str] = None


# ---------- Grade run ----------


class QuizGradeItem(BaseModel):
    id: str
    response: QuizAnswerResponse


class QuizGradeRequest(BaseModel):
    answers: List[QuizAnswerRequest]


class QuizGradeResponse(BaseModel):
    ok: bool
    total: int
    correct: int
    rating: str
    message: str
    results: List[QuizGradeItem]
