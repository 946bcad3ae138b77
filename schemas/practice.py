# sigfig-lab/schemas/practice.py
from __future__ import annotations

from typing import Optional

from pydantic import BaseModel

from checking import ScoreCounters
from problems import Problem

# ---------- Categories ----------


class CategoryOut(BaseModel):
    category: str
    label: str
    group: str


# ---------- Check ----------


class CheckRequest(BaseModel):
    problem: Problem
    answer: str
    # Running counters owned by the client; echoed back updated
    score: ScoreCounters = ScoreCounters()


class CheckResponse(BaseModel):
    ok: bool
    correct: bool
    feedback: str
    expected: Optional[str] = None
    hint: Optional[str] = None
    score: ScoreCounters
