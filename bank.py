# sigfig-lab/bank.py

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Iterable, List

from pydantic import BaseModel, ValidationError, field_validator, model_validator

from questions import QUIZ_QUESTIONS

logger = logging.getLogger("sigfig-lab.bank")

_BASE = Path(__file__).resolve().parent


def _data_dir() -> Path:
    # SIGFIG_QUIZ_DIR overrides the bundled data/quiz directory
    return Path(os.getenv("SIGFIG_QUIZ_DIR") or _BASE / "data" / "quiz")


class QuizQuestionModel(BaseModel):
    id: str
    topic: str
    question: str
    options: List[str]
    correct: int
    explanation: str = ""

    @field_validator("options")
    @classmethod
    def _at_least_two_options(cls, v: List[str]) -> List[str]:
        if len(v) < 2:
            raise ValueError("a quiz question needs at least two options")
        return v

    @model_validator(mode="after")
    def _correct_in_range(self) -> "QuizQuestionModel":
        if not 0 <= self.correct < len(self.options):
            raise ValueError(f"correct index {self.correct} out of range")
        return self


def _iter_jsonl(p: Path) -> Iterable[Dict[str, Any]]:
    with p.open("r", encoding="utf-8") as f:
        for idx, line in enumerate(f, 1):
            s = line.strip()
            if not s or s.startswith("#") or s.startswith("//"):
                continue
            try:
                yield json.loads(s)
            except json.JSONDecodeError:
                logger.warning("skipping malformed row %s:%d", p.name, idx)
                continue


def _iter_json(p: Path) -> Iterable[Dict[str, Any]]:
    with p.open("r", encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError:
            logger.warning("skipping unreadable file %s", p.name)
            data = []
    if isinstance(data, list):
        for obj in data:
            yield obj


def _validated(source: Iterable[Dict[str, Any]]) -> List[Dict[str, Any]]:
    out: List[Dict[str, Any]] = []
    for raw in source:
        try:
            out.append(QuizQuestionModel(**raw).model_dump())
        except (ValidationError, TypeError):
            logger.warning("skipping invalid quiz record %r", raw.get("id") if isinstance(raw, dict) else raw)
            continue
    return out


class QuizBank:
    _questions: List[Dict[str, Any]] = []

    @classmethod
    def load(cls) -> List[Dict[str, Any]]:
        if not cls._questions:
            cls.reload()
        return cls._questions

    @classmethod
    def reload(cls) -> int:
        questions: List[Dict[str, Any]] = []

        data_dir = _data_dir()
        if data_dir.exists():
            for p in sorted(data_dir.rglob("*")):
                if not p.is_file():
                    continue
                suf = p.suffix.lower()
                if suf == ".jsonl":
                    questions.extend(_validated(_iter_jsonl(p)))
                elif suf == ".json":
                    questions.extend(_validated(_iter_json(p)))

        # Fall back to the built-in quiz if nothing valid loaded
        source = str(data_dir)
        if not questions:
            questions = _validated(QUIZ_QUESTIONS)
            source = "built-in"

        cls._questions = questions
        logger.info("quiz bank loaded: %d questions from %s", len(questions), source)
        return len(cls._questions)


# Public API
def get_quiz_questions() -> List[Dict[str, Any]]:
    return QuizBank.load()


def get_quiz_question(qid: str) -> Dict[str, Any] | None:
    return next((q for q in get_quiz_questions() if q["id"] == qid), None)


def reload_bank() -> int:
    return QuizBank.reload()
