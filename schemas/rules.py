# sigfig-lab/schemas/rules.py
from typing import List

from pydantic import BaseModel


class RuleItem(BaseModel):
    name: str
    steps: List[str]
    examples: List[str]


class RuleSectionOut(BaseModel):
    id: str
    title: str
    summary: str
    rules: List[RuleItem]


class RuleSectionSummary(BaseModel):
    id: str
    title: str
