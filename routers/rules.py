from __future__ import annotations

from typing import List

from fastapi import APIRouter, HTTPException

from rules import RULE_SECTIONS
from schemas.rules import RuleSectionOut, RuleSectionSummary

router = APIRouter(prefix="/rules", tags=["rules"])


@router.get("", response_model=List[RuleSectionSummary])
def list_sections():
    return list(RULE_SECTIONS.values())


@router.get("/{section}", response_model=RuleSectionOut)
def get_section(section: str):
    s = RULE_SECTIONS.get(section)
    if not s:
        raise HTTPException(status_code=404, detail="rule section not found")
    return s
