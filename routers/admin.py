from __future__ import annotations

import logging
import os

from fastapi import APIRouter, Request

from bank import reload_bank

logger = logging.getLogger("sigfig-lab.admin")

router = APIRouter(prefix="/admin", tags=["admin"])


@router.post("/reload")
def reload_quiz(request: Request):
    """
    Re-read the knowledge-check quiz from disk (data/quiz or SIGFIG_QUIZ_DIR).
    Guarded by the x-admin-token header; failures come back as ok=False, never raised.
    """
    token = os.getenv("ADMIN_TOKEN") or ""
    if not token:
        return {"ok": False, "error": "Quiz reload disabled: ADMIN_TOKEN is not set."}
    if request.headers.get("x-admin-token") != token:
        logger.warning("quiz reload refused: bad or missing x-admin-token")
        return {"ok": False, "error": "unauthorized"}

    count = reload_bank()
    return {"ok": True, "count": count}
