import logging
import os

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from routers.admin import router as admin_router

# Routers
from routers.health import router as health_router
from routers.practice import router as practice_router
from routers.quiz import router as quiz_router
from routers.rules import router as rules_router

logger = logging.getLogger("sigfig-lab")
logging.basicConfig(level=os.getenv("LOG_LEVEL", "INFO").upper())

_DEFAULT_ORIGINS = "http://localhost:3000,http://127.0.0.1:3000,http://localhost:5173"
ALLOWED_ORIGINS = [
    o.strip() for o in os.getenv("SIGFIG_ALLOWED_ORIGINS", _DEFAULT_ORIGINS).split(",") if o.strip()
]

app = FastAPI(title="SigFig Lab – Scientific Notation & Significant Figures API")

# Allow calls from the tutor front-end dev servers (override via SIGFIG_ALLOWED_ORIGINS)
app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*", "x-admin-token"],
)


@app.get("/")
def health_root():
    return {"ok": True}


# Register routers
app.include_router(practice_router)  # /practice/categories, /practice/problem, /practice/check
app.include_router(quiz_router)  # /quiz/questions, /quiz/answer, /quiz/grade
app.include_router(rules_router)  # /rules, /rules/{section}
app.include_router(admin_router)  # /admin/reload
app.include_router(health_router)  # /health/bank
