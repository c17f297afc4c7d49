"""
Routers API pour SmokeLess.

Ce module regroupe tous les sous-routers et expose un router principal
a inclure dans l'application FastAPI.
"""
from fastapi import APIRouter

from app.api.routers.day_router import router as day_router
from app.api.routers.reminder_router import router as reminder_router
from app.api.routers.statistics_router import router as statistics_router
from app.api.routers.preference_router import router as preference_router
from app.api.routers._shared import limiter

router = APIRouter()

router.include_router(day_router)
router.include_router(reminder_router)
router.include_router(statistics_router)
router.include_router(preference_router)

__all__ = ["router", "limiter"]
