"""
Routes de statistiques : bilan sur une fenetre glissante de dates.
"""
from fastapi import APIRouter, Depends, Query
from sqlmodel import Session
from typing import Optional
from datetime import date

from app.core.database import get_session
from app.domain.entities import StatisticsRead
from app.domain.errors import SmokelessError
from app.domain.services.statistics_service import statistics_service
from app.api.routers._shared import to_http_exception

router = APIRouter(tags=["statistics"])


@router.get("/statistics", response_model=StatisticsRead)
async def get_statistics(
    days: Optional[int] = Query(None, description="Taille de la fenetre en jours (defaut: 7)"),
    end_date: Optional[date] = Query(None, description="Dernier jour de la fenetre (defaut: aujourd'hui)"),
    session: Session = Depends(get_session)
):
    """Cigarettes fumees vs objectif pour chaque date de la fenetre"""
    try:
        return statistics_service.compute(session, end_date=end_date, window_days=days)
    except SmokelessError as e:
        raise to_http_exception(e)
