"""
Routes des journees : creation (avec generation des rappels), mise a jour (regeneration), lecture.
Routes = validation + delegation au service. Pas de logique metier ici.
"""
import logging
from fastapi import APIRouter, Depends, Request
from sqlmodel import Session
from typing import List
from uuid import UUID
from datetime import date

from app.core.database import get_session
from app.domain.entities import DayCreate, DayRead, DayUpdate
from app.domain.errors import SmokelessError
from app.domain.services.day_service import day_service
from app.api.routers._shared import limiter, to_http_exception, WRITE_LIMIT

logger = logging.getLogger(__name__)

router = APIRouter(tags=["days"])


@router.get("/days", response_model=List[DayRead])
async def list_days(session: Session = Depends(get_session)):
    """Recupere toutes les journees"""
    days = day_service.list_days(session)
    logger.info(f"{len(days)} journees recuperees")
    return days


@router.get("/days/{day_date}", response_model=DayRead)
async def get_day_by_date(day_date: date, session: Session = Depends(get_session)):
    """Recupere la journee d'une date (YYYY-MM-DD) ; 404 si elle n'est pas encore configuree"""
    try:
        return day_service.get_by_date(session, day_date)
    except SmokelessError as e:
        raise to_http_exception(e)


@router.post("/days", response_model=DayRead)
@limiter.limit(WRITE_LIMIT)
async def create_day(
    request: Request,
    day_data: DayCreate,
    session: Session = Depends(get_session)
):
    """Cree une journee et genere ses rappels"""
    try:
        return day_service.create(session, day_data)
    except SmokelessError as e:
        raise to_http_exception(e)


@router.put("/days/{day_id}", response_model=DayRead)
@limiter.limit(WRITE_LIMIT)
async def update_day(
    request: Request,
    day_id: UUID,
    day_updates: DayUpdate,
    session: Session = Depends(get_session)
):
    """Met a jour une journee et regenere tous ses rappels (les completions sont perdues)"""
    try:
        return day_service.update(session, day_id, day_updates)
    except SmokelessError as e:
        raise to_http_exception(e)
