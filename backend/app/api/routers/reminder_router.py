"""
Routes des rappels : liste par journee, completion, suppression.
Routes = validation + delegation au service. Pas de logique metier ici.
"""
import logging
from fastapi import APIRouter, Depends, Request
from sqlmodel import Session
from typing import List
from uuid import UUID

from app.core.database import get_session
from app.domain.entities import ReminderRead
from app.domain.errors import SmokelessError
from app.domain.services.reminder_service import reminder_service
from app.api.routers._shared import limiter, to_http_exception, WRITE_LIMIT

logger = logging.getLogger(__name__)

router = APIRouter(tags=["reminders"])


@router.get("/reminders/day/{day_id}", response_model=List[ReminderRead])
async def get_reminders_for_day(day_id: UUID, session: Session = Depends(get_session)):
    """Recupere les rappels d'une journee, par heure croissante"""
    try:
        return reminder_service.list_for_day(session, day_id)
    except SmokelessError as e:
        raise to_http_exception(e)


@router.put("/reminders/{reminder_id}/complete", response_model=ReminderRead)
@limiter.limit(WRITE_LIMIT)
async def complete_reminder(
    request: Request,
    reminder_id: UUID,
    session: Session = Depends(get_session)
):
    """Marque un rappel comme fait (sans effet s'il l'est deja)"""
    try:
        return reminder_service.complete(session, reminder_id)
    except SmokelessError as e:
        raise to_http_exception(e)


@router.delete("/reminders/{reminder_id}")
async def delete_reminder(reminder_id: UUID, session: Session = Depends(get_session)):
    """Supprime un rappel"""
    try:
        return reminder_service.delete(session, reminder_id)
    except SmokelessError as e:
        raise to_http_exception(e)
