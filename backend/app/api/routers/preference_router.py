"""
Routes des preferences utilisateur (langue, theme, couleur de fond...).
"""
from fastapi import APIRouter, Depends
from sqlmodel import Session

from app.core.database import get_session
from app.domain.entities import PreferenceRead, PreferenceUpdate, PreferencesRead
from app.domain.errors import SmokelessError
from app.domain.services.preference_service import preference_service
from app.api.routers._shared import to_http_exception

router = APIRouter(tags=["preferences"])


@router.get("/preferences", response_model=PreferencesRead)
async def get_preferences(session: Session = Depends(get_session)):
    """Recupere toutes les preferences (valeurs par defaut incluses)"""
    return preference_service.get_all(session)


@router.put("/preferences/{key}", response_model=PreferenceRead)
async def update_preference(
    key: str,
    preference: PreferenceUpdate,
    session: Session = Depends(get_session)
):
    """Modifie une preference"""
    try:
        return preference_service.set(session, key, preference.value)
    except SmokelessError as e:
        raise to_http_exception(e)
