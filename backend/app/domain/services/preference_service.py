"""
Service des préférences utilisateur (langue, thème, couleur de fond, "appliquer à tous les jours").
Stockage clé/valeur ; les valeurs par défaut s'appliquent tant qu'aucune ligne n'existe.
"""
import logging
from sqlmodel import Session, select
from sqlalchemy.exc import SQLAlchemyError
from typing import Dict

from app.domain.entities import Preference, PreferenceRead, utc_now
from app.domain.errors import NotFoundError, PersistenceError, ValidationError

logger = logging.getLogger(__name__)

DEFAULT_PREFERENCES: Dict[str, str] = {
    "language": "de",
    "dark_mode": "system",
    "background_color": "white",
    "apply_to_all_days": "false",
}

ALLOWED_VALUES: Dict[str, tuple] = {
    "language": ("de", "en"),
    "dark_mode": ("true", "false", "system"),
    "background_color": ("white", "black", "gray"),
    "apply_to_all_days": ("true", "false"),
}


class PreferenceService:

    def get_all(self, session: Session) -> Dict[str, str]:
        preferences = dict(DEFAULT_PREFERENCES)
        for row in session.exec(select(Preference)).all():
            if row.key in preferences:
                preferences[row.key] = row.value
        return preferences

    def set(self, session: Session, key: str, value: str) -> PreferenceRead:
        if key not in ALLOWED_VALUES:
            raise NotFoundError(f"Préférence inconnue: {key}")

        normalized = value.strip().lower()
        if normalized not in ALLOWED_VALUES[key]:
            raise ValidationError(
                f"Valeur invalide pour {key}: {value!r} (attendu: {', '.join(ALLOWED_VALUES[key])})"
            )

        preference = session.get(Preference, key)
        if preference:
            preference.value = normalized
            preference.updated_at = utc_now()
        else:
            preference = Preference(key=key, value=normalized)
        session.add(preference)

        try:
            session.commit()
        except SQLAlchemyError as e:
            session.rollback()
            logger.error(f"Erreur lors de l'enregistrement de la preference {key}: {e}", exc_info=True)
            raise PersistenceError(f"Erreur lors de l'enregistrement de la préférence {key}") from e

        logger.info(f"Preference mise a jour: {key}={normalized}")
        return PreferenceRead(key=key, value=normalized)


preference_service = PreferenceService()
