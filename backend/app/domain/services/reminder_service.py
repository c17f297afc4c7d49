"""
Service des rappels : lecture, complétion, suppression.
La complétion et la suppression prennent le verrou de la journée propriétaire
pour ne jamais s'entrelacer avec une régénération.
"""
import logging
from sqlmodel import Session, select
from sqlalchemy.exc import SQLAlchemyError
from uuid import UUID
from typing import List

from app.domain.entities import Day, Reminder, utc_now
from app.domain.errors import NotFoundError, PersistenceError
from app.domain.services.day_locks import DayLockRegistry, day_locks

logger = logging.getLogger(__name__)


class ReminderService:

    def __init__(self, locks: DayLockRegistry = day_locks):
        self._locks = locks

    def list_for_day(self, session: Session, day_id: UUID) -> List[Reminder]:
        """Rappels d'une journée, par heure croissante."""
        if not session.get(Day, day_id):
            logger.warning(f"Journee introuvable: {day_id}")
            raise NotFoundError("Day not found")

        return session.exec(
            select(Reminder)
            .where(Reminder.day_id == day_id)
            .order_by(Reminder.time, Reminder.created_at)
        ).all()

    def get(self, session: Session, reminder_id: UUID) -> Reminder:
        reminder = session.get(Reminder, reminder_id)
        if not reminder:
            logger.warning(f"Rappel introuvable: {reminder_id}")
            raise NotFoundError("Reminder not found")
        return reminder

    def complete(self, session: Session, reminder_id: UUID) -> Reminder:
        """
        Marque un rappel comme fait.
        Idempotent : un rappel déjà complété est retourné tel quel, completed_at
        garde l'heure de la première complétion.
        """
        reminder = self.get(session, reminder_id)

        with self._locks.hold(DayLockRegistry.day_key(reminder.day_id)):
            # Relire sous verrou : une régénération a pu supprimer le rappel entre-temps
            reminder = session.get(Reminder, reminder_id, populate_existing=True)
            if not reminder:
                logger.warning(f"Rappel supprime par une regeneration: {reminder_id}")
                raise NotFoundError("Reminder not found")

            if reminder.completed:
                logger.info(f"Rappel deja complete: {reminder_id}")
                return reminder

            reminder.completed = True
            reminder.completed_at = utc_now()
            session.add(reminder)
            self._commit(session, f"completion du rappel {reminder_id}")

        session.refresh(reminder)
        logger.info(f"Rappel complete: {reminder_id} ({reminder.time})")
        return reminder

    def delete(self, session: Session, reminder_id: UUID) -> dict:
        reminder = self.get(session, reminder_id)

        with self._locks.hold(DayLockRegistry.day_key(reminder.day_id)):
            reminder = session.get(Reminder, reminder_id, populate_existing=True)
            if not reminder:
                raise NotFoundError("Reminder not found")

            session.delete(reminder)
            self._commit(session, f"suppression du rappel {reminder_id}")

        logger.info(f"Rappel supprime: {reminder_id}")
        return {"success": True}

    def _commit(self, session: Session, action: str) -> None:
        try:
            session.commit()
        except SQLAlchemyError as e:
            session.rollback()
            logger.error(f"Erreur base de donnees lors de la {action}: {e}", exc_info=True)
            raise PersistenceError(f"Erreur lors de la {action}") from e


reminder_service = ReminderService()
