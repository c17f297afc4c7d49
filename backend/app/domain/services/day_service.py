"""
Service des journées : création, mise à jour, lecture.
Toute création ou modification (réveil, coucher, objectif) remplace l'ensemble
des rappels de la journée dans la même transaction : suppression puis génération.
Les complétions existantes sont perdues, même pour une mise à jour partielle.
"""
import logging
from sqlmodel import Session, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from uuid import UUID
from datetime import date
from typing import List, Optional, Tuple

from app.core.settings import get_settings
from app.domain.entities import Day, DayCreate, DayUpdate, Reminder
from app.domain.errors import DuplicateDayError, NotFoundError, PersistenceError, ValidationError
from app.domain.services.day_locks import DayLockRegistry, day_locks
from app.domain.services.schedule_generator import (
    compute_reminder_minutes,
    format_clock,
    parse_clock,
)

logger = logging.getLogger(__name__)


class DayService:

    def __init__(self, locks: DayLockRegistry = day_locks, max_target: Optional[int] = None):
        self._locks = locks
        self.max_target = max_target or get_settings().MAX_TARGET_CIGARETTES

    # ============ VALIDATION ============

    def validate_parameters(self, wake_time: str, sleep_time: str, target_cigarettes: int) -> Tuple[str, str, int]:
        """
        Vérifie la fenêtre d'éveil et l'objectif, retourne les heures normalisées "HH:MM".

        - objectif entier entre 1 et max_target
        - coucher strictement après le réveil le même jour (pas de passage minuit)
        - plus d'une minute par rappel, sinon l'arrondi placerait le premier/dernier
          rappel sur le réveil/coucher
        """
        wake_minutes = parse_clock(wake_time)
        sleep_minutes = parse_clock(sleep_time)

        if isinstance(target_cigarettes, bool) or not isinstance(target_cigarettes, int):
            raise ValidationError("L'objectif de cigarettes doit être un entier")
        if target_cigarettes < 1:
            raise ValidationError("L'objectif de cigarettes doit être au moins 1")
        if target_cigarettes > self.max_target:
            raise ValidationError(f"L'objectif de cigarettes ne peut pas dépasser {self.max_target}")
        if sleep_minutes <= wake_minutes:
            raise ValidationError(
                f"L'heure de coucher ({sleep_time}) doit être après l'heure de réveil ({wake_time}) le même jour"
            )
        if sleep_minutes - wake_minutes <= target_cigarettes:
            raise ValidationError("Fenêtre d'éveil trop courte pour cet objectif")

        return format_clock(wake_minutes), format_clock(sleep_minutes), target_cigarettes

    # ============ ECRITURE ============

    def create(self, session: Session, day_data: DayCreate) -> Day:
        wake_time, sleep_time, target = self.validate_parameters(
            day_data.wake_time, day_data.sleep_time, day_data.target_cigarettes
        )

        with self._locks.hold(DayLockRegistry.date_key(day_data.date)):
            existing = session.exec(select(Day).where(Day.date == day_data.date)).first()
            if existing:
                logger.warning(f"Journee deja existante pour {day_data.date} (id={existing.id})")
                raise DuplicateDayError(f"Une journée existe déjà pour le {day_data.date.isoformat()}")

            day = Day(
                date=day_data.date,
                wake_time=wake_time,
                sleep_time=sleep_time,
                target_cigarettes=target,
            )
            session.add(day)
            self._regenerate(day)
            self._commit(session, f"creation de la journee {day_data.date}")

        session.refresh(day)
        logger.info(f"Journee creee: {day.date} ({day.wake_time}-{day.sleep_time}, {target} rappels)")
        return day

    def update(self, session: Session, day_id: UUID, day_updates: DayUpdate) -> Day:
        with self._locks.hold(DayLockRegistry.day_key(day_id)):
            day = self.get(session, day_id)

            changes = day_updates.model_dump(exclude_unset=True, exclude_none=True)
            wake_time, sleep_time, target = self.validate_parameters(
                changes.get("wake_time", day.wake_time),
                changes.get("sleep_time", day.sleep_time),
                changes.get("target_cigarettes", day.target_cigarettes),
            )

            day.wake_time = wake_time
            day.sleep_time = sleep_time
            day.target_cigarettes = target
            session.add(day)
            self._regenerate(day)
            self._commit(session, f"mise a jour de la journee {day_id}")

        session.refresh(day)
        logger.info(f"Journee mise a jour: {day.date} ({day.wake_time}-{day.sleep_time}, {target} rappels regeneres)")
        return day

    def _regenerate(self, day: Day) -> None:
        """Remplace tous les rappels de la journée (delete-orphan supprime les anciens au flush)."""
        minutes = compute_reminder_minutes(
            parse_clock(day.wake_time), parse_clock(day.sleep_time), day.target_cigarettes
        )
        day.reminders = [Reminder(day_id=day.id, time=format_clock(m)) for m in minutes]

    def _commit(self, session: Session, action: str) -> None:
        try:
            session.commit()
        except IntegrityError as e:
            session.rollback()
            logger.warning(f"Conflit d'unicite lors de la {action}: {e}")
            raise DuplicateDayError("Une journée existe déjà pour cette date") from e
        except SQLAlchemyError as e:
            session.rollback()
            logger.error(f"Erreur base de donnees lors de la {action}: {e}", exc_info=True)
            raise PersistenceError(f"Erreur lors de la {action}") from e

    # ============ LECTURE ============

    def get(self, session: Session, day_id: UUID) -> Day:
        day = session.get(Day, day_id)
        if not day:
            logger.warning(f"Journee introuvable: {day_id}")
            raise NotFoundError("Day not found")
        return day

    def get_by_date(self, session: Session, day_date: date) -> Day:
        day = session.exec(select(Day).where(Day.date == day_date)).first()
        if not day:
            logger.info(f"Aucune journee pour le {day_date}")
            raise NotFoundError("Day not found")
        return day

    def list_days(self, session: Session) -> List[Day]:
        return session.exec(select(Day).order_by(Day.date)).all()


day_service = DayService()
