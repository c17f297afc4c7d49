"""
Service de statistiques : cigarettes fumées (rappels complétés) vs objectif
sur une fenêtre glissante de dates. Lecture seule.
"""
import logging
from sqlmodel import Session, select, col
from sqlalchemy import func
from datetime import date, timedelta
from typing import Dict, List, Optional
from uuid import UUID

from app.core.settings import get_settings
from app.domain.entities import Day, Reminder, DailyStats, StatisticsRead
from app.domain.errors import ValidationError

logger = logging.getLogger(__name__)

# Au-delà, la vue hebdomadaire/mensuelle du client n'a plus de sens
MAX_WINDOW_DAYS = 31


class StatisticsService:

    def __init__(self, default_window: Optional[int] = None):
        self.default_window = default_window or get_settings().STATISTICS_WINDOW_DAYS

    def compute(
        self,
        session: Session,
        end_date: Optional[date] = None,
        window_days: Optional[int] = None,
    ) -> StatisticsRead:
        end_date = end_date or date.today()
        if window_days is None:
            window_days = self.default_window
        if window_days < 1 or window_days > MAX_WINDOW_DAYS:
            raise ValidationError(f"La fenêtre doit être comprise entre 1 et {MAX_WINDOW_DAYS} jours")

        start_date = end_date - timedelta(days=window_days - 1)

        days_by_date: Dict[date, Day] = {
            day.date: day
            for day in session.exec(
                select(Day).where(Day.date >= start_date, Day.date <= end_date)
            ).all()
        }
        completed_by_day = self._completed_counts(session, [d.id for d in days_by_date.values()])

        daily: List[DailyStats] = []
        best_day: Optional[DailyStats] = None
        for offset in range(window_days):
            current = start_date + timedelta(days=offset)
            day = days_by_date.get(current)
            if day is None:
                daily.append(DailyStats(date=current))
                continue

            stats = DailyStats(
                date=current,
                completed=completed_by_day.get(day.id, 0),
                target=day.target_cigarettes,
                has_day=True,
            )
            daily.append(stats)
            # Meilleur jour = le moins de cigarettes, le plus ancien en cas d'égalité
            if best_day is None or stats.completed < best_day.completed:
                best_day = stats

        tracked = [s for s in daily if s.has_day]
        total = sum(s.completed for s in tracked)

        logger.info(f"Statistiques {start_date} -> {end_date}: {total} cigarettes sur {len(tracked)} jours suivis")
        return StatisticsRead(
            start_date=start_date,
            end_date=end_date,
            days=daily,
            total_completed=total,
            days_with_data=len(tracked),
            average_per_day=round(total / len(tracked), 2) if tracked else 0.0,
            remaining=sum(max(s.target - s.completed, 0) for s in tracked),
            best_day=best_day,
        )

    def _completed_counts(self, session: Session, day_ids: List[UUID]) -> Dict[UUID, int]:
        if not day_ids:
            return {}
        rows = session.exec(
            select(Reminder.day_id, func.count(Reminder.id))
            .where(col(Reminder.day_id).in_(day_ids), Reminder.completed == True)  # noqa: E712
            .group_by(Reminder.day_id)
        ).all()
        return {day_id: count for day_id, count in rows}


statistics_service = StatisticsService()
