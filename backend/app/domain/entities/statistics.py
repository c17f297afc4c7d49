"""
Schémas de statistiques (non persistés)
Agrégation cigarettes fumées / objectif sur une fenêtre glissante de dates.
"""
from typing import List, Optional
from datetime import date as date_type

from ._base import CamelModel


class DailyStats(CamelModel):
    """Bilan d'une date : rappels complétés vs objectif"""
    date: date_type
    completed: int = 0
    target: int = 0
    has_day: bool = False


class StatisticsRead(CamelModel):
    """Statistiques sur la fenêtre (réponse API)"""
    start_date: date_type
    end_date: date_type
    days: List[DailyStats]
    total_completed: int
    days_with_data: int
    average_per_day: float
    remaining: int
    best_day: Optional[DailyStats] = None
