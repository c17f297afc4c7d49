"""
Initialisation des entités du domaine
Résout les imports circulaires entre les modèles
"""

# Import des modèles dans l'ordre correct pour éviter les imports circulaires
from .day import Day, DayCreate, DayRead, DayUpdate
from .reminder import Reminder, ReminderRead
from .preference import Preference, PreferenceRead, PreferenceUpdate, PreferencesRead
from .statistics import DailyStats, StatisticsRead
from ._base import utc_now

__all__ = [
    "Day", "DayCreate", "DayRead", "DayUpdate",
    "Reminder", "ReminderRead",
    "Preference", "PreferenceRead", "PreferenceUpdate", "PreferencesRead",
    "DailyStats", "StatisticsRead",
    "utc_now",
]
