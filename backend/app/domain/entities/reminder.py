"""
Entité Reminder - Domain Layer
Un rappel planifié dans la fenêtre d'éveil d'une journée.
Pending -> Completed, jamais l'inverse ; détruit à chaque régénération de sa journée.
"""
from sqlmodel import SQLModel, Field, Relationship
from typing import Optional, TYPE_CHECKING
from datetime import datetime
from uuid import UUID, uuid4

from ._base import CamelModel, timestamp_type, utc_now

if TYPE_CHECKING:
    from .day import Day


class Reminder(SQLModel, table=True):
    """Entité Reminder complète pour la base de données"""
    id: Optional[UUID] = Field(default_factory=uuid4, primary_key=True)
    day_id: UUID = Field(foreign_key="day.id", index=True, ondelete="CASCADE")
    time: str = Field(max_length=5)  # HH:MM

    # Statut
    completed: bool = Field(default=False)
    completed_at: Optional[datetime] = Field(default=None, sa_type=timestamp_type())

    # Métadonnées
    created_at: datetime = Field(default_factory=utc_now, sa_type=timestamp_type())

    # Relations
    day: Optional["Day"] = Relationship(back_populates="reminders")


class ReminderRead(CamelModel):
    """Schéma pour lire un rappel (réponse API)"""
    id: UUID
    day_id: UUID
    time: str
    completed: bool
    completed_at: Optional[datetime]
    created_at: datetime
