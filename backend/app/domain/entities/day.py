"""
Entité Day - Domain Layer
Configuration d'une journée : fenêtre d'éveil (réveil/coucher) et objectif de cigarettes.
Une seule journée par date.
"""
from sqlmodel import SQLModel, Field, Relationship, UniqueConstraint
from typing import Optional, List, TYPE_CHECKING
from datetime import date as date_type, datetime
from uuid import UUID, uuid4

from ._base import CamelModel, timestamp_type, utc_now

if TYPE_CHECKING:
    from .reminder import Reminder


class DayBase(SQLModel):
    """Modèle de base pour Day"""
    date: date_type
    wake_time: str = Field(max_length=5)  # HH:MM
    sleep_time: str = Field(max_length=5)  # HH:MM
    target_cigarettes: int


class Day(DayBase, table=True):
    """Entité Day complète pour la base de données"""
    __table_args__ = (
        UniqueConstraint("date", name="uq_day_date"),
    )

    id: Optional[UUID] = Field(default_factory=uuid4, primary_key=True)
    created_at: datetime = Field(default_factory=utc_now, sa_type=timestamp_type())

    # Relations
    reminders: List["Reminder"] = Relationship(
        back_populates="day",
        sa_relationship_kwargs={
            "cascade": "all, delete-orphan",
            "passive_deletes": True,
            "order_by": "Reminder.time",
        },
    )


class DayCreate(CamelModel):
    """Schéma pour créer une journée (les rappels sont générés automatiquement)"""
    date: date_type
    wake_time: str
    sleep_time: str
    target_cigarettes: int


class DayUpdate(CamelModel):
    """Schéma pour mettre à jour une journée ; les champs absents gardent leur valeur"""
    wake_time: Optional[str] = None
    sleep_time: Optional[str] = None
    target_cigarettes: Optional[int] = None


class DayRead(CamelModel):
    """Schéma pour lire une journée (réponse API)"""
    id: UUID
    date: date_type
    wake_time: str
    sleep_time: str
    target_cigarettes: int
    created_at: datetime
