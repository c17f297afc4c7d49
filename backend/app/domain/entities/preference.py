"""
Entité Preference - Domain Layer
Préférences utilisateur globales (langue, thème...), stockées en clé/valeur.
Aucune logique de planification n'en dépend.
"""
from sqlmodel import SQLModel, Field
from typing import Dict
from datetime import datetime

from ._base import timestamp_type, utc_now


class Preference(SQLModel, table=True):
    """Une préférence persistée"""
    key: str = Field(primary_key=True, max_length=64)
    value: str = Field(max_length=64)
    updated_at: datetime = Field(default_factory=utc_now, sa_type=timestamp_type())


class PreferenceUpdate(SQLModel):
    """Schéma pour modifier une préférence"""
    value: str


class PreferenceRead(SQLModel):
    """Schéma pour lire une préférence (réponse API)"""
    key: str
    value: str


PreferencesRead = Dict[str, str]
