"""
Schéma de base des réponses API : champs snake_case en Python,
camelCase dans le JSON attendu par le client mobile.
Horodatages : toujours en UTC avec fuseau (colonnes TIMESTAMP WITH TIME ZONE).
"""
from datetime import datetime, timezone

from pydantic import ConfigDict
from pydantic.alias_generators import to_camel
from sqlalchemy import DateTime
from sqlmodel import SQLModel


def utc_now() -> datetime:
    """Instant courant en UTC, avec tzinfo"""
    return datetime.now(timezone.utc)


def timestamp_type() -> DateTime:
    """Type de colonne des horodatages"""
    return DateTime(timezone=True)


class CamelModel(SQLModel):
    """Schéma API (non-table) sérialisé en camelCase, accepte aussi le snake_case en entrée"""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )
