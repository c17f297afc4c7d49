"""
Configuration de la base de données avec SQLModel
"""
from sqlalchemy import event
from sqlalchemy.engine import Engine
from sqlmodel import create_engine, SQLModel, Session
from app.core.settings import get_settings

settings = get_settings()


def build_engine(database_url: str, **kwargs) -> Engine:
    """Crée un engine ; active les clés étrangères pour SQLite (cascade des rappels)."""
    if database_url.startswith("sqlite"):
        kwargs.setdefault("connect_args", {"check_same_thread": False})
    else:
        kwargs.setdefault("pool_pre_ping", True)

    new_engine = create_engine(database_url, echo=settings.DEBUG, **kwargs)

    if database_url.startswith("sqlite"):
        @event.listens_for(new_engine, "connect")
        def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

    return new_engine


# Créer l'engine de base de données
engine = build_engine(settings.DATABASE_URL)


def create_db_and_tables(target: Engine = None):
    """Créer toutes les tables de la base de données"""
    # Les tables doivent être enregistrées dans les métadonnées avant create_all
    import app.domain.entities  # noqa: F401

    SQLModel.metadata.create_all(target or engine)


def get_session():
    """Générateur de session de base de données pour l'injection de dépendance"""
    with Session(engine) as session:
        yield session
