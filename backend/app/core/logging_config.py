"""
Configuration du logging selon ENVIRONMENT.
JSON sur stdout en production, texte lisible ailleurs ; fichier tournant en développement.
"""
import logging
import sys
from logging.handlers import RotatingFileHandler
from typing import List

from pythonjsonlogger import jsonlogger

TEXT_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
JSON_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"

# Modules tiers trop bavards en production
NOISY_LOGGERS = ("uvicorn.access", "sqlalchemy.engine")


def build_handlers(settings, log_file: str = "app.log") -> List[logging.Handler]:
    stream = logging.StreamHandler(sys.stdout)
    if settings.ENVIRONMENT == "production":
        stream.setFormatter(jsonlogger.JsonFormatter(
            JSON_FORMAT,
            rename_fields={"asctime": "timestamp", "levelname": "level"},
        ))
    else:
        stream.setFormatter(logging.Formatter(TEXT_FORMAT))

    handlers: List[logging.Handler] = [stream]
    if settings.ENVIRONMENT == "development":
        handlers.append(RotatingFileHandler(log_file, maxBytes=5_000_000, backupCount=3, delay=True))
    return handlers


def configure_logging(settings) -> List[logging.Handler]:
    """Installe les handlers sur le logger racine et retourne ceux-ci."""
    handlers = build_handlers(settings)
    logging.basicConfig(
        level=getattr(logging, settings.LOG_LEVEL, logging.INFO),
        handlers=handlers,
    )

    if settings.ENVIRONMENT == "production":
        for name in NOISY_LOGGERS:
            logging.getLogger(name).setLevel(logging.WARNING)
    return handlers
