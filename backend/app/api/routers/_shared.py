"""
Utilitaires partages entre les routers API.
"""
import logging
from fastapi import HTTPException, status
from slowapi import Limiter
from slowapi.util import get_remote_address

from app.core.settings import get_settings
from app.domain.errors import (
    DuplicateDayError,
    NotFoundError,
    PersistenceError,
    SmokelessError,
    ValidationError,
)

logger = logging.getLogger(__name__)

settings = get_settings()

limiter = Limiter(
    key_func=get_remote_address,
    default_limits=["100/minute"],
    headers_enabled=False,
    enabled=settings.RATE_LIMIT_ENABLED,
)

WRITE_LIMIT = settings.RATE_LIMIT_WRITE


def to_http_exception(exc: SmokelessError) -> HTTPException:
    """Traduit une erreur du domaine en HTTPException (404, 409, 400, 503)."""
    if isinstance(exc, NotFoundError):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=exc.message)
    if isinstance(exc, DuplicateDayError):
        return HTTPException(status_code=status.HTTP_409_CONFLICT, detail=exc.message)
    if isinstance(exc, ValidationError):
        return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=exc.message)
    if isinstance(exc, PersistenceError):
        return HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=exc.message)
    logger.error(f"Erreur du domaine non traduite: {type(exc).__name__}: {exc.message}")
    return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=exc.message)
