from contextlib import contextmanager
import logging

from fastapi import HTTPException, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

logger = logging.getLogger(__name__)


@contextmanager
def integrity_guard(db: Session, message: str):
    """Traducir violaciones de unique/foreign key a 409 Conflict.

    La sesión queda con rollback hecho para poder seguir usándola.
    """
    try:
        yield
    except IntegrityError as e:
        db.rollback()
        logger.warning(f"{message}: {e.orig}")
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=message)
