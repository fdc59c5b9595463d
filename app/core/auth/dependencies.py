from fastapi import Depends, Request
from sqlalchemy.orm import Session

from app.config.database import get_db
from app.config.settings import settings
from app.shared.database.models import User
from app.core.auth.service import AuthService


async def is_authenticated() -> None:
    """Guard de las rutas /api.

    La autenticación no está implementada: deja pasar todas las peticiones.
    """
    return None


def get_session_id(request: Request) -> str:
    """sid de la cookie de sesión (o "" si no viene)"""
    raw = request.cookies.get(settings.session_cookie_name)
    return AuthService.parse_session_cookie(raw) or ""


async def get_current_user(
    request: Request,
    db: Session = Depends(get_db)
) -> User:
    """Obtener usuario actual desde la sesión"""
    return AuthService(db).get_session_user(get_session_id(request))
