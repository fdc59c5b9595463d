import logging
import secrets
from urllib.parse import unquote
from datetime import datetime, timedelta
from typing import Optional

from fastapi import HTTPException, status
from sqlalchemy.orm import Session

from app.config.settings import settings
from app.shared.database.models import User, UserSession, utcnow
from .repository import UsersRepository, SessionsRepository
from .schemas import UserUpsert

logger = logging.getLogger(__name__)


class AuthService:
    """Servicio de sesiones y usuario actual"""

    def __init__(self, db: Session):
        self.db = db
        self.users = UsersRepository(db)
        self.sessions = SessionsRepository(db)

    def get_session_user(self, sid: Optional[str], now: Optional[datetime] = None) -> User:
        """Usuario dueño de la sesión ``sid``.

        401 si no hay cookie o la sesión expiró, 404 si el usuario ya no existe.
        """
        if not sid:
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="Unauthorized"
            )

        session = self.sessions.get_active_session(sid, now or utcnow())
        if session is None or not session.user_id:
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="Unauthorized"
            )

        user = self.users.get_user(session.user_id)
        if user is None:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="User not found"
            )
        return user

    def upsert_user(self, user_data: UserUpsert) -> User:
        user = self.users.upsert_user(user_data.model_dump(exclude_unset=True))
        logger.info(f"Usuario {user.id} guardado ({user.role})")
        return user

    def open_session(self, user: User, ttl: Optional[timedelta] = None) -> UserSession:
        """Crear una sesión nueva para el usuario con el TTL configurado"""
        ttl = ttl or timedelta(days=settings.session_ttl_days)
        now = utcnow()
        purged = self.sessions.delete_expired(now)
        if purged:
            logger.info(f"{purged} sesiones expiradas eliminadas")
        expire = now + ttl
        sess = {
            "cookie": {"httpOnly": True, "maxAge": int(ttl.total_seconds() * 1000)},
            "user": {"claims": {"sub": user.id, "email": user.email}}
        }
        return self.sessions.save_session(secrets.token_urlsafe(24), sess, expire)

    @staticmethod
    def parse_session_cookie(raw: Optional[str]) -> Optional[str]:
        """Extraer el sid de la cookie.

        express-session firma la cookie como ``s:<sid>.<firma>``; aquí solo se
        toma el sid, la firma no se verifica. El valor puede llegar codificado
        como URL (``s%3A...``).
        """
        if not raw:
            return None
        raw = unquote(raw)
        if raw.startswith("s:"):
            raw = raw[2:].rsplit(".", 1)[0]
        return raw or None
