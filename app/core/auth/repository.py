# app/core/auth/repository.py
from sqlalchemy.orm import Session
from typing import Any, Dict, Optional
from datetime import datetime

from app.shared.database.models import User, UserSession, utcnow


class UsersRepository:
    def __init__(self, db: Session):
        self.db = db

    def get_user(self, user_id: str) -> Optional[User]:
        return self.db.query(User).filter(User.id == user_id).first()

    def upsert_user(self, user_data: Dict[str, Any]) -> User:
        """Insertar usuario o actualizar todos los campos enviados si ya existe"""
        user = None
        if user_data.get("id"):
            user = self.get_user(user_data["id"])

        if user is None:
            user = User(**user_data)
            self.db.add(user)
        else:
            for field, value in user_data.items():
                setattr(user, field, value)
            user.updated_at = utcnow()

        self.db.commit()
        self.db.refresh(user)
        return user


class SessionsRepository:
    def __init__(self, db: Session):
        self.db = db

    def get_active_session(self, sid: str, now: datetime) -> Optional[UserSession]:
        """Sesión vigente (expire > now) o None"""
        return self.db.query(UserSession).filter(
            UserSession.sid == sid,
            UserSession.expire > now
        ).first()

    def save_session(self, sid: str, sess: Dict[str, Any], expire: datetime) -> UserSession:
        session = self.db.query(UserSession).filter(UserSession.sid == sid).first()
        if session is None:
            session = UserSession(sid=sid, sess=sess, expire=expire)
            self.db.add(session)
        else:
            session.sess = sess
            session.expire = expire

        self.db.commit()
        self.db.refresh(session)
        return session

    def delete_expired(self, now: datetime) -> int:
        deleted = self.db.query(UserSession).filter(UserSession.expire <= now).delete()
        self.db.commit()
        return deleted
