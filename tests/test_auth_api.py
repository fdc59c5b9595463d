from datetime import timedelta

import pytest

from app.core.auth.repository import SessionsRepository
from app.core.auth.schemas import UserUpsert
from app.core.auth.service import AuthService
from app.shared.database.models import UserSession, utcnow


@pytest.fixture
def auth(db_session):
    return AuthService(db_session)


@pytest.fixture
def admin(auth):
    return auth.upsert_user(UserUpsert(
        id="00000000-0000-4000-8000-000000000001",
        username="admin",
        email="admin@example.com",
        first_name="Ana",
        last_name="Admin",
        role="admin",
    ))


def session_cookie(sid):
    return {"Cookie": f"connect.sid={sid}"}


@pytest.mark.parametrize("raw, expected", [
    (None, None),
    ("", None),
    ("abc123", "abc123"),
    ("s:abc123.firma", "abc123"),
    ("s%3Aabc123.firma", "abc123"),
    ("s:", None),
])
def test_parse_session_cookie(raw, expected):
    assert AuthService.parse_session_cookie(raw) == expected


def test_user_requires_session(client):
    response = client.get("/api/auth/user")

    assert response.status_code == 401
    assert response.json()["message"] == "Unauthorized"
    assert response.json()["success"] is False


def test_user_with_unknown_session(client):
    response = client.get("/api/auth/user", headers=session_cookie("nope"))
    assert response.status_code == 401


def test_user_from_session(client, auth, admin):
    session = auth.open_session(admin)

    response = client.get("/api/auth/user", headers=session_cookie(session.sid))

    assert response.status_code == 200
    user = response.json()
    assert user["id"] == admin.id
    assert user["email"] == "admin@example.com"
    assert user["full_name"] == "Ana Admin"
    assert user["role"] == "admin"


def test_user_from_signed_cookie(client, auth, admin):
    session = auth.open_session(admin)

    response = client.get("/api/auth/user", headers=session_cookie(f"s:{session.sid}.firma"))

    assert response.status_code == 200
    assert response.json()["id"] == admin.id


def test_expired_session_is_unauthorized(client, auth, admin):
    session = auth.open_session(admin, ttl=timedelta(seconds=-1))

    response = client.get("/api/auth/user", headers=session_cookie(session.sid))
    assert response.status_code == 401


def test_session_of_deleted_user(client, db_session):
    SessionsRepository(db_session).save_session(
        "sid-fantasma",
        {"user": {"claims": {"sub": "ghost"}}},
        utcnow() + timedelta(days=1),
    )

    response = client.get("/api/auth/user", headers=session_cookie("sid-fantasma"))

    assert response.status_code == 404
    assert response.json()["message"] == "User not found"


def test_open_session_purges_expired_sessions(db_session, auth, admin):
    expired_sid = auth.open_session(admin, ttl=timedelta(seconds=-1)).sid
    current = auth.open_session(admin)

    assert db_session.get(UserSession, expired_sid) is None
    assert db_session.get(UserSession, current.sid).user_id == admin.id


def test_upsert_updates_existing_user(auth, admin):
    updated = auth.upsert_user(UserUpsert(id=admin.id, first_name="Ana María"))

    assert updated.id == admin.id
    assert updated.first_name == "Ana María"
    assert updated.email == "admin@example.com"
    assert updated.role == "admin"


def test_upsert_creates_user_with_generated_id(auth):
    user = auth.upsert_user(UserUpsert(email="empleado@example.com"))

    assert user.id
    assert user.role == "employee"
