import os

# La app lee la configuración al importarse: usar una BD en memoria y no crear
# tablas en el arranque (cada test crea las suyas).
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("AUTO_CREATE_TABLES", "false")

from datetime import timedelta

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.config.database import get_db, enable_sqlite_foreign_keys
from app.main import app
from app.shared.database.models import Base


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    enable_sqlite_foreign_keys(engine)
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db_session(session_factory):
    db = session_factory()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def client(session_factory):
    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def make_supplier(client):
    def _make(**overrides):
        payload = {"name": "Distribuidora Norte", **overrides}
        response = client.post("/api/suppliers", json=payload)
        assert response.status_code == 201, response.text
        return response.json()
    return _make


@pytest.fixture
def make_product(client):
    counter = {"n": 0}

    def _make(**overrides):
        counter["n"] += 1
        payload = {
            "name": f"Producto {counter['n']}",
            "sku": f"SKU-{counter['n']:03d}",
            "price": "10.00",
            "quantity": 20,
            "min_quantity": 5,
            **overrides,
        }
        response = client.post("/api/products", json=payload)
        assert response.status_code == 201, response.text
        return response.json()
    return _make


@pytest.fixture
def make_customer(client):
    def _make(**overrides):
        payload = {"name": "Cliente mostrador", **overrides}
        response = client.post("/api/customers", json=payload)
        assert response.status_code == 201, response.text
        return response.json()
    return _make


@pytest.fixture
def make_transaction(client):
    def _make(items, **header):
        body = {
            "transaction": {"customer_name": "Cliente mostrador", **header},
            "items": items,
        }
        response = client.post("/api/transactions", json=body)
        assert response.status_code == 201, response.text
        return response.json()
    return _make


@pytest.fixture
def shift_created_at(db_session):
    """Mover created_at de una fila para simular datos de otras fechas"""
    def _shift(model, row_id, delta: timedelta):
        row = db_session.get(model, row_id)
        row.created_at = row.created_at + delta
        db_session.commit()
    return _shift
