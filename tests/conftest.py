import os

# La configuración se lee al importar app.core.config
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["SECRET_KEY"] = "clave-de-pruebas"
os.environ["ADMIN_EMAILS"] = "admin@example.com"
os.environ["LOGIN_URL"] = "/login"

from datetime import date
from decimal import Decimal

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.constants import ESTADO_PENDIENTE
from app.core.database import Base, get_db
from app.core.security import hash_password
from app.main import app
from app.models.cliente import Customer
from app.models.plan import MembershipPlan
from app.models.ubicacion import PickupLocation

ADMIN_EMAIL = "admin@example.com"
ADMIN_PASSWORD = "secreto123"
CUSTOMER_PASSWORD = "cliente123"


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    @event.listens_for(engine, "connect")
    def _enable_foreign_keys(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, autoflush=False, autocommit=False)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(session_factory):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def admin_headers(client):
    resp = client.post(
        "/auth/register/administrador",
        json={"email": ADMIN_EMAIL, "password": ADMIN_PASSWORD},
    )
    assert resp.status_code == 201, resp.text
    resp = client.post("/auth/login", json={"email": ADMIN_EMAIL, "password": ADMIN_PASSWORD})
    assert resp.status_code == 200, resp.text
    return {"Authorization": f"Bearer {resp.json()['access_token']}"}


@pytest.fixture
def plan(db):
    plan = MembershipPlan(
        name="Mensual",
        description="Un mes con un mes de regalo",
        price=Decimal("500.00"),
        duration_months=1,
        free_months=1,
        subscription_fee=Decimal("100.00"),
    )
    db.add(plan)
    db.commit()
    db.refresh(plan)
    return plan


@pytest.fixture
def location(db):
    loc = PickupLocation(
        name="Centro",
        address="Av. Juárez 10",
        schedule="Sábados 9 a 13",
        zone="Norte",
        delivery_days="Sábado",
    )
    db.add(loc)
    db.commit()
    db.refresh(loc)
    return loc


@pytest.fixture
def make_customer(db, plan):
    contador = {"n": 0}

    def _make(**kwargs) -> Customer:
        contador["n"] += 1
        n = contador["n"]
        data = {
            "name": f"Cliente {n}",
            "email": f"cliente{n}@example.com",
            "password_hash": hash_password(CUSTOMER_PASSWORD),
            "membership_code": f"OC-{1700000000000 + n}",
            "status": ESTADO_PENDIENTE,
            "membership_plan_id": plan.id,
        }
        data.update(kwargs)
        customer = Customer(**data)
        db.add(customer)
        db.commit()
        db.refresh(customer)
        return customer

    return _make


@pytest.fixture
def customer(make_customer):
    return make_customer(start_date=date.today(), end_date=None)


@pytest.fixture
def customer_headers(client, customer):
    resp = client.post(
        "/auth/clientes/login",
        json={"email": customer.email, "password": CUSTOMER_PASSWORD},
    )
    assert resp.status_code == 200, resp.text
    return {"Authorization": f"Bearer {resp.json()['access_token']}"}
