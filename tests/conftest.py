import pytest

from app import create_app
from config import TestConfig
from models import db
from models.appointment import Appointment
from models.user import User, Role
from security.csrf import CSRF_COOKIE, CSRF_HEADER
from security.password import hash_password

ADMIN_EMAIL = "admin@example.com"
CLIENT_EMAIL = "cliente@example.com"
PASSWORD = "secret123"


@pytest.fixture
def app():
    app = create_app(TestConfig)
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


def create_user(app, email, password=PASSWORD, roles=("CLIENT",), full_name="Test User"):
    with app.app_context():
        user = User(email=email, password_hash=hash_password(password), full_name=full_name)
        user.roles = Role.query.filter(Role.name.in_(roles)).all()
        db.session.add(user)
        db.session.commit()
        return user.id


def login(client, email, password=PASSWORD):
    """Log client in and return the headers needed for state-changing calls."""
    resp = client.post("/auth/login", json={"email": email, "password": password})
    assert resp.status_code == 200, resp.get_json()
    return {CSRF_HEADER: client.get_cookie(CSRF_COOKIE).value}


def insert_appointment(date, time, status="pending", email="maria@example.com", name="Maria Silva"):
    """Insert a ledger row directly, bypassing the booking checks. Needs an app context."""
    appt = Appointment(
        name=name,
        email=email,
        phone="11987654321",
        service_id=1,
        category_id=1,
        date=date,
        time=time,
        status=status,
    )
    db.session.add(appt)
    db.session.commit()
    return appt.id


def add_appointment(app, date, time, **fields):
    with app.app_context():
        return insert_appointment(date, time, **fields)


def booking_payload(**overrides):
    data = {
        "name": "Leandro Oliveira",
        "email": "leandro@example.com",
        "phone": "11964027914",
        "categoryId": 1,
        "serviceId": 1,
        "date": "2025-04-10",
        "time": "14:20",
        "notes": "Corte masculino",
    }
    data.update(overrides)
    return data


@pytest.fixture
def admin_user(app):
    return create_user(app, ADMIN_EMAIL, roles=("ADMIN",), full_name="Salon Admin")


@pytest.fixture
def client_user(app):
    return create_user(app, CLIENT_EMAIL, roles=("CLIENT",), full_name="Cliente Teste")


@pytest.fixture
def admin_headers(client, admin_user):
    return login(client, ADMIN_EMAIL)


@pytest.fixture
def client_headers(client, client_user):
    return login(client, CLIENT_EMAIL)
