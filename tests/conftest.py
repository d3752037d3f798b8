# tests/conftest.py

import httpx
import pytest
from fastapi.testclient import TestClient
from sqlmodel import Session

from app.auth import create_access_token
from app.config import Settings
from app.db import seed_catalog
from app.main import create_app
from app.models import Booking, User
from app.payments import StripeGateway

SECRET = "test-secret"

CATALOG = [
    {"name": "Cleaning", "price": 49, "slots": ["9am", "10am"]},
    {"name": "Whitening", "price": 120, "slots": ["9am", "11am", "1pm"]},
]


@pytest.fixture
def settings():
    return Settings(
        database_url="sqlite://",
        access_token_secret=SECRET,
        stripe_secret_key="sk_test_123",
        stripe_api_base="https://stripe.test",
        seed_catalog=False,
    )


@pytest.fixture
def stripe_requests():
    return []


@pytest.fixture
def stripe_handler(stripe_requests):
    def handler(request: httpx.Request) -> httpx.Response:
        stripe_requests.append(request)
        return httpx.Response(200, json={"id": "pi_123", "client_secret": "pi_123_secret_abc"})

    return handler


@pytest.fixture
def app(settings, stripe_handler):
    gateway = StripeGateway(
        settings.stripe_secret_key,
        api_base=settings.stripe_api_base,
        transport=httpx.MockTransport(stripe_handler),
    )
    return create_app(settings, gateway=gateway)


@pytest.fixture
def engine(app):
    return app.state.engine


@pytest.fixture
def client(app):
    with TestClient(app) as client:
        seed_catalog(app.state.engine, CATALOG)
        yield client


@pytest.fixture
def make_user(client, engine):
    def _make_user(email: str, role: str = "patient") -> int:
        with Session(engine) as session:
            user = User(email=email, role=role)
            session.add(user)
            session.commit()
            session.refresh(user)
            return user.id

    return _make_user


@pytest.fixture
def make_booking(client, engine):
    def _make_booking(treatment: str, date: str, slot: str, email: str = "pat@example.com") -> int:
        with Session(engine) as session:
            booking = Booking(treatment=treatment, appointment_date=date, slot=slot, email=email)
            session.add(booking)
            session.commit()
            session.refresh(booking)
            return booking.id

    return _make_booking


@pytest.fixture
def auth_headers():
    def _auth_headers(email: str) -> dict:
        return {"Authorization": f"Bearer {create_access_token(email, SECRET)}"}

    return _auth_headers
