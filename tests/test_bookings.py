# tests/test_bookings.py

import pytest
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, select

from app.models import Booking


def _booking(**overrides):
    body = {
        "treatment": "Cleaning",
        "appointmentDate": "2024-01-01",
        "slot": "9am",
        "email": "pat@example.com",
        "patient": "Pat",
        "phone": "555-0100",
    }
    body.update(overrides)
    return body


def test_create_booking(client, engine):
    response = client.post("/bookings", json=_booking())
    assert response.status_code == 200
    data = response.json()
    assert data["acknowledged"] is True
    assert isinstance(data["insertedId"], int)

    with Session(engine) as session:
        booking = session.get(Booking, data["insertedId"])
        assert booking.slot == "9am"
        assert booking.price == 49  # copied from the catalog
        assert booking.paid is False


def test_second_booking_same_day_same_treatment_is_rejected(client, engine):
    first = client.post("/bookings", json=_booking(slot="9am"))
    second = client.post("/bookings", json=_booking(slot="10am"))

    assert first.json()["acknowledged"] is True
    assert second.status_code == 200
    assert second.json() == {
        "acknowledged": False,
        "message": "You already have a booking on 2024-01-01",
    }

    with Session(engine) as session:
        rows = session.exec(
            select(Booking)
            .where(Booking.email == "pat@example.com")
            .where(Booking.treatment == "Cleaning")
            .where(Booking.appointment_date == "2024-01-01")
        ).all()
        assert len(rows) == 1
        assert rows[0].slot == "9am"


def test_same_patient_other_day_or_treatment_is_allowed(client):
    assert client.post("/bookings", json=_booking()).json()["acknowledged"] is True
    assert client.post("/bookings", json=_booking(appointmentDate="2024-01-02")).json()["acknowledged"] is True
    assert client.post("/bookings", json=_booking(treatment="Whitening")).json()["acknowledged"] is True


def test_taken_slot_is_rejected(client):
    client.post("/bookings", json=_booking(email="first@example.com"))
    response = client.post("/bookings", json=_booking(email="second@example.com"))

    assert response.status_code == 200
    assert response.json() == {
        "acknowledged": False,
        "message": "9am is no longer available on 2024-01-01",
    }


def test_unique_constraint_backs_the_check(engine, client):
    # a row that slipped past the check still blocks the insert
    client.post("/bookings", json=_booking())
    with Session(engine) as session:
        session.add(Booking(treatment="Cleaning", appointment_date="2024-01-01", slot="10am", email="pat@example.com"))
        with pytest.raises(IntegrityError):
            session.commit()


def test_booked_slot_leaves_availability(client):
    client.post("/bookings", json=_booking())
    options = client.get("/appointmentOptions", params={"date": "2024-01-01"}).json()
    assert options[0]["slots"] == ["10am"]


def test_unknown_treatment_or_slot(client):
    response = client.post("/bookings", json=_booking(treatment="Bleaching"))
    assert response.status_code == 422

    response = client.post("/bookings", json=_booking(slot="7pm"))
    assert response.status_code == 422


def test_malformed_body(client):
    body = _booking()
    del body["appointmentDate"]
    assert client.post("/bookings", json=body).status_code == 422
    assert client.post("/bookings", json=_booking(slot="")).status_code == 422


def test_list_bookings_requires_credential(client):
    response = client.get("/bookings", params={"email": "pat@example.com"})
    assert response.status_code == 401


def test_list_bookings_rejects_bad_token(client):
    response = client.get(
        "/bookings",
        params={"email": "pat@example.com"},
        headers={"Authorization": "Bearer not-a-token"},
    )
    assert response.status_code == 403


def test_list_bookings_identity_mismatch(client, auth_headers):
    response = client.get(
        "/bookings",
        params={"email": "someone@example.com"},
        headers=auth_headers("pat@example.com"),
    )
    assert response.status_code == 401


def test_list_own_bookings(client, auth_headers, make_booking):
    make_booking("Cleaning", "2024-01-01", "9am", email="pat@example.com")
    make_booking("Whitening", "2024-01-01", "11am", email="pat@example.com")
    make_booking("Cleaning", "2024-01-01", "10am", email="other@example.com")

    response = client.get(
        "/bookings",
        params={"email": "pat@example.com"},
        headers=auth_headers("pat@example.com"),
    )
    assert response.status_code == 200
    data = response.json()
    assert [b["treatment"] for b in data] == ["Cleaning", "Whitening"]
    assert data[0]["appointmentDate"] == "2024-01-01"
    assert data[0]["paid"] is False
    assert data[0]["transactionID"] is None


def test_get_booking(client, make_booking):
    booking_id = make_booking("Cleaning", "2024-01-01", "9am")

    response = client.get(f"/bookings/{booking_id}")
    assert response.status_code == 200
    assert response.json()["slot"] == "9am"

    assert client.get("/bookings/9999").status_code == 404


def test_insert_race_maps_to_soft_rejection(client, engine, monkeypatch):
    from app.routers import bookings_routes

    client.post("/bookings", json=_booking(slot="9am"))

    # the pre-check misses the concurrent row once, as a racing request would
    real_find = bookings_routes._find_patient_booking
    calls = []

    def racy_find(session, booking):
        calls.append(booking)
        return None if len(calls) == 1 else real_find(session, booking)

    monkeypatch.setattr(bookings_routes, "_find_patient_booking", racy_find)

    response = client.post("/bookings", json=_booking(slot="10am"))
    assert response.status_code == 200
    assert response.json() == {
        "acknowledged": False,
        "message": "You already have a booking on 2024-01-01",
    }
    with Session(engine) as session:
        assert len(session.exec(select(Booking)).all()) == 1
