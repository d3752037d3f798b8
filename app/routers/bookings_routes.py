# app/routers/bookings_routes.py

import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, select

from app.auth import get_current_identity
from app.db import get_session
from app.models import Booking, Treatment, TreatmentSlot
from app.schemas import BookingCreate, BookingPublic, InsertResult

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/bookings",
    tags=["bookings"],
)


def _find_patient_booking(session: Session, booking: BookingCreate):
    return session.exec(
        select(Booking)
        .where(Booking.appointment_date == booking.appointment_date)
        .where(Booking.email == booking.email)
        .where(Booking.treatment == booking.treatment)
    ).first()


def _rejection(session: Session, booking: BookingCreate) -> dict:
    if _find_patient_booking(session, booking) is not None:
        message = f"You already have a booking on {booking.appointment_date}"
    else:
        message = f"{booking.slot} is no longer available on {booking.appointment_date}"
    logger.info(f"Booking rejected for {booking.email}: {message}")
    return {"acknowledged": False, "message": message}


@router.get("", response_model=List[BookingPublic])
def list_patient_bookings(
    email: str,
    identity: dict = Depends(get_current_identity),
    session: Session = Depends(get_session),
):
    if email != identity["email"]:
        raise HTTPException(status_code=401, detail="Unauthorized access")

    return session.exec(
        select(Booking).where(Booking.email == email).order_by(Booking.id)
    ).all()


@router.get("/{booking_id}", response_model=BookingPublic)
def get_booking(booking_id: int, session: Session = Depends(get_session)):
    booking = session.get(Booking, booking_id)
    if booking is None:
        raise HTTPException(status_code=404, detail="Booking not found")
    return booking


@router.post("", response_model=InsertResult, response_model_exclude_none=True)
def create_booking(booking: BookingCreate, session: Session = Depends(get_session)):
    # 1) Treatment and slot must come from the catalog
    treatment = session.exec(select(Treatment).where(Treatment.name == booking.treatment)).first()
    if treatment is None:
        raise HTTPException(status_code=422, detail="Treatment not available")

    offered = session.exec(
        select(TreatmentSlot)
        .where(TreatmentSlot.treatment_name == booking.treatment)
        .where(TreatmentSlot.label == booking.slot)
    ).first()
    if offered is None:
        raise HTTPException(status_code=422, detail="Slot not offered for this treatment")

    # 2) One booking per patient per treatment per day; the unique
    #    constraints close the gap between this check and the insert
    taken = session.exec(
        select(Booking)
        .where(Booking.treatment == booking.treatment)
        .where(Booking.appointment_date == booking.appointment_date)
        .where(Booking.slot == booking.slot)
    ).first()
    if _find_patient_booking(session, booking) is not None or taken is not None:
        return _rejection(session, booking)

    db_booking = Booking(
        treatment=booking.treatment,
        appointment_date=booking.appointment_date,
        slot=booking.slot,
        email=booking.email,
        patient=booking.patient,
        phone=booking.phone,
        price=booking.price if booking.price is not None else treatment.price,
    )

    session.add(db_booking)
    try:
        session.commit()
    except IntegrityError:
        session.rollback()
        return _rejection(session, booking)

    session.refresh(db_booking)
    logger.info(f"Booking {db_booking.id} created: {booking.treatment} on {booking.appointment_date}")
    return {"acknowledged": True, "insertedId": db_booking.id}
