# app/routers/payments_routes.py

import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session

from app.db import get_session
from app.deps import get_gateway
from app.models import Booking, Payment
from app.payments import StripeGateway, to_minor_units
from app.schemas import InsertResult, PaymentCreate, PaymentIntentRequest, PaymentIntentResponse

logger = logging.getLogger(__name__)

router = APIRouter(
    tags=["payments"],
)


@router.post("/create-payment-intent", response_model=PaymentIntentResponse)
def create_payment_intent(
    body: PaymentIntentRequest,
    gateway: StripeGateway = Depends(get_gateway),
):
    intent = gateway.create_payment_intent(to_minor_units(body.price))
    return {"clientSecret": intent["client_secret"]}


@router.post("/payments", status_code=201, response_model=InsertResult, response_model_exclude_none=True)
def record_payment(payment: PaymentCreate, session: Session = Depends(get_session)):
    booking = session.get(Booking, payment.booking_id)
    if booking is None:
        raise HTTPException(status_code=404, detail="Booking not found")

    db_payment = Payment(
        booking_id=payment.booking_id,
        transaction_id=payment.transaction_id,
        price=payment.price,
        email=payment.email,
    )
    booking.paid = True
    booking.transaction_id = payment.transaction_id

    # payment row and booking flag land in the same commit
    session.add(db_payment)
    session.add(booking)
    try:
        session.commit()
    except SQLAlchemyError:
        session.rollback()
        logger.error(f"Payment for booking {payment.booking_id} rolled back")
        raise

    session.refresh(db_payment)
    logger.info(f"Payment {db_payment.id} recorded for booking {booking.id}")
    return {"acknowledged": True, "insertedId": db_payment.id}
