# app/routers/options_routes.py

from typing import List, Optional

from fastapi import APIRouter, Depends
from sqlmodel import Session

from app.core import availability_in_memory, availability_joined, treatment_names
from app.db import get_session
from app.schemas import TreatmentName, TreatmentOption

router = APIRouter(
    tags=["appointment options"],
)


@router.get("/appointmentOptions", response_model=List[TreatmentOption])
def appointment_options(
    date: Optional[str] = None,
    session: Session = Depends(get_session),
):
    return availability_in_memory(session, date)


@router.get("/v2/appointmentOptions", response_model=List[TreatmentOption])
def appointment_options_v2(
    date: Optional[str] = None,
    session: Session = Depends(get_session),
):
    return availability_joined(session, date)


@router.get("/appointmentSpecialty", response_model=List[TreatmentName])
def appointment_specialty(session: Session = Depends(get_session)):
    return treatment_names(session)
