# app/routers/doctors_routes.py

import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlmodel import Session, select

from app.db import get_session
from app.deps import require_admin
from app.models import Doctor, Treatment, User
from app.schemas import DeleteResult, DoctorCreate, DoctorPublic, InsertResult

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/doctors",
    tags=["doctors"],
)


@router.get("", response_model=List[DoctorPublic])
def list_doctors(
    admin: User = Depends(require_admin),
    session: Session = Depends(get_session),
):
    return session.exec(select(Doctor).order_by(Doctor.id)).all()


@router.post("", status_code=201, response_model=InsertResult, response_model_exclude_none=True)
def add_doctor(
    doctor: DoctorCreate,
    admin: User = Depends(require_admin),
    session: Session = Depends(get_session),
):
    specialty = session.exec(select(Treatment).where(Treatment.name == doctor.specialty)).first()
    if specialty is None:
        raise HTTPException(status_code=422, detail="Specialty must be an offered treatment")

    db_doctor = Doctor(
        name=doctor.name,
        email=doctor.email,
        specialty=doctor.specialty,
        image=doctor.image,
    )
    session.add(db_doctor)
    session.commit()
    session.refresh(db_doctor)

    logger.info(f"Doctor {db_doctor.id} added by {admin.email}")
    return {"acknowledged": True, "insertedId": db_doctor.id}


@router.delete("/{doctor_id}", response_model=DeleteResult)
def remove_doctor(
    doctor_id: int,
    admin: User = Depends(require_admin),
    session: Session = Depends(get_session),
):
    doctor = session.get(Doctor, doctor_id)
    if doctor is None:
        raise HTTPException(status_code=404, detail="Doctor not found")

    session.delete(doctor)
    session.commit()

    logger.info(f"Doctor {doctor_id} removed by {admin.email}")
    return {"deletedCount": 1}
