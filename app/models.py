# app/models.py

from typing import Optional

from sqlalchemy import UniqueConstraint
from sqlmodel import SQLModel, Field


class Treatment(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(index=True, unique=True)
    price: float = 0


class TreatmentSlot(SQLModel, table=True):
    __table_args__ = (
        UniqueConstraint("treatment_name", "label", name="uq_treatment_slot"),
    )

    id: Optional[int] = Field(default=None, primary_key=True)
    treatment_name: str = Field(index=True, foreign_key="treatment.name")
    position: int  # order within the treatment's slot list
    label: str


class Booking(SQLModel, table=True):
    __table_args__ = (
        UniqueConstraint("email", "treatment", "appointment_date", name="uq_patient_treatment_day"),
        UniqueConstraint("treatment", "appointment_date", "slot", name="uq_treatment_day_slot"),
    )

    id: Optional[int] = Field(default=None, primary_key=True)

    treatment: str = Field(index=True)
    appointment_date: str = Field(index=True)
    slot: str
    email: str = Field(index=True)
    patient: Optional[str] = None
    phone: Optional[str] = None
    price: Optional[float] = None
    paid: bool = False
    transaction_id: Optional[str] = None


class User(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    email: str = Field(index=True, unique=True)
    name: Optional[str] = None
    role: str = "patient"  # patient or admin


class Doctor(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    name: str
    email: Optional[str] = None
    specialty: str
    image: Optional[str] = None


class Payment(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    booking_id: int = Field(index=True, foreign_key="booking.id")
    transaction_id: str
    price: float
    email: Optional[str] = None
