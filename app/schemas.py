# app/schemas.py

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class UserRole(str, Enum):
    patient = "patient"
    admin = "admin"


class TreatmentOption(BaseModel):
    name: str
    price: float
    slots: List[str]


class TreatmentName(BaseModel):
    name: str


class BookingCreate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    treatment: str = Field(min_length=1)
    appointment_date: str = Field(alias="appointmentDate", min_length=1)
    slot: str = Field(min_length=1)
    email: str = Field(min_length=3)
    patient: Optional[str] = None
    phone: Optional[str] = None
    price: Optional[float] = Field(default=None, ge=0)


class BookingPublic(BaseModel):
    model_config = ConfigDict(populate_by_name=True, from_attributes=True)

    id: int
    treatment: str
    appointment_date: str = Field(alias="appointmentDate")
    slot: str
    email: str
    patient: Optional[str] = None
    phone: Optional[str] = None
    price: Optional[float] = None
    paid: bool = False
    transaction_id: Optional[str] = Field(default=None, alias="transactionID")


# Acknowledgement envelopes, same shape the frontend already reads
class InsertResult(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    acknowledged: bool = True
    inserted_id: Optional[int] = Field(default=None, alias="insertedId")
    message: Optional[str] = None


class UpdateResult(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    acknowledged: bool = True
    matched_count: int = Field(alias="matchedCount")
    modified_count: int = Field(alias="modifiedCount")


class DeleteResult(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    acknowledged: bool = True
    deleted_count: int = Field(alias="deletedCount")


class AccessToken(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    access_token: str = Field(alias="accessToken")


class AdminStatus(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    is_admin: bool = Field(alias="isAdmin")


class UserCreate(BaseModel):
    email: str = Field(min_length=3)
    name: Optional[str] = None


class UserPublic(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    email: str
    name: Optional[str] = None
    role: UserRole


class DoctorCreate(BaseModel):
    name: str = Field(min_length=1)
    email: Optional[str] = None
    specialty: str = Field(min_length=1)
    image: Optional[str] = None


class DoctorPublic(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: Optional[str] = None
    specialty: str
    image: Optional[str] = None


class PaymentCreate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    booking_id: int = Field(alias="bookingID")
    transaction_id: str = Field(alias="transactionID", min_length=1)
    price: float = Field(ge=0)
    email: Optional[str] = None


class PaymentIntentRequest(BaseModel):
    # the frontend posts the whole booking; only the price matters here
    price: float = Field(gt=0)


class PaymentIntentResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    client_secret: str = Field(alias="clientSecret")
