# app/routers/users_routes.py

import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlmodel import Session, select

from app.db import get_session
from app.deps import require_admin
from app.models import User
from app.schemas import AdminStatus, InsertResult, UpdateResult, UserCreate, UserPublic, UserRole

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/users",
    tags=["users"],
)


@router.get("/admin/{email}", response_model=AdminStatus)
def is_admin(email: str, session: Session = Depends(get_session)):
    user = session.exec(select(User).where(User.email == email)).first()
    return {"isAdmin": user is not None and user.role == UserRole.admin.value}


@router.put("/admin/{user_id}", response_model=UpdateResult)
def make_admin(
    user_id: int,
    admin: User = Depends(require_admin),
    session: Session = Depends(get_session),
):
    target = session.get(User, user_id)
    if target is None:
        raise HTTPException(status_code=404, detail="User not found")

    if target.role == UserRole.admin.value:
        return {"matchedCount": 1, "modifiedCount": 0}

    target.role = UserRole.admin.value
    session.add(target)
    session.commit()
    logger.info(f"User {target.email} promoted to admin by {admin.email}")
    return {"matchedCount": 1, "modifiedCount": 1}


@router.get("", response_model=List[UserPublic])
def list_users(
    admin: User = Depends(require_admin),
    session: Session = Depends(get_session),
):
    return session.exec(select(User).order_by(User.id)).all()


@router.post("", status_code=201, response_model=InsertResult, response_model_exclude_none=True)
def create_user(user: UserCreate, session: Session = Depends(get_session)):
    # 1) Check if email already exists
    existing = session.exec(select(User).where(User.email == user.email)).first()
    if existing is not None:
        raise HTTPException(status_code=409, detail="Email already registered")

    # 2) Create user in DB; new users are always patients
    db_user = User(email=user.email, name=user.name, role=UserRole.patient.value)

    session.add(db_user)
    session.commit()
    session.refresh(db_user)  # fills db_user.id

    return {"acknowledged": True, "insertedId": db_user.id}
