# app/deps.py

from typing import Optional

from fastapi import Depends, HTTPException, Request
from sqlmodel import Session, select

from .auth import get_current_identity
from .config import Settings
from .db import get_session
from .models import User
from .payments import StripeGateway


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_gateway(request: Request) -> StripeGateway:
    return request.app.state.gateway


def require_role(user: Optional[User], role: str):
    if user is None or user.role != role:
        raise HTTPException(status_code=403, detail="Forbidden access")


def require_admin(
    identity: dict = Depends(get_current_identity),
    session: Session = Depends(get_session),
) -> User:
    """Verified credential whose user record carries the admin role."""
    user = session.exec(select(User).where(User.email == identity["email"])).first()
    require_role(user, "admin")
    return user
