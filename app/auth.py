# app/auth.py

import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

from fastapi import Depends, HTTPException, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import jwt, JWTError

logger = logging.getLogger(__name__)

ALGORITHM = "HS256"
ACCESS_TOKEN_EXPIRE_HOURS = 10

# auto_error=False: a missing header is a 401 here, not FastAPI's default
bearer_scheme = HTTPBearer(auto_error=False)


def create_access_token(
    email: str,
    secret: str,
    expires_delta: timedelta = timedelta(hours=ACCESS_TOKEN_EXPIRE_HOURS),
) -> str:
    expire = datetime.now(timezone.utc) + expires_delta
    return jwt.encode({"email": email, "exp": expire}, secret, algorithm=ALGORITHM)


def decode_access_token(token: str, secret: str) -> dict:
    """Verify signature and expiry. Raises JWTError on any failure."""
    return jwt.decode(token, secret, algorithms=[ALGORITHM])


def get_current_identity(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> dict:
    if credentials is None or not credentials.credentials:
        logger.warning(f"No credential presented for {request.url.path}")
        raise HTTPException(
            status_code=401,
            detail="Unauthorized access",
            headers={"WWW-Authenticate": "Bearer"},
        )

    secret = request.app.state.settings.access_token_secret
    try:
        payload = decode_access_token(credentials.credentials, secret)
    except JWTError as e:
        logger.warning(f"Rejected credential for {request.url.path}: {e}")
        raise HTTPException(status_code=403, detail="Forbidden access")

    email = payload.get("email")
    if not email:
        raise HTTPException(status_code=403, detail="Forbidden access")

    return {"email": email}
