from datetime import datetime, timedelta, timezone
from typing import Optional

from fastapi import Header
from jose import JWTError, jwt

from app.core.config import settings
from app.core.errors import Unauthenticated
from app.models.task import LABEL_MAX_LENGTH


def create_access_token(user_id: str, expires_minutes: Optional[int] = None) -> str:
    #crée un token d'accès JWT, le "sub" est l'identifiant opaque de l'utilisateur
    minutes = settings.JWT_EXPIRE_MIN if expires_minutes is None else expires_minutes
    payload = {
        "sub": user_id,
        "exp": datetime.now(timezone.utc) + timedelta(minutes=minutes),
        "type": "access"
    }
    return jwt.encode(payload, settings.JWT_SECRET, algorithm=settings.JWT_ALGORITHM)


def verify_token(token: str) -> Optional[dict]:
    try:
        return jwt.decode(token, settings.JWT_SECRET, algorithms=[settings.JWT_ALGORITHM])
    except JWTError:
        return None


def decode_token(token: str) -> Optional[str]:
    payload = verify_token(token)
    if payload is None or payload.get("type", "access") != "access":
        return None
    user_id = payload.get("sub")
    if not isinstance(user_id, str) or not user_id or len(user_id) > LABEL_MAX_LENGTH:
        return None
    return user_id


def get_current_user_id(authorization: Optional[str] = Header(None)) -> str:
    # Check token
    if not authorization:
        raise Unauthenticated()

    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        raise Unauthenticated()

    user_id = decode_token(token.strip())
    if not user_id:
        raise Unauthenticated()

    return user_id
