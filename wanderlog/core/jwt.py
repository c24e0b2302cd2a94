"""JWT issue / verify utilities (access & refresh tokens)"""
from datetime import datetime, timedelta, timezone
from typing import Dict, Any
import jwt

from wanderlog.config.settings import get_settings


def _build_payload(subject: str, expires_minutes: int, token_type: str) -> Dict[str, Any]:
    now = datetime.now(timezone.utc)
    return {
        "sub": subject,
        "type": token_type,
        "iat": now,
        "exp": now + timedelta(minutes=expires_minutes),
    }


def create_access_token(subject: str, expires_minutes: int | None = None) -> str:
    security = get_settings().security
    minutes = expires_minutes or security.access_token_expire_minutes
    return jwt.encode(
        _build_payload(subject, minutes, "access"),
        security.jwt_secret,
        algorithm=security.jwt_algorithm,
    )


def create_refresh_token(subject: str, expires_minutes: int | None = None) -> str:
    security = get_settings().security
    minutes = expires_minutes or security.refresh_token_expire_minutes
    return jwt.encode(
        _build_payload(subject, minutes, "refresh"),
        security.refresh_secret,
        algorithm=security.jwt_algorithm,
    )


def decode_token(token: str, refresh: bool = False) -> Dict[str, Any] | None:
    security = get_settings().security
    secret = security.refresh_secret if refresh else security.jwt_secret
    try:
        payload = jwt.decode(token, secret, algorithms=[security.jwt_algorithm])
    except jwt.PyJWTError:
        return None
    if payload.get("type") != ("refresh" if refresh else "access"):
        return None
    return payload
