"""Authentication endpoints: email/password sign-up, sign-in and token refresh."""

import logging

from fastapi import APIRouter, Depends
from sqlalchemy import select
from sqlalchemy.orm import Session

from wanderlog.core.db import get_db, store_operation
from wanderlog.core.dependencies import get_current_user
from wanderlog.core.exceptions import (
    AuthenticationError,
    EmailAlreadyRegisteredError,
    InvalidCredentialsError,
)
from wanderlog.models.user import User
from wanderlog.core.security import hash_password, verify_password
from wanderlog.core.jwt import create_access_token, create_refresh_token, decode_token
from wanderlog.schemas.user import UserCreate, UserRead, LoginRequest, Token, TokenRefresh, AuthSession
from wanderlog.schemas.base import Envelope, Message

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"])


def _issue_tokens(user_id: int) -> Token:
    subject = str(user_id)
    return Token(access_token=create_access_token(subject), refresh_token=create_refresh_token(subject))


def _session_for(user: User) -> AuthSession:
    return AuthSession(user=UserRead.model_validate(user), token=_issue_tokens(user.id))


@router.post("/register", response_model=Envelope[AuthSession])
async def register_user(payload: UserCreate, db: Session = Depends(get_db)):
    email = payload.email.lower()
    with store_operation(db, "Failed to create account"):
        existing = db.execute(select(User).where(User.email == email)).scalar_one_or_none()
        if existing:
            raise EmailAlreadyRegisteredError(email)
        user = User(
            email=email,
            display_name=payload.display_name,
            hashed_password=hash_password(payload.password),
        )
        db.add(user)
        db.commit()
        db.refresh(user)

    logger.info(f"Registered user {user.id}", extra={"user_id": user.id})
    return Envelope(status="ok", data=_session_for(user))


@router.post("/login", response_model=Envelope[AuthSession])
async def login_user(payload: LoginRequest, db: Session = Depends(get_db)):
    with store_operation(db, "Failed to sign in"):
        user = db.execute(select(User).where(User.email == payload.email.lower())).scalar_one_or_none()
    if not user or not verify_password(payload.password, user.hashed_password):
        raise InvalidCredentialsError()
    return Envelope(status="ok", data=_session_for(user))


@router.post("/refresh", response_model=Envelope[Token])
async def refresh_token(payload: TokenRefresh, db: Session = Depends(get_db)):
    decoded = decode_token(payload.refresh_token, refresh=True)
    if not decoded or not str(decoded.get("sub", "")).isdigit():
        raise AuthenticationError("Invalid refresh token")

    with store_operation(db, "Failed to refresh session"):
        user = db.execute(select(User).where(User.id == int(decoded["sub"]))).scalar_one_or_none()
    if not user:
        raise AuthenticationError("Invalid refresh token")

    return Envelope(status="ok", data=_issue_tokens(user.id))


@router.get("/me", response_model=Envelope[UserRead])
async def read_current_user(current_user: User = Depends(get_current_user)):
    """Get the signed-in user."""
    return Envelope(status="ok", data=UserRead.model_validate(current_user))


@router.post("/logout", response_model=Envelope[Message])
async def logout_user(current_user: User = Depends(get_current_user)):
    """Tokens are stateless; the client discards them."""
    logger.info(f"User {current_user.id} signed out", extra={"user_id": current_user.id})
    return Envelope(status="ok", data=Message(message="Signed out"))
