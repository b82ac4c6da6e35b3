"""Authentication service handling signup and login."""
from __future__ import annotations

import logging
from typing import Any, Dict

from fastapi import HTTPException, status
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.validation import FieldResult, validate_field, validate_username_charset
from app.models.user import User
from app.repositories.user_repository import UserRepository
from app.schemas.auth import AuthResponse, UserOut

LOGGER = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid username or password"
USERNAME_TAKEN = "Username already exists"
INTERNAL_ERROR = "Internal server error"


def _as_payload(data: Any) -> Dict[str, Any]:
    return data if isinstance(data, dict) else {}


def _reject(result: FieldResult) -> None:
    if not result.valid:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=result.error)


def _project(user: User) -> UserOut:
    return UserOut(name=user.name, username=user.username)


class AuthService:
    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    def signup(self, db: Session, data: Any) -> AuthResponse:
        payload = _as_payload(data)

        name = validate_field(payload.get("name"), "Name", 2, 50)
        _reject(name)
        username = validate_field(payload.get("username"), "Username", 3, 20)
        _reject(username)
        _reject(validate_username_charset(username.value))
        password = validate_field(payload.get("password"), "Password", 6, 100)
        _reject(password)

        folded = username.value.lower()
        try:
            if self.user_repository.get_by_username(db, folded):
                LOGGER.warning("Signup rejected: username taken: %s", folded)
                raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=USERNAME_TAKEN)
            user = self.user_repository.create_user(db, name.value, folded, password.value)
        except IntegrityError:
            # Lost a race with a concurrent signup for the same username.
            LOGGER.warning("Signup rejected by unique index: %s", folded)
            raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=USERNAME_TAKEN)
        except SQLAlchemyError as exc:
            LOGGER.error("❌ Signup failed for %s: %s", folded, exc, exc_info=True)
            raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=INTERNAL_ERROR)

        LOGGER.info("✅ User created: %s", folded)
        return AuthResponse(message="User created successfully", user=_project(user))

    def login(self, db: Session, data: Any) -> AuthResponse:
        payload = _as_payload(data)

        username = validate_field(payload.get("username"), "Username", 1, 20)
        _reject(username)
        password = validate_field(payload.get("password"), "Password", 1, 100)
        _reject(password)

        folded = username.value.lower()
        try:
            user = self.user_repository.get_by_username(db, folded)
        except SQLAlchemyError as exc:
            LOGGER.error("❌ Login lookup failed for %s: %s", folded, exc, exc_info=True)
            raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=INTERNAL_ERROR)

        if user is None:
            LOGGER.warning("Login failed: user not found: %s", folded)
            raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=INVALID_CREDENTIALS)
        if user.password != password.value:
            LOGGER.warning("Login failed: invalid password for user: %s", folded)
            raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=INVALID_CREDENTIALS)

        LOGGER.info("✅ Login successful for user: %s", folded)
        return AuthResponse(message="Login successful", user=_project(user))
