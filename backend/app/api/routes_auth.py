"""Authentication API routes."""
from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Body, Depends, Request, status
from sqlalchemy.orm import Session

from app.core.db import get_db
from app.schemas.auth import AuthResponse
from app.schemas.common import ErrorResponse
from app.services.auth_service import AuthService

router = APIRouter(prefix="/api", tags=["auth"])

ERROR_RESPONSES = {
    code: {"model": ErrorResponse}
    for code in (status.HTTP_400_BAD_REQUEST, status.HTTP_500_INTERNAL_SERVER_ERROR)
}


def get_auth_service(request: Request) -> AuthService:
    return request.app.state.auth_service


@router.post(
    "/signup",
    response_model=AuthResponse,
    status_code=status.HTTP_201_CREATED,
    responses={**ERROR_RESPONSES, status.HTTP_409_CONFLICT: {"model": ErrorResponse}},
)
def signup(
    payload: Any = Body(default=None),
    db: Session = Depends(get_db),
    auth_service: AuthService = Depends(get_auth_service),
) -> AuthResponse:
    return auth_service.signup(db, payload)


@router.post(
    "/login",
    response_model=AuthResponse,
    responses={**ERROR_RESPONSES, status.HTTP_401_UNAUTHORIZED: {"model": ErrorResponse}},
)
def login(
    payload: Any = Body(default=None),
    db: Session = Depends(get_db),
    auth_service: AuthService = Depends(get_auth_service),
) -> AuthResponse:
    return auth_service.login(db, payload)
