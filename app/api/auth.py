from __future__ import annotations

import logging

from fastapi import APIRouter, Depends

from db import UserSchema
from models import AuthRequest, AuthResponse, CurrentUser, RegisterRequest
from services.auth import AuthService
from api.deps import get_auth_service, get_current_user

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.post("/register", response_model=AuthResponse)
def register(payload: RegisterRequest, auth: AuthService = Depends(get_auth_service)) -> AuthResponse:
    return auth.register(payload.username, payload.email, payload.password)


@router.post("/login", response_model=AuthResponse)
def login(payload: AuthRequest, auth: AuthService = Depends(get_auth_service)) -> AuthResponse:
    logger.info("Login attempt | username=%s", payload.username)
    response = auth.authenticate(payload.username, payload.password)
    logger.info("Login successful | username=%s", payload.username)
    return response


@router.get("/me", response_model=CurrentUser)
def me(user: UserSchema = Depends(get_current_user)) -> CurrentUser:
    return CurrentUser(username=user.username, email=user.email, role=user.role.value)
