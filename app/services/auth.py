"""Account registration, login, and bearer token handling."""
from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

import bcrypt
import jwt

from core.config import AuthSettings
from core.exceptions import AuthenticationError
from db import UserRepository, UserSchema
from models import AuthResponse

logger = logging.getLogger(__name__)


# bcrypt only looks at the first 72 bytes and newer releases reject longer input
_BCRYPT_MAX_BYTES = 72


def _password_bytes(password: str) -> bytes:
    return password.encode("utf-8")[:_BCRYPT_MAX_BYTES]


def hash_password(password: str) -> str:
    return bcrypt.hashpw(_password_bytes(password), bcrypt.gensalt()).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    try:
        return bcrypt.checkpw(_password_bytes(password), password_hash.encode("utf-8"))
    except ValueError:
        # Malformed stored hash
        return False


def create_access_token(user: UserSchema, settings: AuthSettings) -> str:
    now = datetime.now(timezone.utc)
    payload = {
        "sub": user.username,
        "role": user.role.value,
        "iat": now,
        "exp": now + timedelta(minutes=settings.token_expire_minutes),
    }
    return jwt.encode(payload, settings.secret_key.get_secret_value(), algorithm=settings.algorithm)


def decode_access_token(token: str, settings: AuthSettings) -> Optional[str]:
    """Username from a valid token, None for anything expired or forged."""
    try:
        payload = jwt.decode(
            token,
            settings.secret_key.get_secret_value(),
            algorithms=[settings.algorithm],
        )
    except jwt.PyJWTError:
        return None
    subject = payload.get("sub")
    return subject if isinstance(subject, str) and subject else None


class AuthService:
    """Registers and authenticates users against the users table."""

    def __init__(self, settings: AuthSettings, users: Optional[UserRepository] = None):
        self.settings = settings
        self.users = users or UserRepository()

    def register(self, username: str, email: str, password: str) -> AuthResponse:
        if self.users.exists_by_username(username):
            raise AuthenticationError("Username already exists")
        if self.users.exists_by_email(email):
            raise AuthenticationError("Email already exists")

        user = self.users.create_user(
            username=username,
            email=email,
            password_hash=hash_password(password),
        )
        logger.info("Registered user | username=%s", user.username)
        return self._response(user)

    def authenticate(self, username: str, password: str) -> AuthResponse:
        record = self.users.get_by_username(username)
        if record is None or not verify_password(password, record.password_hash):
            raise AuthenticationError("Bad credentials")
        return self._response(UserSchema.model_validate(record))

    def resolve_token(self, token: str) -> Optional[UserSchema]:
        """User behind a bearer token, or None if the token or user is gone."""
        username = decode_access_token(token, self.settings)
        if username is None:
            return None
        record = self.users.get_by_username(username)
        return UserSchema.model_validate(record) if record is not None else None

    def _response(self, user: UserSchema) -> AuthResponse:
        return AuthResponse(
            token=create_access_token(user, self.settings),
            username=user.username,
            email=user.email,
            role=user.role.value,
        )
