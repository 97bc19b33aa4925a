from __future__ import annotations

from typing import Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from core.exceptions import NotAuthenticatedError
from db import UserSchema
from services.auth import AuthService
from services.scraper import ArticleScraper
from services.showcase import ShowcaseService
from services.summarizer import SummaryService
from services.user_summaries import UserSummaryService

bearer_scheme = HTTPBearer(auto_error=False)


# Services live on app.state so tests can swap them out
def get_summarizer(request: Request) -> SummaryService:
    return request.app.state.summarizer


def get_scraper(request: Request) -> ArticleScraper:
    return request.app.state.scraper


def get_auth_service(request: Request) -> AuthService:
    return request.app.state.auth


def get_user_summary_service(request: Request) -> UserSummaryService:
    return request.app.state.user_summaries


def get_showcase_service(request: Request) -> ShowcaseService:
    return request.app.state.showcase


def get_optional_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    auth: AuthService = Depends(get_auth_service),
) -> Optional[UserSchema]:
    """Caller behind the bearer token; a missing or bad token is anonymous."""
    if credentials is None or not credentials.credentials:
        return None
    return auth.resolve_token(credentials.credentials)


def get_current_user(user: Optional[UserSchema] = Depends(get_optional_user)) -> UserSchema:
    if user is None:
        raise NotAuthenticatedError("Authentication required")
    return user
