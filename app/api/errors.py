"""Map service exceptions to ``{message, details}`` JSON responses."""
from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from core.exceptions import (
    ApiConfigurationError,
    ArticleScrapingError,
    AuthenticationError,
    InvalidRequestError,
    NotAuthenticatedError,
    NotFoundError,
    ProviderError,
    SummarizationError,
)
from models import ErrorResponse

logger = logging.getLogger(__name__)

SUPPORT_SUFFIX = "contact support if the problem persists."

INVALID_REQUEST = (
    "Invalid request format.",
    "Please check your request data and try again. Make sure all required "
    "fields are included and properly formatted.",
)
SUMMARIZATION_FAILED = (
    "Unable to generate summary.",
    "We encountered an issue while processing your article. Please try again "
    f"with a different article or {SUPPORT_SUFFIX}",
)
CONFIGURATION_UNAVAILABLE = (
    "Service temporarily unavailable.",
    "Our summarization service is currently experiencing configuration issues. "
    f"Please try again later or {SUPPORT_SUFFIX}",
)
PROVIDER_AUTH_UNAVAILABLE = (
    "Service temporarily unavailable.",
    "Our AI summarization service is currently experiencing issues. "
    f"Please try again later or {SUPPORT_SUFFIX}",
)
PROVIDER_UNAVAILABLE = (
    "Service temporarily unavailable.",
    "Our AI service is currently experiencing issues. Please try again later.",
)
NOT_AUTHENTICATED = (
    "Authentication required.",
    "Please sign in and include a valid bearer token.",
)
NOT_FOUND = (
    "Summary not found.",
    "The requested summary does not exist or is not available to you.",
)
UNEXPECTED = (
    "Something went wrong.",
    f"We encountered an unexpected issue. Please try again later or {SUPPORT_SUFFIX}",
)


def describe_scraping_error(message: str | None) -> tuple[str, str]:
    """User-facing message and details for a scraper failure message."""
    text = message or ""

    if "Unable to extract sufficient content" in text or "paywall" in text or "JavaScript" in text:
        user_message = "Unable to access article content."
    elif "Failed to connect" in text:
        user_message = "Unable to reach the article URL."
    elif "Invalid URL" in text:
        user_message = "Invalid article URL."
    else:
        user_message = "Unable to process the article."

    if "paywall" in text:
        details = (
            "The article may be behind a paywall or require special access. Please try "
            "a different article or check if you can access it directly."
        )
    elif "Failed to connect" in text:
        details = "Please check the URL and try again. The website may be temporarily unavailable."
    elif "Invalid URL" in text:
        details = "Please check that the URL is correct and points to a valid article."
    else:
        details = (
            "Please verify the article URL is accessible and try again, or "
            + SUPPORT_SUFFIX
        )
    return user_message, details


def describe_authentication_error(message: str | None) -> tuple[str, str]:
    text = message or ""
    if "already exists" in text:
        return "Registration failed.", text
    return "Authentication failed.", "Invalid username or password."


def error_response(status_code: int, body: tuple[str, str]) -> JSONResponse:
    message, details = body
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(message=message, details=details).model_dump(),
    )


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(RequestValidationError)
    async def _validation(request: Request, exc: RequestValidationError):
        logger.info("Rejected request | path=%s errors=%s", request.url.path, exc.errors())
        return error_response(400, INVALID_REQUEST)

    @app.exception_handler(InvalidRequestError)
    async def _invalid(request: Request, exc: InvalidRequestError):
        return error_response(400, INVALID_REQUEST)

    @app.exception_handler(ArticleScrapingError)
    async def _scraping(request: Request, exc: ArticleScrapingError):
        logger.warning("Scraping failed | path=%s error=%s", request.url.path, exc)
        return error_response(400, describe_scraping_error(str(exc)))

    @app.exception_handler(SummarizationError)
    async def _summarization(request: Request, exc: SummarizationError):
        logger.error("Summarization failed | error=%s", exc)
        return error_response(500, SUMMARIZATION_FAILED)

    @app.exception_handler(ApiConfigurationError)
    async def _configuration(request: Request, exc: ApiConfigurationError):
        logger.error("Provider not configured | error=%s", exc)
        return error_response(503, CONFIGURATION_UNAVAILABLE)

    @app.exception_handler(ProviderError)
    async def _provider(request: Request, exc: ProviderError):
        logger.error(
            "Provider failed | auth_failure=%s upstream_status=%s error=%s",
            exc.auth_failure,
            exc.status_code,
            exc,
        )
        if exc.auth_failure:
            return error_response(503, PROVIDER_AUTH_UNAVAILABLE)
        return error_response(502, PROVIDER_UNAVAILABLE)

    @app.exception_handler(AuthenticationError)
    async def _authentication(request: Request, exc: AuthenticationError):
        logger.info("Authentication rejected | path=%s reason=%s", request.url.path, exc)
        return error_response(400, describe_authentication_error(str(exc)))

    @app.exception_handler(NotAuthenticatedError)
    async def _not_authenticated(request: Request, exc: NotAuthenticatedError):
        return error_response(401, NOT_AUTHENTICATED)

    @app.exception_handler(NotFoundError)
    async def _not_found(request: Request, exc: NotFoundError):
        return error_response(404, NOT_FOUND)

    @app.exception_handler(Exception)
    async def _unexpected(request: Request, exc: Exception):
        logger.exception("Unhandled error | path=%s", request.url.path)
        return error_response(500, UNEXPECTED)
