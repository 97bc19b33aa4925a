from __future__ import annotations

import logging
from typing import Optional

from fastapi import APIRouter, Depends
from fastapi.concurrency import run_in_threadpool

from core.exceptions import InvalidRequestError
from core.text import text_title
from db import UserSchema
from models import SummarizationResponse, SummarizeRequest
from services.scraper import ArticleScraper
from services.summarizer import SummaryService
from services.user_summaries import UserSummaryService
from api.deps import get_optional_user, get_scraper, get_summarizer, get_user_summary_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/summarize", tags=["summarize"])


def _store_for_user(
    user: Optional[UserSchema],
    response: SummarizationResponse,
    original_content: str,
    summaries: UserSummaryService,
) -> None:
    if user is None:
        return
    summaries.create_user_summary(user, response, original_content)


@router.post("/text", response_model=SummarizationResponse)
async def summarize_text(
    payload: SummarizeRequest,
    summarizer: SummaryService = Depends(get_summarizer),
    summaries: UserSummaryService = Depends(get_user_summary_service),
    user: Optional[UserSchema] = Depends(get_optional_user),
) -> SummarizationResponse:
    content = payload.content
    if not content:
        raise InvalidRequestError("content is required")

    response = await summarizer.summarize(content, text_title(content))
    await run_in_threadpool(_store_for_user, user, response, content, summaries)
    return response


@router.post("/url", response_model=SummarizationResponse)
async def summarize_url(
    payload: SummarizeRequest,
    scraper: ArticleScraper = Depends(get_scraper),
    summarizer: SummaryService = Depends(get_summarizer),
    summaries: UserSummaryService = Depends(get_user_summary_service),
    user: Optional[UserSchema] = Depends(get_optional_user),
) -> SummarizationResponse:
    url = payload.url
    if not url:
        raise InvalidRequestError("url is required")

    article = await run_in_threadpool(scraper.scrape, url)
    response = await summarizer.summarize(article.content, article.title)
    await run_in_threadpool(_store_for_user, user, response, article.content, summaries)
    return response
