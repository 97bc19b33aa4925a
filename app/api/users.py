from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Query

from db import UserSchema
from models import UserStats, UserSummaryDTO, UserSummaryPage
from services.stats import get_user_stats
from services.user_summaries import UserSummaryService
from api.deps import get_current_user, get_user_summary_service

router = APIRouter(prefix="/api/users/me", tags=["users"])


@router.get("/summaries", response_model=UserSummaryPage)
def list_summaries(
    page: int = 0,
    size: int = 10,
    saved: Optional[bool] = None,
    sort_by: str = Query("createdAt", alias="sortBy"),
    sort_order: str = Query("desc", alias="sortOrder"),
    user: UserSchema = Depends(get_current_user),
    summaries: UserSummaryService = Depends(get_user_summary_service),
) -> UserSummaryPage:
    return summaries.get_user_summaries(
        user,
        page=page,
        size=size,
        saved=saved,
        sort_by=sort_by,
        sort_order=sort_order,
    )


@router.get("/summaries/{summary_id}", response_model=UserSummaryDTO)
def get_summary(
    summary_id: int,
    user: UserSchema = Depends(get_current_user),
    summaries: UserSummaryService = Depends(get_user_summary_service),
) -> UserSummaryDTO:
    return summaries.get_user_summary(user, summary_id)


@router.post("/summaries/{summary_id}/save")
def save_summary(
    summary_id: int,
    user: UserSchema = Depends(get_current_user),
    summaries: UserSummaryService = Depends(get_user_summary_service),
) -> dict:
    summaries.toggle_saved(user, summary_id, True)
    return {}


@router.delete("/summaries/{summary_id}/save")
def unsave_summary(
    summary_id: int,
    user: UserSchema = Depends(get_current_user),
    summaries: UserSummaryService = Depends(get_user_summary_service),
) -> dict:
    summaries.toggle_saved(user, summary_id, False)
    return {}


@router.get("/stats", response_model=UserStats)
def stats(user: UserSchema = Depends(get_current_user)) -> UserStats:
    return get_user_stats(user.id)
