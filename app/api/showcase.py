from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends

from models import ShowcasePage
from services.showcase import ShowcaseService
from api.deps import get_showcase_service

router = APIRouter(prefix="/api/summaries", tags=["showcase"])


@router.get("/showcase", response_model=ShowcasePage)
def showcase(
    page: int = 0,
    size: int = 3,
    category: Optional[str] = None,
    service: ShowcaseService = Depends(get_showcase_service),
) -> ShowcasePage:
    """Recent summaries from all users, with owner details stripped."""
    return service.get_showcase(page=page, size=size, category=category)
