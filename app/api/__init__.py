from fastapi import APIRouter

from api import auth, docs, showcase, summarize, users

router = APIRouter()
router.include_router(summarize.router)
router.include_router(users.router)
router.include_router(showcase.router)
router.include_router(auth.router)
router.include_router(docs.router)

__all__ = ["router"]
