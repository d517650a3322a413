from fastapi import APIRouter

from .title_routes import router as title_router

router = APIRouter()
router.include_router(title_router, tags=["Titles"])

__all__ = ['router']
