from fastapi import APIRouter

from cvexport.core.config import settings

router = APIRouter(prefix="/api", tags=["Root"])


@router.get("/")
def root():
    return {
        "service": settings.app_name,
        "env": settings.env,
        "export": "POST /api/cv/export/{cv_id}",
        "blank_page_removal": settings.BLANK_PAGE_REMOVAL_ENABLED,
        "docs": "/docs",
    }
