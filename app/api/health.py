"""
Health check endpoint
"""
from fastapi import APIRouter, Depends

from app.dependencies import get_catalog, get_settings
from app.models import Catalog, Settings


router = APIRouter(tags=["health"])


@router.get("/health")
async def health_check(
    catalog: Catalog = Depends(get_catalog),
    settings: Settings = Depends(get_settings)
):
    """Health check endpoint"""
    return {
        "status": "ok",
        "message": settings.title,
        "version": settings.version,
        "total_entries": len(catalog.entries),
        "total_scores": len(catalog.scores)
    }
