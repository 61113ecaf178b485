"""
Request dependencies

Routers read the catalog and settings from app.state through these
helpers instead of module-level globals.
"""
from fastapi import HTTPException, Request

from app.models import Catalog, Settings


def get_catalog(request: Request) -> Catalog:
    """Catalog loaded at startup"""
    catalog = getattr(request.app.state, "catalog", None)
    if catalog is None:
        raise HTTPException(status_code=500, detail="Catalog is not loaded")
    return catalog


def get_settings(request: Request) -> Settings:
    return request.app.state.settings
