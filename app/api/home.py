"""
Home page
"""
from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse

from app.dependencies import get_settings
from app.models import Settings


router = APIRouter(tags=["home"])


@router.get("/", response_class=HTMLResponse)
async def home(request: Request, settings: Settings = Depends(get_settings)):
    """Render the index view"""
    templates = request.app.state.templates
    return templates.TemplateResponse(
        request,
        "index.html",
        {"title": settings.title}
    )
