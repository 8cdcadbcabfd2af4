"""Server-rendered user dashboard page."""

from typing import Optional
from urllib.parse import urlencode

import structlog
from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from user_directory.api.deps import get_user_directory
from user_directory.core.config import PACKAGE_DIR, Settings, get_settings
from user_directory.domain.pagination import PageLinks, parse_page_param
from user_directory.services.user_directory import UserDirectoryService

logger = structlog.get_logger()

router = APIRouter(tags=["dashboard"])
templates = Jinja2Templates(directory=str(PACKAGE_DIR / "templates"))

CARD_VARIANTS = 4


def page_href(page: int, search: str) -> str:
    return "/?" + urlencode({"page": page, "search": search})


def empty_message(search: str) -> str:
    if search:
        return f'No users found for "{search}".'
    return "No users available. Please try again later."


@router.get("/", response_class=HTMLResponse)
async def dashboard(
    request: Request,
    page: Optional[str] = Query(None),
    search: Optional[str] = Query(None),
    directory: UserDirectoryService = Depends(get_user_directory),
    settings: Settings = Depends(get_settings),
):
    """Render the user directory for the requested page and search term."""
    current_page = parse_page_param(page)
    search = search or ""
    limit = settings.page_size

    result = await directory.fetch_page(current_page, limit, search)
    links = PageLinks.build(current_page, result.total, limit)

    logger.debug(
        "dashboard.rendered",
        search=search,
        page=current_page,
        count=len(result.users),
        total=result.total,
        total_pages=links.total_pages,
    )

    return templates.TemplateResponse(
        request,
        "dashboard.html",
        {
            "title": settings.app_name,
            "users": result.users,
            "search": search,
            "links": links,
            "empty_message": empty_message(search),
            "card_variants": CARD_VARIANTS,
            "page_href": page_href,
        },
    )
