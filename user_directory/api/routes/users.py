"""JSON listing of directory users."""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from user_directory.api.deps import get_user_directory
from user_directory.core.config import Settings, get_settings
from user_directory.domain.pagination import parse_page_param, total_pages
from user_directory.domain.users import UsersPageResponse
from user_directory.services.user_directory import UserDirectoryService

router = APIRouter(prefix="/users", tags=["users"])


@router.get("", response_model=UsersPageResponse)
async def list_users(
    page: Optional[str] = Query(None),
    search: str = Query(""),
    limit: Optional[int] = Query(None, ge=1, le=100),
    directory: UserDirectoryService = Depends(get_user_directory),
    settings: Settings = Depends(get_settings),
):
    """List users with optional name search and pagination."""
    current_page = parse_page_param(page)
    page_size = limit or settings.page_size

    result = await directory.fetch_page(current_page, page_size, search)
    pages = total_pages(result.total, page_size)

    return UsersPageResponse(
        users=result.users,
        total=result.total,
        page=current_page,
        limit=page_size,
        total_pages=pages,
        has_more=current_page < pages,
        ok=result.ok,
    )
