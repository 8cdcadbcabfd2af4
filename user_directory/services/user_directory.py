"""
User Directory Service

Turns a page request into a page of users plus a total count.

The remote API has no server-side text filtering, so a listing strategy is
chosen per request:
- no search term: ask the API for the page directly (NativePageListing)
- search term: fetch every record, filter by name, then slice (FilteredListing)

Either way exactly one remote call is made, and failures degrade to an empty
result instead of propagating to the caller.
"""

from typing import List, Protocol, Tuple

import structlog

from user_directory.core.errors import RetrievalFailure
from user_directory.domain.pagination import PageRequest
from user_directory.domain.users import PageResult, User
from user_directory.services.users_source import UsersSource

logger = structlog.get_logger()


def name_matches(user: User, search: str) -> bool:
    """Case-insensitive substring match on the user's name only."""
    return search.lower() in user.name.lower()


class ListingStrategy(Protocol):
    async def list(self, source: UsersSource, request: PageRequest) -> Tuple[List[User], int]:
        ...


class NativePageListing:
    """Let the remote API paginate; total comes from its response metadata."""

    def __init__(self, default_total: int = 10):
        self.default_total = default_total

    async def list(self, source: UsersSource, request: PageRequest) -> Tuple[List[User], int]:
        users, total = await source.list_page(request.page, request.limit)
        # Missing, unparsable or zero header all fall back
        return users[: request.limit], total or self.default_total


class FilteredListing:
    """Fetch the full record set and filter/paginate locally."""

    async def list(self, source: UsersSource, request: PageRequest) -> Tuple[List[User], int]:
        users = await source.list_all()
        filtered = [user for user in users if name_matches(user, request.search)]
        return filtered[request.window], len(filtered)


class UserDirectoryService:
    """Data provider behind the directory page and the JSON listing."""

    def __init__(self, source: UsersSource, default_total: int = 10):
        self.source = source
        self.default_total = default_total

    def strategy_for(self, request: PageRequest) -> ListingStrategy:
        if request.search:
            return FilteredListing()
        return NativePageListing(default_total=self.default_total)

    async def fetch_page(self, page: int, limit: int, search: str = "") -> PageResult:
        """
        Return one page of users and the matching total.

        ``page`` and ``limit`` are floored at 1. Never raises for remote
        problems: any RetrievalFailure becomes ``PageResult(users=[], total=0)``
        with ``failure`` set.
        """
        request = PageRequest.clamped(page, limit, search)
        strategy = self.strategy_for(request)

        try:
            users, total = await strategy.list(self.source, request)
        except RetrievalFailure as e:
            logger.error(
                "user_directory.fetch_failed",
                page=request.page,
                limit=request.limit,
                search=request.search,
                status_code=e.status_code,
                error=str(e),
            )
            return PageResult.failed(str(e))

        logger.info(
            "user_directory.page_fetched",
            page=request.page,
            limit=request.limit,
            search=request.search,
            count=len(users),
            total=total,
        )
        return PageResult(users=users, total=total)
