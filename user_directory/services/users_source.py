"""
Users Source

Async HTTP client for the remote users API (JSONPlaceholder-compatible).
Every call goes to the network; responses are never cached.
"""

from typing import Any, List, Optional, Tuple

import httpx
import structlog
from pydantic import ValidationError

from user_directory.core.errors import RetrievalFailure
from user_directory.domain.users import User
from user_directory.telemetry import record_source_request

logger = structlog.get_logger()

TOTAL_COUNT_HEADER = "x-total-count"
NO_STORE_HEADERS = {"Cache-Control": "no-store"}


def parse_total_count(raw: Optional[str]) -> Optional[int]:
    """Parse the total-count header value, returning None when unusable."""
    if raw is None:
        return None
    try:
        total = int(raw.strip())
    except ValueError:
        return None
    if total < 0:
        return None
    return total


class UsersSource:
    """
    Reads user records from ``{base_url}/users``.

    Two calls are supported: one page via the API's native ``_page``/``_limit``
    parameters, or the full record set with no parameters. Any failure is
    raised as RetrievalFailure.
    """

    USERS_PATH = "/users"

    def __init__(
        self,
        base_url: str,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.transport = transport

    async def list_page(self, page: int, limit: int) -> Tuple[List[User], Optional[int]]:
        """
        Fetch a single page of users.

        Returns:
            The page's records and the total from the X-Total-Count header,
            or None when the header is missing or unparsable.
        """
        try:
            response, payload = await self._get(params={"_page": page, "_limit": limit})
            users = self._parse_users(payload)
        except RetrievalFailure:
            record_source_request("page", "error")
            raise
        record_source_request("page", "ok")

        total = parse_total_count(response.headers.get(TOTAL_COUNT_HEADER))
        logger.debug("users_source.page_loaded", page=page, limit=limit, count=len(users), total=total)
        return users, total

    async def list_all(self) -> List[User]:
        """Fetch the entire remote record set."""
        try:
            _, payload = await self._get()
            users = self._parse_users(payload)
        except RetrievalFailure:
            record_source_request("all", "error")
            raise
        record_source_request("all", "ok")

        logger.debug("users_source.all_loaded", count=len(users))
        return users

    def _client(self) -> httpx.AsyncClient:
        kwargs: dict[str, Any] = {"base_url": self.base_url, "follow_redirects": True}
        if self.timeout is not None:
            kwargs["timeout"] = httpx.Timeout(self.timeout)
        if self.transport is not None:
            kwargs["transport"] = self.transport
        return httpx.AsyncClient(**kwargs)

    async def _get(self, params: Optional[dict] = None) -> Tuple[httpx.Response, Any]:
        logger.debug("users_source.request", url=f"{self.base_url}{self.USERS_PATH}", params=params)
        try:
            async with self._client() as client:
                response = await client.get(self.USERS_PATH, params=params, headers=NO_STORE_HEADERS)
        except httpx.HTTPError as e:
            raise RetrievalFailure(f"Request to users API failed: {e}") from e

        if not response.is_success:
            raise RetrievalFailure("Users API returned an error status", status_code=response.status_code)
        try:
            payload = response.json()
        except ValueError as e:
            raise RetrievalFailure(
                "Users API returned a body that is not JSON", status_code=response.status_code
            ) from e
        return response, payload

    def _parse_users(self, payload: Any) -> List[User]:
        if not isinstance(payload, list):
            raise RetrievalFailure(f"Users API returned {type(payload).__name__}, expected a JSON array")
        try:
            return [User.model_validate(item) for item in payload]
        except ValidationError as e:
            raise RetrievalFailure(f"Users API returned a malformed record: {e.error_count()} error(s)") from e
