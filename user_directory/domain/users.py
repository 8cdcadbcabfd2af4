from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class User(BaseModel):
    """User record owned by the remote users API."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: int
    name: str
    email: str
    phone: str


class PageResult(BaseModel):
    """
    One page of users plus the count of all matching records.

    ``failure`` is set when the remote source could not be read; the page is
    then empty, which lets callers tell "no matches" from "source unreachable".
    """

    users: list[User] = Field(default_factory=list)
    total: int = Field(default=0, ge=0)
    failure: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.failure is None

    @classmethod
    def failed(cls, reason: str) -> "PageResult":
        return cls(users=[], total=0, failure=reason)


class UsersPageResponse(BaseModel):
    """JSON body for the users listing endpoint."""

    users: list[User]
    total: int
    page: int
    limit: int
    total_pages: int
    has_more: bool
    ok: bool
