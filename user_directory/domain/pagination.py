from __future__ import annotations

import math
import re
from typing import Optional

from pydantic import BaseModel, Field


PAGE_PARAM_PATTERN = re.compile(r"[+-]?[0-9]+")


def parse_page_param(raw: Optional[str]) -> int:
    """Parse the ``page`` query value; anything unusable becomes page 1.

    Only plain ASCII integers are accepted, so digit separators ("1_0") and
    non-ASCII digits fall back to page 1.
    """

    if raw is None:
        return 1
    value = raw.strip()
    if not PAGE_PARAM_PATTERN.fullmatch(value):
        return 1
    return max(int(value), 1)


class PageRequest(BaseModel):
    """Transient page window plus optional name filter."""

    page: int = Field(default=1, ge=1)
    limit: int = Field(default=8, ge=1)
    search: str = ""

    @classmethod
    def clamped(cls, page: int, limit: int, search: Optional[str] = None) -> "PageRequest":
        return cls(page=max(page, 1), limit=max(limit, 1), search=search or "")

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit

    @property
    def window(self) -> slice:
        return slice(self.offset, self.offset + self.limit)


def total_pages(total: int, limit: int) -> int:
    if total <= 0 or limit <= 0:
        return 0
    return math.ceil(total / limit)


class PageLinks(BaseModel):
    """Pagination controls derived from the current page and the total."""

    page: int
    total_pages: int
    pages: list[int]
    has_previous: bool
    has_next: bool
    previous_page: int
    next_page: int

    @property
    def visible(self) -> bool:
        return self.total_pages > 1

    @classmethod
    def build(cls, page: int, total: int, limit: int) -> "PageLinks":
        count = total_pages(total, limit)
        return cls(
            page=page,
            total_pages=count,
            pages=list(range(1, count + 1)),
            has_previous=page > 1,
            has_next=page < count,
            previous_page=max(page - 1, 1),
            next_page=page + 1,
        )
