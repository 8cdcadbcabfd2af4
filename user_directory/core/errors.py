"""Exception types raised inside the user directory."""

from typing import Optional


class UserDirectoryError(Exception):
    """Base exception for user directory errors."""
    pass


class RetrievalFailure(UserDirectoryError):
    """
    Raised when the remote users API cannot produce a usable response.

    Covers transport errors, non-success HTTP status codes and malformed
    response bodies.
    """

    def __init__(self, reason: str, status_code: Optional[int] = None):
        super().__init__(reason)
        self.reason = reason
        self.status_code = status_code

    def __str__(self) -> str:
        if self.status_code is not None:
            return f"{self.reason} (HTTP {self.status_code})"
        return self.reason
