"""Error hierarchy for catalog retrieval."""
from __future__ import annotations


class CatalogError(Exception):
    """Base error for all modelprices errors."""

    def __init__(self, message: str, *, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.cause = cause


class FetchError(CatalogError):
    """The catalog could not be retrieved.

    ``status_code`` and ``reason`` are set when the upstream answered with a
    non-2xx status; both are ``None`` for transport-level failures.
    """

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        reason: str | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message, cause=cause)
        self.status_code = status_code
        self.reason = reason


class ParseError(FetchError):
    """The catalog response was not valid JSON or lacked required fields."""


def error_from_status(status_code: int, reason: str) -> FetchError:
    """Build the error surfaced for a non-2xx catalog response."""
    return FetchError(
        f"Failed to fetch models: {status_code} {reason}",
        status_code=status_code,
        reason=reason,
    )
