"""HTTP client wrapper around httpx."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import httpx

from modelprices.config import HttpTimeout
from modelprices.errors import FetchError, ParseError, error_from_status


@dataclass(frozen=True)
class HttpResponse:
    """Parsed HTTP response."""

    status_code: int
    body: Any


class HttpClient:
    """Thin wrapper around :mod:`httpx` that maps errors into modelprices exceptions."""

    def __init__(
        self,
        headers: dict[str, str] | None = None,
        timeout: HttpTimeout | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        t = timeout or HttpTimeout()
        self._client = httpx.Client(
            headers=headers or {},
            timeout=httpx.Timeout(
                connect=t.connect,
                read=t.request,
                write=t.request,
                pool=t.connect,
            ),
            transport=transport,
        )

    def get_json(self, url: str) -> HttpResponse:
        """Send a GET request and return the decoded JSON response.

        Raises :class:`FetchError` on non-2xx status or transport failure and
        :class:`ParseError` when the body is not JSON.
        """
        try:
            resp = self._client.get(url)
        except httpx.RequestError as exc:
            raise FetchError(f"Failed to fetch models: {exc}", cause=exc) from exc

        if not resp.is_success:
            raise error_from_status(resp.status_code, resp.reason_phrase)

        try:
            body = resp.json()
        except ValueError as exc:
            raise ParseError(
                f"Failed to parse catalog response: {exc}: {_excerpt(resp.text)!r}",
                status_code=resp.status_code,
                reason=resp.reason_phrase,
                cause=exc,
            ) from exc

        return HttpResponse(
            status_code=resp.status_code,
            body=body,
        )

    def close(self) -> None:
        """Close the underlying httpx client."""
        self._client.close()


def _excerpt(text: str, limit: int = 80) -> str:
    if len(text) <= limit:
        return text
    return text[:limit] + "..."
