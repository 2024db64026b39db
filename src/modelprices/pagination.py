from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from modelprices.model.record import DisplayRecord

PAGE_SIZE = 15


@dataclass(frozen=True)
class Page:
    """A prefix of the sorted view."""

    rows: tuple[DisplayRecord, ...]
    total: int
    limit: int

    @property
    def has_more(self) -> bool:
        return self.total > self.limit


def paginate(records: Sequence[DisplayRecord], limit: int) -> Page:
    return Page(rows=tuple(records[:limit]), total=len(records), limit=limit)


def next_limit(limit: int, total: int, page_size: int = PAGE_SIZE) -> int:
    """Grow the limit by one page; no-op once everything is shown."""
    if total <= limit:
        return limit
    return limit + page_size
