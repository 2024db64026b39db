"""Pure derivation from catalog and table state to the rendered rows."""
from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from datetime import datetime

from modelprices.model.record import DisplayRecord
from modelprices.pagination import Page, paginate
from modelprices.query import QueryState, distinct_providers, filter_records
from modelprices.sorting import SortState, sort_records


@dataclass(frozen=True)
class TableView:
    """Everything a renderer needs for one render cycle."""

    page: Page
    providers: tuple[str, ...]
    query: QueryState
    sort: SortState
    visible_columns: tuple[str, ...] = ()
    show_descriptions: bool = False
    error: str | None = None
    loading: bool = False
    last_updated: datetime | None = None
    pending_query: str | None = None

    @property
    def rows(self) -> tuple[DisplayRecord, ...]:
        return self.page.rows

    @property
    def total(self) -> int:
        return self.page.total

    @property
    def has_more(self) -> bool:
        return self.page.has_more

    def to_dict(self) -> dict:
        return {
            "rows": [r.to_dict() for r in self.rows],
            "total": self.total,
            "has_more": self.has_more,
            "providers": list(self.providers),
            "query": {
                "text": self.query.text,
                "providers": sorted(self.query.providers),
                "hide_free": self.query.hide_free,
            },
            "sort": {"key": self.sort.key, "direction": str(self.sort.direction)},
            "visible_columns": list(self.visible_columns),
            "show_descriptions": self.show_descriptions,
            "error": self.error,
            "loading": self.loading,
            "last_updated": (
                self.last_updated.isoformat() if self.last_updated else None
            ),
        }


def derive_rows(
    catalog: Sequence[DisplayRecord],
    query: QueryState,
    sort: SortState,
    limit: int,
    search_descriptions: bool = True,
) -> Page:
    """Filter, then sort, then take the first ``limit`` rows."""
    filtered = filter_records(catalog, query, search_descriptions)
    return paginate(sort_records(filtered, sort), limit)


def derive_view(
    catalog: Sequence[DisplayRecord],
    query: QueryState,
    sort: SortState,
    limit: int,
    *,
    search_descriptions: bool = True,
    **extra,
) -> TableView:
    return TableView(
        page=derive_rows(catalog, query, sort, limit, search_descriptions),
        providers=tuple(distinct_providers(catalog)),
        query=query,
        sort=sort,
        **extra,
    )
