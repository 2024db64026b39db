"""Explicit container for catalog and table UI state."""
from __future__ import annotations

import logging
import threading
from dataclasses import replace
from datetime import datetime, timezone
from typing import Protocol

from modelprices.columns import default_visible, toggle_column
from modelprices.config import AppConfig
from modelprices.debounce import Debouncer
from modelprices.errors import FetchError
from modelprices.model.record import DisplayRecord
from modelprices.pagination import next_limit
from modelprices.pipeline import TableView, derive_rows, derive_view
from modelprices.query import QueryState
from modelprices.sorting import SortState

logger = logging.getLogger(__name__)


class Fetcher(Protocol):
    def fetch(self) -> tuple[DisplayRecord, ...]: ...


class TableState:
    """Catalog snapshot plus query, sort and pagination state.

    Mutations happen under a lock; :meth:`view` derives the rows from a
    consistent snapshot. Changing the search text, the provider set or the
    free-tier toggle resets the display limit to one page. Sorting and
    pinning do not.
    """

    def __init__(
        self,
        config: AppConfig | None = None,
        catalog: tuple[DisplayRecord, ...] = (),
        debouncer: Debouncer[str] | None = None,
    ) -> None:
        self.config = config or AppConfig()
        self._lock = threading.Lock()
        self._fetch_lock = threading.Lock()
        self._catalog = tuple(catalog)
        self._query = QueryState()
        self._sort = SortState()
        self._limit = self.config.page_size
        self._error: str | None = None
        self._loading = False
        self._last_updated: datetime | None = None
        self._show_descriptions = False
        self._visible_columns = default_visible(self.config.table)
        self._debouncer = debouncer or Debouncer(
            self.set_query, delay=self.config.debounce_seconds
        )

    # --- read -----------------------------------------------------------------

    @property
    def catalog(self) -> tuple[DisplayRecord, ...]:
        with self._lock:
            return self._catalog

    @property
    def query(self) -> QueryState:
        with self._lock:
            return self._query

    @property
    def limit(self) -> int:
        with self._lock:
            return self._limit

    @property
    def loading(self) -> bool:
        with self._lock:
            return self._loading

    def get(self, model_id: str) -> DisplayRecord | None:
        with self._lock:
            for record in self._catalog:
                if record.id == model_id:
                    return record
        return None

    def view(self) -> TableView:
        with self._lock:
            return derive_view(
                self._catalog,
                self._query,
                self._sort,
                self._limit,
                search_descriptions=self.config.table.descriptions,
                visible_columns=self._visible_columns,
                show_descriptions=self._show_descriptions,
                error=self._error,
                loading=self._loading,
                last_updated=self._last_updated,
                pending_query=self._debouncer.pending,
            )

    # --- catalog --------------------------------------------------------------

    def refresh(self, fetcher: Fetcher) -> bool:
        """Replace the catalog with a fresh fetch.

        Returns True when a new snapshot was installed. A call made while
        another refresh is running returns False immediately. On failure the
        previous snapshot stays in place and the error message is kept for
        display.
        """
        if not self._fetch_lock.acquire(blocking=False):
            logger.info("Refresh already in progress; skipping")
            return False
        try:
            with self._lock:
                self._loading = True
                self._error = None
            try:
                records = fetcher.fetch()
            except FetchError as exc:
                logger.error("Error fetching models: %s", exc)
                with self._lock:
                    self._error = str(exc)
                return False

            with self._lock:
                if self.config.preserve_pins:
                    records = _carry_pins(self._catalog, records)
                self._catalog = tuple(records)
                self._last_updated = datetime.now(timezone.utc)
                self._limit = self.config.page_size
            return True
        finally:
            with self._lock:
                self._loading = False
            self._fetch_lock.release()

    def toggle_keep(self, model_id: str) -> DisplayRecord:
        """Flip the pin on one record. Raises ``KeyError`` for unknown ids."""
        with self._lock:
            for index, record in enumerate(self._catalog):
                if record.id == model_id:
                    updated = replace(record, keep=not record.keep)
                    self._catalog = (
                        self._catalog[:index] + (updated,) + self._catalog[index + 1:]
                    )
                    return updated
        raise KeyError(model_id)

    # --- query ----------------------------------------------------------------

    def type_query(self, text: str) -> None:
        """Debounced search input; commits via :meth:`set_query`."""
        self._debouncer.push(text)

    def set_query(self, text: str) -> None:
        with self._lock:
            if text == self._query.text:
                return
            self._query = self._query.with_text(text)
            self._limit = self.config.page_size

    def toggle_provider(self, provider: str) -> None:
        with self._lock:
            self._query = self._query.toggle_provider(provider)
            self._limit = self.config.page_size

    def toggle_hide_free(self) -> None:
        with self._lock:
            self._query = self._query.toggle_hide_free()
            self._limit = self.config.page_size

    def clear_filters(self) -> None:
        self._debouncer.cancel()
        with self._lock:
            self._query = QueryState()
            self._limit = self.config.page_size

    # --- presentation ---------------------------------------------------------

    def request_sort(self, key: str) -> SortState:
        with self._lock:
            self._sort = self._sort.request(key)
            return self._sort

    def load_more(self) -> int:
        with self._lock:
            total = derive_rows(
                self._catalog,
                self._query,
                self._sort,
                self._limit,
                self.config.table.descriptions,
            ).total
            self._limit = next_limit(self._limit, total, self.config.page_size)
            return self._limit

    def toggle_descriptions(self) -> None:
        if not self.config.table.descriptions:
            return
        with self._lock:
            self._show_descriptions = not self._show_descriptions

    def toggle_column(self, column_id: str) -> tuple[str, ...]:
        with self._lock:
            self._visible_columns = toggle_column(
                self._visible_columns, column_id, self.config.table
            )
            return self._visible_columns


def _carry_pins(
    previous: tuple[DisplayRecord, ...], fresh: tuple[DisplayRecord, ...]
) -> tuple[DisplayRecord, ...]:
    pinned = {r.id for r in previous if r.keep}
    if not pinned:
        return fresh
    return tuple(replace(r, keep=True) if r.id in pinned else r for r in fresh)
