"""modelprices: searchable, sortable model pricing table."""
from __future__ import annotations

from modelprices.config import AppConfig, TableOptions
from modelprices.errors import CatalogError, FetchError, ParseError
from modelprices.fetcher import CatalogFetcher
from modelprices.model import DisplayRecord, RawCatalogEntry
from modelprices.state import TableState

__version__ = "0.1.0"

__all__ = [
    "AppConfig",
    "TableOptions",
    "CatalogError",
    "FetchError",
    "ParseError",
    "CatalogFetcher",
    "DisplayRecord",
    "RawCatalogEntry",
    "TableState",
]
