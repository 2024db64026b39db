from __future__ import annotations

from modelprices.model.entry import Architecture, Pricing, RawCatalogEntry
from modelprices.model.record import DisplayRecord

__all__ = [
    # entry
    "Architecture",
    "Pricing",
    "RawCatalogEntry",
    # record
    "DisplayRecord",
]
