"""Ordering of the filtered view."""
from __future__ import annotations

import dataclasses
import math
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from enum import StrEnum
from typing import Any

from modelprices.formatting import parse_context_size, parse_price
from modelprices.model.record import DisplayRecord

CURRENCY_FIELDS = frozenset({
    "input_cost",
    "output_cost",
    "image_cost",
    "cache_read_cost",
    "cache_write_cost",
})
LIST_FIELDS = frozenset({"features", "modalities"})
SORTABLE_FIELDS = frozenset(f.name for f in dataclasses.fields(DisplayRecord))


class SortDirection(StrEnum):
    ASCENDING = "ascending"
    DESCENDING = "descending"


@dataclass(frozen=True)
class SortState:
    key: str = "input_cost"
    direction: SortDirection = SortDirection.ASCENDING

    def __post_init__(self) -> None:
        if self.key not in SORTABLE_FIELDS:
            raise ValueError(f"Unknown sort key: {self.key}")

    def request(self, key: str) -> SortState:
        """Re-selecting the ascending key flips it; anything else sorts ascending."""
        if key == self.key and self.direction == SortDirection.ASCENDING:
            return SortState(key, SortDirection.DESCENDING)
        return SortState(key, SortDirection.ASCENDING)


def _currency_key(label: str) -> tuple[bool, float]:
    # "N/A" parses to nan and sorts after every real price.
    value = parse_price(label)
    if math.isnan(value):
        return (True, 0.0)
    return (False, value)


def sort_key_for(key: str) -> Callable[[DisplayRecord], Any]:
    if key in CURRENCY_FIELDS:
        return lambda r: _currency_key(getattr(r, key))
    if key == "context_window":
        return lambda r: parse_context_size(r.context_window)
    if key in LIST_FIELDS:
        return lambda r: ", ".join(getattr(r, key))
    return lambda r: getattr(r, key)


def sort_records(
    records: Iterable[DisplayRecord], sort: SortState
) -> list[DisplayRecord]:
    """Sort by the active key, then float pinned rows to the top.

    Both passes are stable, so ties keep their catalog order in either
    direction.
    """
    ordered = sorted(
        records,
        key=sort_key_for(sort.key),
        reverse=sort.direction == SortDirection.DESCENDING,
    )
    ordered.sort(key=lambda r: not r.keep)
    return ordered
