"""Table columns and which of them are offered and visible."""
from __future__ import annotations

from dataclasses import dataclass

from modelprices.config import TableOptions


@dataclass(frozen=True)
class Column:
    id: str
    label: str
    always: bool = False


COLUMNS: tuple[Column, ...] = (
    Column("keep", "Keep", always=True),
    Column("name", "Model", always=True),
    Column("provider", "Provider", always=True),
    Column("context_window", "Context"),
    Column("input_cost", "Input Cost", always=True),
    Column("output_cost", "Output Cost", always=True),
    Column("image_cost", "Image Cost", always=True),
    Column("modalities", "Modalities"),
    Column("cache_read_cost", "Cache Read Cost"),
    Column("cache_write_cost", "Cache Write Cost"),
    Column("features", "Features"),
)

_CACHE_COLUMNS = ("cache_read_cost", "cache_write_cost")


def available_columns(options: TableOptions) -> tuple[Column, ...]:
    """Columns offered under the given options, in display order."""
    disabled: set[str] = set()
    if not options.image_cost:
        disabled.add("image_cost")
    if not options.cache_costs:
        disabled.update(_CACHE_COLUMNS)
    return tuple(c for c in COLUMNS if c.id not in disabled)


def default_visible(options: TableOptions) -> tuple[str, ...]:
    columns = available_columns(options)
    if options.compact:
        return tuple(c.id for c in columns if c.always)
    return tuple(c.id for c in columns)


def toggle_column(
    visible: tuple[str, ...], column_id: str, options: TableOptions
) -> tuple[str, ...]:
    """Flip one column's visibility, keeping display order.

    Raises ``KeyError`` for a column that is not offered.
    """
    columns = available_columns(options)
    if column_id not in {c.id for c in columns}:
        raise KeyError(column_id)
    shown = set(visible) ^ {column_id}
    return tuple(c.id for c in columns if c.id in shown)
