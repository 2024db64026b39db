"""Search, provider and free-tier filtering."""
from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field, replace

from modelprices.formatting import parse_price
from modelprices.model.record import DisplayRecord

FREE_MARKER = "(free)"


@dataclass(frozen=True)
class QueryState:
    text: str = ""
    providers: frozenset[str] = field(default_factory=frozenset)
    hide_free: bool = False

    def with_text(self, text: str) -> QueryState:
        return replace(self, text=text)

    def toggle_provider(self, provider: str) -> QueryState:
        return replace(self, providers=self.providers ^ {provider})

    def toggle_hide_free(self) -> QueryState:
        return replace(self, hide_free=not self.hide_free)


def is_free(record: DisplayRecord) -> bool:
    """Either the name heuristic or a zero price is enough."""
    return (
        FREE_MARKER in record.name
        or parse_price(record.input_cost) == 0
        or parse_price(record.output_cost) == 0
    )


def matches_text(
    record: DisplayRecord, text: str, search_descriptions: bool = True
) -> bool:
    name = record.name.lower()
    if all(term.lower() in name for term in text.split()):
        return True

    needle = text.lower()
    if needle in record.provider.lower():
        return True
    if any(needle in modality.lower() for modality in record.modalities):
        return True
    if any(needle in feature.lower() for feature in record.features):
        return True
    return search_descriptions and needle in record.description.lower()


def matches(
    record: DisplayRecord, query: QueryState, search_descriptions: bool = True
) -> bool:
    """Pinned records always pass; otherwise text, provider and free rules must all pass."""
    if record.keep:
        return True
    if not matches_text(record, query.text, search_descriptions):
        return False
    if query.providers and record.provider not in query.providers:
        return False
    if query.hide_free and is_free(record):
        return False
    return True


def filter_records(
    records: Iterable[DisplayRecord],
    query: QueryState,
    search_descriptions: bool = True,
) -> list[DisplayRecord]:
    return [r for r in records if matches(r, query, search_descriptions)]


def distinct_providers(records: Iterable[DisplayRecord]) -> list[str]:
    """Providers in order of first appearance."""
    return list(dict.fromkeys(r.provider for r in records))
