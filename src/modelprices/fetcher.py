"""Catalog retrieval and normalization into display records."""
from __future__ import annotations

import logging
from typing import Any

from modelprices._http import HttpClient
from modelprices.config import MODEL_URL_PREFIX, AppConfig
from modelprices.errors import ParseError
from modelprices.features import extract_features
from modelprices.formatting import (
    capitalize_first,
    format_context_size,
    format_optional_price,
    format_price,
)
from modelprices.model.entry import RawCatalogEntry
from modelprices.model.record import DisplayRecord

logger = logging.getLogger(__name__)


def provider_from_id(model_id: str) -> str:
    """``"openai/gpt-4o"`` -> ``"Openai"``."""
    return capitalize_first(model_id.split("/", 1)[0])


def normalize_entry(
    entry: RawCatalogEntry, url_prefix: str = MODEL_URL_PREFIX
) -> DisplayRecord:
    return DisplayRecord(
        id=entry.id,
        name=entry.name,
        url=f"{url_prefix}{entry.id}",
        provider=provider_from_id(entry.id),
        context_window=format_context_size(entry.context_length),
        input_cost=format_price(entry.pricing.prompt),
        output_cost=format_price(entry.pricing.completion),
        image_cost=format_optional_price(entry.pricing.image),
        cache_read_cost=format_optional_price(entry.pricing.input_cache_read),
        cache_write_cost=format_optional_price(entry.pricing.input_cache_write),
        features=extract_features(entry),
        modalities=entry.architecture.input_modalities,
        description=entry.description,
        keep=False,
    )


def normalize_catalog(
    payload: Any, url_prefix: str = MODEL_URL_PREFIX
) -> tuple[DisplayRecord, ...]:
    """Map a decoded ``{"data": [...]}`` document to display records.

    Duplicate ids keep their first occurrence.
    """
    if not isinstance(payload, dict):
        raise ParseError("Catalog response is not a JSON object")
    data = payload.get("data")
    if not isinstance(data, list):
        raise ParseError("Catalog response has no 'data' list")

    records: list[DisplayRecord] = []
    seen: set[str] = set()
    for item in data:
        entry = RawCatalogEntry.from_dict(item)
        if entry.id in seen:
            logger.warning("Dropping duplicate catalog entry: %s", entry.id)
            continue
        seen.add(entry.id)
        records.append(normalize_entry(entry, url_prefix))
    return tuple(records)


class CatalogFetcher:
    """Retrieves the full catalog in one GET request."""

    def __init__(
        self,
        config: AppConfig | None = None,
        http: HttpClient | None = None,
    ) -> None:
        self.config = config or AppConfig()
        self._http = http or HttpClient(
            headers={"Accept": "application/json"},
            timeout=self.config.timeout,
        )

    def fetch(self) -> tuple[DisplayRecord, ...]:
        """Fetch and normalize the catalog.

        Raises :class:`~modelprices.errors.FetchError` (or its subclass
        :class:`~modelprices.errors.ParseError`) on failure.
        """
        logger.info("Fetching catalog: url=%s", self.config.catalog_url)
        response = self._http.get_json(self.config.catalog_url)
        records = normalize_catalog(response.body, self.config.model_url_prefix)
        logger.info("Catalog fetched: models=%d", len(records))
        return records

    def close(self) -> None:
        self._http.close()
