"""Tests for catalog fetching and normalization."""
from __future__ import annotations

import pytest

from modelprices._http import HttpClient
from modelprices.config import AppConfig
from modelprices.errors import FetchError, ParseError
from modelprices.fetcher import (
    CatalogFetcher,
    normalize_catalog,
    normalize_entry,
    provider_from_id,
)
from modelprices.model.entry import RawCatalogEntry

from tests.test_modelprices.conftest import json_transport, make_raw


def _fetcher(transport) -> CatalogFetcher:
    return CatalogFetcher(AppConfig(), http=HttpClient(transport=transport))


class TestProviderFromId:
    def test_prefix_is_capitalized(self) -> None:
        assert provider_from_id("openai/gpt-4o") == "Openai"

    def test_only_first_segment(self) -> None:
        assert provider_from_id("meta-llama/llama-3/instruct") == "Meta-llama"

    def test_no_slash(self) -> None:
        assert provider_from_id("openrouter") == "Openrouter"


class TestNormalizeEntry:
    def test_maps_all_fields(self) -> None:
        entry = RawCatalogEntry.from_dict(
            make_raw(
                image="0.003613",
                input_cache_read="0.0000015",
                input_cache_write="-1",
            )
        )
        record = normalize_entry(entry)
        assert record.id == "openai/gpt-4o"
        assert record.name == "OpenAI: GPT-4o"
        assert record.url == "https://openrouter.ai/models/openai/gpt-4o"
        assert record.provider == "Openai"
        assert record.context_window == "128K"
        assert record.input_cost == "$2.5"
        assert record.output_cost == "$10.0"
        assert record.image_cost == "$3613.0"
        assert record.cache_read_cost == "$1.5"
        assert record.cache_write_cost == "N/A"
        assert record.features == ("Vision", "Function calling", "Long context")
        assert record.modalities == ("text", "image")
        assert record.description == "Flagship multimodal model."
        assert record.keep is False

    def test_absent_optional_prices(self) -> None:
        record = normalize_entry(RawCatalogEntry.from_dict(make_raw()))
        assert record.image_cost == "N/A"
        assert record.cache_read_cost == "N/A"
        assert record.cache_write_cost == "N/A"

    def test_custom_url_prefix(self) -> None:
        record = normalize_entry(RawCatalogEntry.from_dict(make_raw()), "https://example.test/m/")
        assert record.url == "https://example.test/m/openai/gpt-4o"


class TestNormalizeCatalog:
    def test_preserves_order(self) -> None:
        payload = {"data": [make_raw(id="b/one"), make_raw(id="a/two")]}
        assert [r.id for r in normalize_catalog(payload)] == ["b/one", "a/two"]

    def test_duplicate_ids_keep_first(self) -> None:
        payload = {"data": [make_raw(id="a/m", name="First"), make_raw(id="a/m", name="Second")]}
        records = normalize_catalog(payload)
        assert len(records) == 1
        assert records[0].name == "First"

    def test_empty(self) -> None:
        assert normalize_catalog({"data": []}) == ()

    def test_missing_data(self) -> None:
        with pytest.raises(ParseError):
            normalize_catalog({"models": []})

    def test_not_an_object(self) -> None:
        with pytest.raises(ParseError):
            normalize_catalog([])

    def test_bad_entry(self) -> None:
        with pytest.raises(ParseError):
            normalize_catalog({"data": [{"id": "a/m"}]})


class TestCatalogFetcher:
    def test_fetch_success(self) -> None:
        fetcher = _fetcher(json_transport(200, {"data": [make_raw(id="a/m1"), make_raw(id="b/m2")]}))
        records = fetcher.fetch()
        assert [r.id for r in records] == ["a/m1", "b/m2"]
        assert all(r.keep is False for r in records)
        fetcher.close()

    def test_fetch_non_2xx(self) -> None:
        fetcher = _fetcher(json_transport(500, {}))
        with pytest.raises(FetchError, match="500 Internal Server Error") as exc_info:
            fetcher.fetch()
        assert exc_info.value.status_code == 500
        fetcher.close()

    def test_fetch_malformed_document(self) -> None:
        fetcher = _fetcher(json_transport(200, {"data": "nope"}))
        with pytest.raises(ParseError):
            fetcher.fetch()
        fetcher.close()
