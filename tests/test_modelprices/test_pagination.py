"""Tests for the pagination window."""
from __future__ import annotations

from modelprices.pagination import PAGE_SIZE, Page, next_limit, paginate

from tests.test_modelprices.conftest import make_record


def _records(n: int):
    return [make_record(f"p/m{i}") for i in range(n)]


class TestPaginate:
    def test_prefix_of_limit(self) -> None:
        page = paginate(_records(40), 15)
        assert len(page.rows) == 15
        assert page.rows[0].id == "p/m0"
        assert page.total == 40
        assert page.has_more is True

    def test_fewer_than_limit(self) -> None:
        page = paginate(_records(3), 15)
        assert len(page.rows) == 3
        assert page.has_more is False

    def test_exactly_limit(self) -> None:
        assert paginate(_records(15), 15).has_more is False

    def test_empty(self) -> None:
        page = paginate([], 15)
        assert page == Page(rows=(), total=0, limit=15)
        assert page.has_more is False


class TestNextLimit:
    def test_default_page_size(self) -> None:
        assert PAGE_SIZE == 15

    def test_grows_by_one_page(self) -> None:
        assert next_limit(15, 40) == 30

    def test_noop_when_everything_shown(self) -> None:
        assert next_limit(15, 15) == 15
        assert next_limit(45, 40) == 45

    def test_load_more_until_exhausted(self) -> None:
        records = _records(40)
        limit = PAGE_SIZE
        limit = next_limit(limit, len(records))
        assert len(paginate(records, limit).rows) == min(PAGE_SIZE * 2, 40)
        while paginate(records, limit).has_more:
            limit = next_limit(limit, len(records))
        assert len(paginate(records, limit).rows) == 40
        assert next_limit(limit, len(records)) == limit
