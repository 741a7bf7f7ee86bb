"""Unit tests for the Paginator and PaginationQuery clamping."""

from __future__ import annotations

import pytest

from dataselect.selection import PaginationQuery, Paginator


class TestPaginationQuery:
    def test_defaults(self) -> None:
        page = PaginationQuery()
        assert page.page_number == 1
        assert page.page_size == 10

    def test_offset(self) -> None:
        assert PaginationQuery(3, 10).offset == 20

    @pytest.mark.parametrize("page_number", [0, -5])
    def test_page_number_clamped(self, page_number: int) -> None:
        assert PaginationQuery(page_number, 10).page_number == 1

    @pytest.mark.parametrize("page_size", [0, -1])
    def test_page_size_clamped(self, page_size: int) -> None:
        assert PaginationQuery(1, page_size).page_size == 1

    def test_frozen(self) -> None:
        with pytest.raises((AttributeError, TypeError)):
            PaginationQuery().page_number = 2  # type: ignore[misc]


class TestPaginator:
    def test_no_page_returns_everything(self) -> None:
        assert Paginator().apply(list(range(5)), None) == [0, 1, 2, 3, 4]

    def test_first_page(self) -> None:
        assert Paginator().apply(list(range(25)), PaginationQuery(1, 10)) == list(range(10))

    def test_last_page_partial(self) -> None:
        assert Paginator().apply(list(range(25)), PaginationQuery(3, 10)) == list(range(20, 25))

    def test_window_beyond_end_is_empty(self) -> None:
        assert Paginator().apply(list(range(3)), PaginationQuery(5, 10)) == []

    def test_clamped_page_returns_first_window(self) -> None:
        assert Paginator().apply(list(range(5)), PaginationQuery(0, 0)) == [0]

    def test_empty_input(self) -> None:
        assert Paginator().apply([], PaginationQuery(1, 10)) == []
