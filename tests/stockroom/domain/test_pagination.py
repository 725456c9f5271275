"""Tests for pagination metadata and navigation links."""

import pytest
from stockroom.shared.pagination import Pagination, build_links, page_link


class TestPagination:
    @pytest.mark.parametrize(
        "total, limit, expected",
        [(0, 10, 0), (1, 10, 1), (10, 10, 1), (11, 10, 2), (25, 10, 3), (100, 100, 1)],
    )
    def test_total_pages(self, total, limit, expected):
        assert Pagination(page=1, limit=limit, total=total).total_pages == expected

    def test_first_page_of_many(self):
        pagination = Pagination(page=1, limit=10, total=25)
        assert pagination.has_next
        assert not pagination.has_prev

    def test_middle_page(self):
        pagination = Pagination(page=2, limit=10, total=25)
        assert pagination.has_next
        assert pagination.has_prev

    def test_last_page(self):
        pagination = Pagination(page=3, limit=10, total=25)
        assert not pagination.has_next
        assert pagination.has_prev

    def test_empty_collection(self):
        pagination = Pagination(page=1, limit=10, total=0)
        assert pagination.total_pages == 0
        assert not pagination.has_next
        assert not pagination.has_prev

    def test_page_beyond_the_end(self):
        pagination = Pagination(page=5, limit=10, total=25)
        assert not pagination.has_next
        assert pagination.has_prev

    def test_as_dict(self):
        assert Pagination(page=2, limit=10, total=25).as_dict() == {
            "page": 2,
            "limit": 10,
            "total": 25,
            "total_pages": 3,
            "has_next": True,
            "has_prev": True,
        }


class TestLinks:
    def test_page_link(self):
        assert page_link("/api/products", 3, 20) == "/api/products?page=3&limit=20"

    def test_middle_page_links(self):
        assert build_links("/api/products", 2, 10, 3) == {
            "self": "/api/products?page=2&limit=10",
            "first": "/api/products?page=1&limit=10",
            "prev": "/api/products?page=1&limit=10",
            "next": "/api/products?page=3&limit=10",
            "last": "/api/products?page=3&limit=10",
        }

    def test_first_page_has_no_prev(self):
        links = build_links("/api/stores", 1, 10, 3)
        assert links["prev"] is None
        assert links["next"] == "/api/stores?page=2&limit=10"

    def test_last_page_has_no_next(self):
        links = build_links("/api/stores", 3, 10, 3)
        assert links["next"] is None
        assert links["prev"] == "/api/stores?page=2&limit=10"

    def test_empty_collection_links(self):
        links = build_links("/api/stores", 1, 10, 0)
        assert links["prev"] is None
        assert links["next"] is None
        assert links["last"] == "/api/stores?page=0&limit=10"
