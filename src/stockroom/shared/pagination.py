"""Pagination metadata and navigation links for list responses."""

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Pagination:
    page: int
    limit: int
    total: int

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total / self.limit)

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages

    @property
    def has_prev(self) -> bool:
        return self.page > 1

    def as_dict(self) -> dict:
        return {
            "page": self.page,
            "limit": self.limit,
            "total": self.total,
            "total_pages": self.total_pages,
            "has_next": self.has_next,
            "has_prev": self.has_prev,
        }


def page_link(base_path: str, page: int, limit: int) -> str:
    return f"{base_path}?page={page}&limit={limit}"


def build_links(base_path: str, page: int, limit: int, total_pages: int) -> dict[str, str | None]:
    """Links to the current, first, previous, next and last pages.

    `prev` and `next` are None at the edges. `last` points at page 0 when the
    collection is empty, mirroring `total_pages`.
    """
    return {
        "self": page_link(base_path, page, limit),
        "first": page_link(base_path, 1, limit),
        "prev": page_link(base_path, page - 1, limit) if page > 1 else None,
        "next": page_link(base_path, page + 1, limit) if page < total_pages else None,
        "last": page_link(base_path, total_pages, limit),
    }
