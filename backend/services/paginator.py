"""Slice a ranked result list into pages."""

import math
from typing import Generic, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class Page(BaseModel, Generic[T]):
    items: list[T] = []
    total: int = 0
    page: int = 1
    page_size: int = 1
    total_pages: int = 0


def paginate(items: list[T], page: int, page_size: int) -> Page[T]:
    """Return the 1-based ``page`` of ``items``.

    Invalid arguments are clamped instead of rejected: page and page_size
    are at least 1, and a page past the end yields the last page.
    """
    page_size = max(1, int(page_size))
    total = len(items)
    total_pages = math.ceil(total / page_size)
    page = min(max(1, int(page)), max(1, total_pages))

    start = (page - 1) * page_size
    return Page(
        items=list(items[start : start + page_size]),
        total=total,
        page=page,
        page_size=page_size,
        total_pages=total_pages,
    )
