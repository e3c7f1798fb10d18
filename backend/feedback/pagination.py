"""
Feedback Tracker Backend — Offset Pagination
=============================================

What:  Page request parsing, the Page result wrapper, and the pagination
       response headers.
Why:   The list endpoints page with `page`/`size`/`sort` query parameters
       and answer with the page content as a bare JSON array. The total and
       the navigation links travel in headers so the body stays a plain list.

Header format:
    X-Total-Count: 57
    Link: </api/points?page=1&size=20>; rel="next",</api/points?page=2&size=20>; rel="last",
          </api/points?page=0&size=20>; rel="first"

    The prev link is only present when there is a previous page, the next
    link only when there is a next page (RFC 5988 style, as consumed by the
    web client's infinite scroll). The requested sort is repeated in every
    link (`&sort=date,desc`) so following them keeps the order.
"""

import math
from dataclasses import dataclass
from typing import Callable, Dict, Generic, List, Optional, Sequence, Tuple, TypeVar
from urllib.parse import quote, urlencode

from fastapi import Query

from feedback.config import settings

T = TypeVar("T")
U = TypeVar("U")

# OFFSET is a signed 64-bit value; the largest page keeps page * size in range
MAX_PAGE = (2**63 - 1) // settings.max_page_size


@dataclass(frozen=True)
class SortOrder:
    property: str
    descending: bool = False


@dataclass(frozen=True)
class PageRequest:
    """
    A bounded, ordered slice request.

    page is 0-based. sort keeps the order in which the client listed the
    properties; unknown properties are dropped later by the repository.
    """
    page: int = 0
    size: int = 20
    sort: Tuple[SortOrder, ...] = ()

    @property
    def offset(self) -> int:
        return self.page * self.size

    @classmethod
    def of(cls, page: int = 0, size: Optional[int] = None, sort: Sequence[str] = ()) -> "PageRequest":
        """
        Build a request from raw query values.

        sort entries follow the `property[,asc|desc]` convention, e.g.
        `date,desc`; several properties may share one entry (`date,id,desc`).
        """
        size = settings.default_page_size if size is None else size
        size = max(1, min(size, settings.max_page_size))
        return cls(page=max(0, page), size=size, sort=tuple(parse_sort(sort)))


def parse_sort(values: Sequence[str]) -> List[SortOrder]:
    orders: List[SortOrder] = []
    for value in values:
        parts = [part.strip() for part in value.split(",") if part.strip()]
        if not parts:
            continue
        descending = False
        if parts[-1].lower() in ("asc", "desc"):
            descending = parts.pop().lower() == "desc"
        orders.extend(SortOrder(prop, descending) for prop in parts)
    return orders


def page_request_params(
    page: int = Query(default=0, ge=0, le=MAX_PAGE, description="Page index (0-based)"),
    size: Optional[int] = Query(default=None, ge=1, description="Page size"),
    sort: List[str] = Query(
        default=[],
        description="Sort criteria: property[,asc|desc]. Repeat for multiple properties.",
    ),
) -> PageRequest:
    """FastAPI dependency turning the query string into a PageRequest."""
    return PageRequest.of(page=page, size=size, sort=sort)


@dataclass
class Page(Generic[T]):
    content: List[T]
    request: PageRequest
    total_elements: int

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total_elements / self.request.size) if self.request.size else 0

    @property
    def number(self) -> int:
        return self.request.page

    def has_next(self) -> bool:
        return self.number + 1 < self.total_pages

    def has_previous(self) -> bool:
        return self.number > 0

    def map(self, fn: Callable[[T], U]) -> "Page[U]":
        return Page(content=[fn(item) for item in self.content], request=self.request,
                    total_elements=self.total_elements)


def generate_pagination_headers(page: Page, base_url: str) -> Dict[str, str]:
    """
    X-Total-Count and Link headers for a page served at base_url.

    Example:
        generate_pagination_headers(Page([...], PageRequest(1, 20), 57), "/api/points")
        → {"X-Total-Count": "57", "Link": '</api/points?page=2&size=20>; rel="next",...'}
    """
    size = page.request.size
    last_page = page.total_pages - 1 if page.total_pages > 0 else 0
    sort = page.request.sort

    links: List[str] = []
    if page.has_next():
        links.append(_link(base_url, page.number + 1, size, sort, "next"))
    if page.has_previous():
        links.append(_link(base_url, page.number - 1, size, sort, "prev"))
    links.append(_link(base_url, last_page, size, sort, "last"))
    links.append(_link(base_url, 0, size, sort, "first"))

    return {
        "X-Total-Count": str(page.total_elements),
        "Link": ",".join(links),
    }


def _link(base_url: str, page: int, size: int, sort: Sequence[SortOrder], rel: str) -> str:
    params = [("page", page), ("size", size)]
    params.extend(
        ("sort", f"{order.property},{'desc' if order.descending else 'asc'}") for order in sort
    )
    return f'<{base_url}?{urlencode(params, safe=",", quote_via=quote)}>; rel="{rel}"'
