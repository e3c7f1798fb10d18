"""
Feedback Tracker Backend — Pagination Unit Tests
=================================================

What:  PageRequest parsing and X-Total-Count / Link header generation.
"""

from feedback.config import settings
from feedback.pagination import (
    MAX_PAGE,
    Page,
    PageRequest,
    SortOrder,
    generate_pagination_headers,
    parse_sort,
)


class TestParseSort:

    def test_property_with_direction(self):
        assert parse_sort(["date,desc"]) == [SortOrder("date", True)]

    def test_default_direction_is_ascending(self):
        assert parse_sort(["id"]) == [SortOrder("id", False)]

    def test_several_properties_share_a_direction(self):
        assert parse_sort(["date,id,desc"]) == [SortOrder("date", True), SortOrder("id", True)]

    def test_blank_entries_ignored(self):
        assert parse_sort(["", " , "]) == []


class TestPageRequest:

    def test_defaults(self):
        request = PageRequest.of()
        assert request.page == 0
        assert request.size == settings.default_page_size
        assert request.offset == 0

    def test_size_is_capped(self):
        request = PageRequest.of(page=2, size=settings.max_page_size + 1)
        assert request.size == settings.max_page_size
        assert request.offset == 2 * settings.max_page_size


class TestPaginationHeaders:

    def test_middle_page_has_next_and_prev(self):
        page = Page(content=[], request=PageRequest(page=1, size=20), total_elements=57)
        headers = generate_pagination_headers(page, "/api/points")
        assert headers["X-Total-Count"] == "57"
        assert headers["Link"] == (
            '</api/points?page=2&size=20>; rel="next",'
            '</api/points?page=0&size=20>; rel="prev",'
            '</api/points?page=2&size=20>; rel="last",'
            '</api/points?page=0&size=20>; rel="first"'
        )

    def test_single_page_has_only_last_and_first(self):
        page = Page(content=[1, 2], request=PageRequest(page=0, size=20), total_elements=2)
        link = generate_pagination_headers(page, "/api/weights")["Link"]
        assert 'rel="next"' not in link
        assert 'rel="prev"' not in link
        assert '</api/weights?page=0&size=20>; rel="last"' in link

    def test_empty_result(self):
        page = Page(content=[], request=PageRequest(page=0, size=10), total_elements=0)
        headers = generate_pagination_headers(page, "/api/weights")
        assert headers["X-Total-Count"] == "0"
        assert page.total_pages == 0
        assert '</api/weights?page=0&size=10>; rel="last"' in headers["Link"]

    def test_links_repeat_requested_sort(self):
        request = PageRequest.of(page=0, size=5, sort=["date,desc", "id"])
        page = Page(content=[], request=request, total_elements=12)
        link = generate_pagination_headers(page, "/api/points")["Link"]
        assert '</api/points?page=1&size=5&sort=date,desc&sort=id,asc>; rel="next"' in link
        assert '</api/points?page=2&size=5&sort=date,desc&sort=id,asc>; rel="last"' in link
        assert '</api/points?page=0&size=5&sort=date,desc&sort=id,asc>; rel="first"' in link

    def test_max_page_keeps_offset_in_64_bits(self):
        request = PageRequest.of(page=MAX_PAGE, size=settings.max_page_size)
        assert request.offset <= 2**63 - 1

    def test_map_keeps_paging_metadata(self):
        page = Page(content=[1, 2, 3], request=PageRequest(page=0, size=3), total_elements=9)
        mapped = page.map(lambda n: n * 2)
        assert mapped.content == [2, 4, 6]
        assert mapped.total_elements == 9
        assert mapped.has_next()
