"""Pagination over Basecamp listings, which link pages with RFC 5988 Link headers."""

from __future__ import annotations

from collections.abc import Iterator
from typing import TYPE_CHECKING

from card_table_client_interface.pagination import PaginatedResponse
from card_table_client_interface.resource import Resource

if TYPE_CHECKING:
    from basecamp_client_impl.basecamp_transport import RequestsTransport


class LinkHeaderPaginatedResponse(PaginatedResponse):
    """A listing whose first page is already fetched; later pages follow the rel="next" link on demand.

    Build it with RequestsTransport.get_paginated(), which makes the first request.

    Args:
        transport:  The transport used to fetch the following pages.
        first_page: Resources of the first page.
        next_url:   Absolute URL of the second page, or None when the listing fits in one page.
    """

    def __init__(self, transport: RequestsTransport, first_page: list[Resource], next_url: str | None = None) -> None:
        self._transport = transport
        self._first_page = list(first_page)
        self._next_url = next_url

    @property
    def next_url(self) -> str | None:
        return self._next_url

    def __iter__(self) -> Iterator[Resource]:
        yield from self._first_page
        url = self._next_url
        while url:
            #the next link already has the query string baked in
            items, url = self._transport.request_page(url)
            yield from items

    def __repr__(self) -> str:
        return f"<{type(self).__name__} first_page={len(self._first_page)} next_url={self._next_url!r}>"
