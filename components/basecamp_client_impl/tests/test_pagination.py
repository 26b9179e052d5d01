"""Unit tests for LinkHeaderPaginatedResponse."""

from unittest.mock import MagicMock, call

import pytest

from basecamp_client_impl.basecamp_pagination import LinkHeaderPaginatedResponse
from card_table_client_interface.resource import Resource

PAGE_2 = "https://3.basecampapi.com/999/buckets/42/card_tables/lists/7/cards.json?page=2"
PAGE_3 = "https://3.basecampapi.com/999/buckets/42/card_tables/lists/7/cards.json?page=3"


def cards(*ids):
    return [Resource({"id": card_id, "title": f"Card {card_id}"}) for card_id in ids]


@pytest.fixture
def transport():
    """A transport mock serving pages 2 and 3; page 1 is handed to the response directly."""
    mock = MagicMock()
    mock.request_page.side_effect = [
        (cards(3), PAGE_3),
        (cards(4), None),
    ]
    return mock


def test_first_page_is_served_without_a_request(transport):
    pages = LinkHeaderPaginatedResponse(transport, cards(1, 2), PAGE_2)
    iterator = iter(pages)

    assert next(iterator).id == 1
    assert next(iterator).id == 2
    transport.request_page.assert_not_called()


def test_iteration_follows_next_links(transport):
    pages = LinkHeaderPaginatedResponse(transport, cards(1, 2), PAGE_2)

    result = [card.id for card in pages]

    assert result == [1, 2, 3, 4]
    # follow-up pages carry their query in the link itself
    assert transport.request_page.call_args_list == [call(PAGE_2), call(PAGE_3)]


def test_pages_are_fetched_only_as_consumed(transport):
    iterator = iter(LinkHeaderPaginatedResponse(transport, cards(1, 2), PAGE_2))

    next(iterator)
    next(iterator)
    assert transport.request_page.call_count == 0

    assert next(iterator).id == 3
    assert transport.request_page.call_count == 1


def test_single_page_listing_never_requests_again():
    transport = MagicMock()
    pages = LinkHeaderPaginatedResponse(transport, cards(1), None)

    assert [card.id for card in pages] == [1]
    assert [card.id for card in pages] == [1]
    transport.request_page.assert_not_called()


def test_auto_paginate_limit_stops_early(transport):
    result = LinkHeaderPaginatedResponse(transport, cards(1, 2), PAGE_2).auto_paginate(limit=2)

    assert [card.id for card in result] == [1, 2]
    transport.request_page.assert_not_called()


def test_auto_paginate_without_limit_returns_everything(transport):
    result = LinkHeaderPaginatedResponse(transport, cards(1, 2), PAGE_2).auto_paginate()

    assert [card.id for card in result] == [1, 2, 3, 4]


def test_empty_listing():
    pages = LinkHeaderPaginatedResponse(MagicMock(), [], None)

    assert list(pages) == []
    assert pages.next_url is None
