"""Shared fixtures for the Basecamp card table client tests."""

from unittest.mock import MagicMock

import pytest

from basecamp_client_impl.basecamp_impl import BasecampClient
from card_table_client_interface.transport import Transport


@pytest.fixture
def transport():
    """A Transport mock; every verb returns a distinct sentinel so results can be traced."""
    mock = MagicMock(spec=Transport)
    mock.get.return_value = "get-result"
    mock.get_paginated.return_value = "paginated-result"
    mock.post.return_value = "post-result"
    mock.put.return_value = "put-result"
    mock.delete.return_value = None
    return mock


@pytest.fixture
def client(transport):
    """Returns a BasecampClient over the mocked transport, so no HTTP call can happen."""
    return BasecampClient(transport)


@pytest.fixture
def assert_no_request(transport):
    """Returns a check that no transport verb was called."""

    def check():
        for verb in (transport.get, transport.get_paginated, transport.post, transport.put, transport.delete):
            verb.assert_not_called()

    return check
