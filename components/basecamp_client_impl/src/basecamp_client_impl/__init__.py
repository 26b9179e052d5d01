"""Basecamp 3 card table client."""

from basecamp_client_impl.basecamp_impl import BasecampClient, get_client
from basecamp_client_impl.basecamp_pagination import LinkHeaderPaginatedResponse
from basecamp_client_impl.basecamp_transport import (
    BasecampError,
    RateLimitError,
    RequestsTransport,
    ResourceNotFoundError,
)
from basecamp_client_impl.card_table_columns import VALID_COLORS

__all__ = [
    "VALID_COLORS",
    "BasecampClient",
    "BasecampError",
    "LinkHeaderPaginatedResponse",
    "RateLimitError",
    "RequestsTransport",
    "ResourceNotFoundError",
    "get_client",
]
