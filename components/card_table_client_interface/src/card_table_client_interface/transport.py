"""Core transport contract: the HTTP capability set a card table client is built on."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from card_table_client_interface.pagination import PaginatedResponse
from card_table_client_interface.resource import Resource

__all__ = ["Transport"]


class Transport(ABC):
    """Performs one HTTP request per call against the service.

    Implementations own everything below the path: base URL, authentication
    headers, JSON (de)serialization and error translation. Paths passed in are
    always rooted at the account, e.g. "/buckets/1/card_tables/2".
    """

    @abstractmethod
    def get(self, path: str, query: dict | None = None) -> Resource | list[Resource] | None:
        """Issue a GET request and return the decoded response."""
        raise NotImplementedError

    @abstractmethod
    def get_paginated(self, path: str, query: dict | None = None) -> PaginatedResponse:
        """Return a lazy sequence over every page of a GET listing.

        Notes on usage:
            The first page is requested before returning, so a missing resource
            or an auth failure is raised here. Later pages are requested only
            when iteration reaches them.
        """
        raise NotImplementedError

    @abstractmethod
    def post(self, path: str, body: dict[str, Any] | None = None) -> Resource | None:
        """Issue a POST request, JSON-encoding body when given."""
        raise NotImplementedError

    @abstractmethod
    def put(self, path: str, body: dict[str, Any] | None = None) -> Resource | None:
        """Issue a PUT request, JSON-encoding body when given."""
        raise NotImplementedError

    @abstractmethod
    def delete(self, path: str) -> Resource | None:
        """Issue a DELETE request."""
        raise NotImplementedError
