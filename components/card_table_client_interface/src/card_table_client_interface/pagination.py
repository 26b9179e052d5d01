"""Paginated listing contract."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterator
from itertools import islice

from card_table_client_interface.resource import Resource

__all__ = ["PaginatedResponse"]


class PaginatedResponse(ABC):
    """Lazy sequence of resources spread over several pages.

    Implementations fetch a page only when iteration reaches it, so breaking
    out of a loop early saves the remaining requests.
    """

    @abstractmethod
    def __iter__(self) -> Iterator[Resource]:
        """Yield every resource, requesting the next page when the current one runs out."""
        raise NotImplementedError

    def auto_paginate(self, limit: int | None = None) -> list[Resource]:
        """Collect resources into a list.

        Args:
            limit: Maximum number of resources to return. None returns all of them.

        Returns:
            At most limit resources, in the order the service returned them.
        """
        if limit is None:
            return list(self)
        return list(islice(self, max(limit, 0)))
