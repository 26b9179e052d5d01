"""
Transport
---------
requests-backed implementation of the Transport contract for the Basecamp 3 API.

Every request carries:
    Authorization: Bearer <OAuth access token>
    User-Agent:    "AppName (contact@example.com)" - Basecamp rejects requests without one

Dependencies:
    uv add requests
"""
from __future__ import annotations

import logging
from typing import Any

import requests

from card_table_client_interface.client import CardTableError
from card_table_client_interface.client import ResourceNotFoundError as BaseResourceNotFoundError
from card_table_client_interface.resource import Resource, build_resource
from card_table_client_interface.transport import Transport

from basecamp_client_impl.basecamp_pagination import LinkHeaderPaginatedResponse

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30


class BasecampError(CardTableError):
    """Raised when the Basecamp API returns an unexpected response."""

    def __init__(self, message: str, status_code: int | None = None, detail: Any = None) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.detail = detail


class ResourceNotFoundError(BaseResourceNotFoundError, BasecampError):
    """Raised when a requested Basecamp resource does not exist."""


class RateLimitError(BasecampError):
    """Raised on 429 Too Many Requests. Not retried here; retry_after says how long to wait."""

    def __init__(self, message: str, retry_after: int | None = None, detail: Any = None) -> None:
        super().__init__(message, status_code=429, detail=detail)
        self.retry_after = retry_after


def _parse_retry_after(headers) -> int | None:
    """Return Retry-After seconds from response headers, or None."""
    value = (headers or {}).get("Retry-After")
    if value is None:
        return None
    try:
        return max(0, int(str(value).strip()))
    except ValueError:
        return None


class RequestsTransport(Transport):
    """
    Args:
        base_url:     Account root URL (e.g. 'https://3.basecampapi.com/999999999')
        access_token: OAuth 2 access token
        user_agent:   Identifies the integration, e.g. 'MyApp (me@example.com)'
        timeout:      Seconds to wait for each request
    """

    def __init__(self, base_url: str, access_token: str, user_agent: str, timeout: float = DEFAULT_TIMEOUT) -> None:
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._session = requests.Session()
        self._session.headers.update(
            {
                "Authorization": f"Bearer {access_token}",
                "User-Agent": user_agent,
                "Accept": "application/json",
                "Content-Type": "application/json",
            }
        )

    def __enter__(self) -> RequestsTransport:
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying HTTP session."""
        self._session.close()

    # ------------------------------------------------------------------
    # Internal HTTP helpers
    # ------------------------------------------------------------------

    def _url(self, path: str) -> str:
        #pagination links arrive as absolute URLs
        if path.startswith(("http://", "https://")):
            return path
        return f"{self._base_url}{path}"

    def _request(self, method: str, path: str, *, params: dict | None = None, body: dict | None = None) -> requests.Response:
        kwargs: dict[str, Any] = {"timeout": self._timeout}
        if params:
            kwargs["params"] = params
        if body is not None:
            kwargs["json"] = body
        response = self._session.request(method, self._url(path), **kwargs)
        logger.debug("%s %s -> %s", method, response.url, response.status_code)
        self._raise_for_status(response)
        return response

    @staticmethod
    def _decode(response: requests.Response) -> Any:
        # 204 No Content (subscriptions, completions) has nothing to decode
        if response.status_code == 204 or not response.content:
            return None
        return build_resource(response.json())

    @staticmethod
    def _raise_for_status(response: requests.Response) -> None:
        if response.ok:
            return
        try:
            detail = response.json()
        except ValueError:
            detail = response.text
        logger.warning("Basecamp API error %s for %s: %s", response.status_code, response.url, detail)
        if response.status_code == 404:
            raise ResourceNotFoundError(f"Resource not found: {response.url}", status_code=404, detail=detail)
        if response.status_code == 429:
            retry_after = _parse_retry_after(response.headers)
            raise RateLimitError(
                f"Rate limit exceeded for {response.url} (retry after {retry_after}s)",
                retry_after=retry_after,
                detail=detail,
            )
        raise BasecampError(
            f"Basecamp API error {response.status_code}: {detail}",
            status_code=response.status_code,
            detail=detail,
        )

    # ------------------------------------------------------------------
    # Transport contract
    # ------------------------------------------------------------------

    def get(self, path: str, query: dict | None = None) -> Resource | list[Resource] | None:
        return self._decode(self._request("GET", path, params=query))

    def get_paginated(self, path: str, query: dict | None = None) -> LinkHeaderPaginatedResponse:
        """Fetch the first page now; the rest are fetched as the result is iterated."""
        items, next_url = self.request_page(path, query)
        return LinkHeaderPaginatedResponse(self, items, next_url)

    def post(self, path: str, body: dict[str, Any] | None = None) -> Resource | None:
        return self._decode(self._request("POST", path, body=body))

    def put(self, path: str, body: dict[str, Any] | None = None) -> Resource | None:
        return self._decode(self._request("PUT", path, body=body))

    def delete(self, path: str) -> Resource | None:
        return self._decode(self._request("DELETE", path))

    def request_page(self, path: str, query: dict | None = None) -> tuple[list[Resource], str | None]:
        """Fetch one page of a listing.

        Returns:
            The page's resources and the URL of the next page, or None on the last page.
        """
        response = self._request("GET", path, params=query)
        items = self._decode(response) or []
        if not isinstance(items, list):
            items = [items]
        next_url = response.links.get("next", {}).get("url")
        return items, next_url
