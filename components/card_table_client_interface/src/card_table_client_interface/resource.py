"""Resource contract - read-only view of one JSON object returned by the service."""

from __future__ import annotations

from typing import Any

__all__ = ["Resource", "build_resource"]


def _wrap(value: Any) -> Any:
    if isinstance(value, dict):
        return Resource(value)
    if isinstance(value, list):
        return [_wrap(item) for item in value]
    return value


class Resource:
    """A remote resource (card table, column, card, step...) as the API returned it.

    Keys of the JSON object are readable both as attributes and as items:

        card.title == card["title"]

    Nested objects come back as Resource instances, lists of objects as lists
    of Resource. Nothing is validated or cached; the client never mutates a
    Resource after building it.
    """

    __slots__ = ("_raw",)

    def __init__(self, raw_data: dict[str, Any]) -> None:
        object.__setattr__(self, "_raw", dict(raw_data))

    @property
    def id(self) -> Any:
        """Return the resource id, or None if the payload has none."""
        return self._raw.get("id")

    def __getattr__(self, name: str) -> Any:
        #private names never map to payload keys
        if name.startswith("_"):
            raise AttributeError(name)
        try:
            return _wrap(self._raw[name])
        except KeyError:
            raise AttributeError(f"{type(self).__name__} has no attribute {name!r}") from None

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is read-only")

    def __reduce__(self):
        # copy, deepcopy and pickle rebuild through __init__
        return (type(self), (self._raw,))

    def __getitem__(self, key: str) -> Any:
        return _wrap(self._raw[key])

    def __contains__(self, key: object) -> bool:
        return key in self._raw

    def get(self, key: str, default: Any = None) -> Any:
        """Return the value for key, or default when the payload lacks it."""
        if key not in self._raw:
            return default
        return _wrap(self._raw[key])

    def keys(self):
        return self._raw.keys()

    def to_dict(self) -> dict[str, Any]:
        """Return a shallow copy of the raw JSON object."""
        return dict(self._raw)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Resource):
            return NotImplemented
        return self._raw == other._raw

    __hash__ = None

    def __repr__(self) -> str:
        return f"<{type(self).__name__} id={self.id!r} title={self._raw.get('title')!r}>"


def build_resource(raw_data: Any) -> Any:
    """Wrap a decoded JSON payload.

    Objects become Resource, lists become lists of Resource, anything else
    (including None for empty responses) is returned unchanged.
    """
    return _wrap(raw_data)
