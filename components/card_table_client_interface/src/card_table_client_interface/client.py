"""Core client contract definitions: the errors every implementation raises."""

__all__ = ["CardTableError", "InvalidParameter", "ResourceNotFoundError"]


class CardTableError(Exception):
    """Base exception for everything raised by a card table client."""


class InvalidParameter(CardTableError, ValueError):
    """Raised before any request is made when an argument is blank or out of range.

    Notes on usage:
        Always recoverable by the caller: fix the argument and call again.
        No request has been sent when this is raised.
    """


class ResourceNotFoundError(CardTableError):
    """Base exception raised when a requested resource does not exist."""
