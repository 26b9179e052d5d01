"""Argument guards run before any card table request is composed."""

from __future__ import annotations

from collections.abc import Collection, Mapping
from typing import Any

from card_table_client_interface.client import InvalidParameter


def is_blank(value: Any) -> bool:
    """Return True for None, False, empty values and whitespace-only strings.

    Numbers are never blank, so an id of 0 passes.
    """
    if value is None or value is False:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, (bool, int, float)):
        return False
    if isinstance(value, Collection):
        return len(value) == 0
    return False


def require_present(params: Mapping[str, Any]) -> None:
    """Raise InvalidParameter for the first blank value, in mapping order.

    Args:
        params: Parameter name -> value, in the order they appear in the caller's signature.

    Raises:
        InvalidParameter: "<name> cannot be blank"
    """
    for name, value in params.items():
        if is_blank(value):
            raise InvalidParameter(f"{name} cannot be blank")


def require_choice(name: str, value: Any, choices: tuple[str, ...]) -> None:
    """Raise InvalidParameter unless value is exactly one of choices."""
    if value not in choices:
        raise InvalidParameter(f"{name} must be one of: {', '.join(choices)}")


def require_minimum(name: str, value: Any, floor: int) -> None:
    """Raise InvalidParameter when value, read as an integer, is below floor.

    Values that cannot be read as an integer (None, "abc", infinity) are rejected the same way.
    """
    try:
        number = int(value)
    except (TypeError, ValueError, OverflowError):
        raise InvalidParameter(f"{name} must be at least {floor}") from None
    if number < floor:
        raise InvalidParameter(f"{name} must be at least {floor}")
