"""Contracts shared by card table client implementations."""

from card_table_client_interface.client import CardTableError, InvalidParameter, ResourceNotFoundError
from card_table_client_interface.pagination import PaginatedResponse
from card_table_client_interface.resource import Resource, build_resource
from card_table_client_interface.transport import Transport

__all__ = [
    "CardTableError",
    "InvalidParameter",
    "PaginatedResponse",
    "Resource",
    "ResourceNotFoundError",
    "Transport",
    "build_resource",
]
