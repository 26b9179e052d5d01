"""Card table column endpoints.

Some column endpoints live under "lists/" and others under "columns/"; both
refer to the same column id.

See https://github.com/basecamp/bc3-api/blob/master/sections/card_table_columns.md
"""

from __future__ import annotations

from typing import Any

from card_table_client_interface.resource import Resource
from card_table_client_interface.transport import Transport

from basecamp_client_impl.validation import require_choice, require_minimum, require_present

VALID_COLORS: tuple[str, ...] = (
    "white",
    "red",
    "orange",
    "yellow",
    "green",
    "blue",
    "aqua",
    "purple",
    "gray",
    "pink",
    "brown",
)

#columns are 1-indexed
MIN_COLUMN_POSITION = 1


class CardTableColumnsAPI:
    """Columns (lists) of a card table."""

    _transport: Transport

    def card_table_column(self, bucket_id: Any, column_id: Any) -> Resource:
        """Get a column."""
        require_present({"bucket_id": bucket_id, "column_id": column_id})

        return self._transport.get(f"/buckets/{bucket_id}/card_tables/columns/{column_id}")

    def create_card_table_column(self, bucket_id: Any, card_table_id: Any, title: str, **options: Any) -> Resource:
        """Create a column in a card table.

        Example:
            client.create_card_table_column(bucket_id, card_table_id, "In Progress", description="Work in progress")

        Raises:
            InvalidParameter: If bucket_id, card_table_id or title is blank.
        """
        require_present({"bucket_id": bucket_id, "card_table_id": card_table_id, "title": title})

        return self._transport.post(
            f"/buckets/{bucket_id}/card_tables/{card_table_id}/columns",
            body={"title": title, **options},
        )

    def update_card_table_column(self, bucket_id: Any, column_id: Any, **options: Any) -> Resource:
        """Update a column's title or description."""
        require_present({"bucket_id": bucket_id, "column_id": column_id})

        return self._transport.put(f"/buckets/{bucket_id}/card_tables/columns/{column_id}", body=options)

    def move_card_table_column(self, bucket_id: Any, card_table_id: Any, column_id: Any, position: int) -> Resource:
        """Move a column within a card table.

        Args:
            bucket_id:     The project/bucket id
            card_table_id: The card table id
            column_id:     The column to move
            position:      The new position, starting at 1

        Raises:
            InvalidParameter: If an id is blank or position is less than 1.
        """
        require_present({"bucket_id": bucket_id, "card_table_id": card_table_id, "column_id": column_id})
        require_minimum("position", position, MIN_COLUMN_POSITION)

        return self._transport.post(
            f"/buckets/{bucket_id}/card_tables/{card_table_id}/moves",
            body={"column_id": column_id, "position": position},
        )

    def subscribe_to_card_table_column(self, bucket_id: Any, column_id: Any) -> Resource:
        """Subscribe the current user to a column."""
        require_present({"bucket_id": bucket_id, "column_id": column_id})

        return self._transport.post(f"/buckets/{bucket_id}/card_tables/lists/{column_id}/subscription")

    def unsubscribe_from_card_table_column(self, bucket_id: Any, column_id: Any) -> Resource | None:
        """Unsubscribe the current user from a column."""
        require_present({"bucket_id": bucket_id, "column_id": column_id})

        return self._transport.delete(f"/buckets/{bucket_id}/card_tables/lists/{column_id}/subscription")

    def create_card_table_column_on_hold(self, bucket_id: Any, column_id: Any) -> Resource:
        """Create an on-hold section in a column."""
        require_present({"bucket_id": bucket_id, "column_id": column_id})

        return self._transport.post(f"/buckets/{bucket_id}/card_tables/columns/{column_id}/on_hold")

    def remove_card_table_column_on_hold(self, bucket_id: Any, column_id: Any) -> Resource | None:
        """Remove the on-hold section from a column."""
        require_present({"bucket_id": bucket_id, "column_id": column_id})

        return self._transport.delete(f"/buckets/{bucket_id}/card_tables/columns/{column_id}/on_hold")

    def change_card_table_column_color(self, bucket_id: Any, column_id: Any, color: str) -> Resource:
        """Change a column's color.

        Args:
            color: One of VALID_COLORS, lowercase.

        Raises:
            InvalidParameter: If an id is blank or color is not in VALID_COLORS.
        """
        require_present({"bucket_id": bucket_id, "column_id": column_id})
        require_choice("color", color, VALID_COLORS)

        return self._transport.put(
            f"/buckets/{bucket_id}/card_tables/columns/{column_id}/color",
            body={"color": color},
        )
