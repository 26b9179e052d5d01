"""Card table card endpoints.

See https://github.com/basecamp/bc3-api/blob/master/sections/card_table_cards.md
"""

from __future__ import annotations

from typing import Any

from card_table_client_interface.pagination import PaginatedResponse
from card_table_client_interface.resource import Resource
from card_table_client_interface.transport import Transport

from basecamp_client_impl.validation import require_present


class CardTableCardsAPI:
    """Cards: the tasks placed in a card table column."""

    _transport: Transport

    def card_table_cards(self, bucket_id: Any, column_id: Any, **options: Any) -> PaginatedResponse:
        """Get the cards in a column.

        Args:
            bucket_id: The project/bucket id
            column_id: The column (list) id
            **options: Query parameters used to filter the listing

        Returns:
            A PaginatedResponse. The first page is fetched before returning,
            later pages as it is iterated.

        Raises:
            InvalidParameter: If bucket_id or column_id is blank.
        """
        require_present({"bucket_id": bucket_id, "column_id": column_id})

        return self._transport.get_paginated(
            f"/buckets/{bucket_id}/card_tables/lists/{column_id}/cards",
            query=options or None,
        )

    def card_table_card(self, bucket_id: Any, card_id: Any) -> Resource:
        """Get a single card."""
        require_present({"bucket_id": bucket_id, "card_id": card_id})

        return self._transport.get(f"/buckets/{bucket_id}/card_tables/cards/{card_id}")

    def create_card_table_card(self, bucket_id: Any, column_id: Any, title: str, **options: Any) -> Resource:
        """Create a card in a column.

        Example:
            client.create_card_table_card(
                bucket_id,
                column_id,
                "Card Title",
                content="<div>Card description</div>",
                due_on="2025-12-31",
                notify=True,
            )

        Args:
            bucket_id: The project/bucket id
            column_id: The column (list) id
            title:     The card title
            **options: Extra fields sent as-is (content, due_on, notify)

        Raises:
            InvalidParameter: If bucket_id, column_id or title is blank.
        """
        require_present({"bucket_id": bucket_id, "column_id": column_id, "title": title})

        return self._transport.post(
            f"/buckets/{bucket_id}/card_tables/lists/{column_id}/cards",
            body={"title": title, **options},
        )

    def update_card_table_card(self, bucket_id: Any, card_id: Any, **options: Any) -> Resource:
        """Update a card.

        Only the fields passed in options are sent (title, content, due_on, assignee_ids).

        Raises:
            InvalidParameter: If bucket_id or card_id is blank.
        """
        require_present({"bucket_id": bucket_id, "card_id": card_id})

        return self._transport.put(f"/buckets/{bucket_id}/card_tables/cards/{card_id}", body=options)
