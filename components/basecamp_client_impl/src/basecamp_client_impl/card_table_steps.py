"""Card table step endpoints.

See https://github.com/basecamp/bc3-api/blob/master/sections/card_table_steps.md
"""

from __future__ import annotations

from typing import Any

from card_table_client_interface.resource import Resource
from card_table_client_interface.transport import Transport

from basecamp_client_impl.validation import require_minimum, require_present

#steps are 0-indexed, unlike columns
MIN_STEP_POSITION = 0


class CardTableStepsAPI:
    """Steps: the checklist of sub-tasks inside a card."""

    _transport: Transport

    def create_card_table_step(self, bucket_id: Any, card_id: Any, title: str, **options: Any) -> Resource:
        """Create a step within a card.

        Example:
            client.create_card_table_step(bucket_id, card_id, "Complete review", due_on="2025-12-31", assignee_ids=[123, 456])

        Raises:
            InvalidParameter: If bucket_id, card_id or title is blank.
        """
        require_present({"bucket_id": bucket_id, "card_id": card_id, "title": title})

        return self._transport.post(
            f"/buckets/{bucket_id}/card_tables/cards/{card_id}/steps",
            body={"title": title, **options},
        )

    def update_card_table_step(self, bucket_id: Any, step_id: Any, **options: Any) -> Resource:
        """Update a step (title, due_on, assignee_ids)."""
        require_present({"bucket_id": bucket_id, "step_id": step_id})

        return self._transport.put(f"/buckets/{bucket_id}/card_tables/steps/{step_id}", body=options)

    def complete_card_table_step(self, bucket_id: Any, step_id: Any) -> Resource:
        """Mark a step as completed."""
        require_present({"bucket_id": bucket_id, "step_id": step_id})

        return self._transport.put(f"/buckets/{bucket_id}/card_tables/steps/{step_id}/completions")

    def uncomplete_card_table_step(self, bucket_id: Any, step_id: Any) -> Resource:
        """Mark a step as not completed.

        Notes on usage:
            This sends exactly the same request as complete_card_table_step
            (PUT .../completions). The API docs list a separate uncomplete
            action; kept as-is until the right endpoint is confirmed against a
            live account.
        """
        require_present({"bucket_id": bucket_id, "step_id": step_id})

        return self._transport.put(f"/buckets/{bucket_id}/card_tables/steps/{step_id}/completions")

    def reposition_card_table_step(self, bucket_id: Any, card_id: Any, step_id: Any, position: int) -> Resource:
        """Move a step within its card.

        Args:
            position: The new position, starting at 0.

        Raises:
            InvalidParameter: If an id is blank or position is negative.
        """
        require_present({"bucket_id": bucket_id, "card_id": card_id, "step_id": step_id})
        require_minimum("position", position, MIN_STEP_POSITION)

        return self._transport.post(
            f"/buckets/{bucket_id}/card_tables/cards/{card_id}/positions",
            body={"step_id": step_id, "position": position},
        )
