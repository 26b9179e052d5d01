"""Card table endpoints.

See https://github.com/basecamp/bc3-api/blob/master/sections/card_tables.md
"""

from __future__ import annotations

from typing import Any

from card_table_client_interface.resource import Resource
from card_table_client_interface.transport import Transport

from basecamp_client_impl.validation import require_present


class CardTablesAPI:
    """Card table reads. Card tables are never created through the API."""

    _transport: Transport

    def card_table(self, bucket_id: Any, id: Any) -> Resource:
        """Get a card table.

        Example:
            client.card_table(bucket_id, card_table_id)

        Raises:
            InvalidParameter: If bucket_id or id is blank.
        """
        require_present({"bucket_id": bucket_id, "id": id})

        return self._transport.get(f"/buckets/{bucket_id}/card_tables/{id}")
