"""
Authentication
--------------
The client supports two credential modes:

1. When get_client(interactive = True)
    User is prompted for any of the values below missing from the environment.
2. When get_client(interactive = False) - Default
        BASECAMP_ACCOUNT_ID     999999999
        BASECAMP_ACCESS_TOKEN   <OAuth 2 token, see https://github.com/basecamp/api/blob/master/sections/authentication.md>
        BASECAMP_USER_AGENT     MyApp (me@example.com)

    Optional:
        BASECAMP_BASE_URL       defaults to https://3.basecampapi.com
        BASECAMP_TIMEOUT        request timeout in seconds, defaults to 30
"""
from __future__ import annotations

import os
from getpass import getpass

from card_table_client_interface.transport import Transport

from basecamp_client_impl.basecamp_transport import DEFAULT_TIMEOUT, RequestsTransport
from basecamp_client_impl.card_table_cards import CardTableCardsAPI
from basecamp_client_impl.card_table_columns import CardTableColumnsAPI
from basecamp_client_impl.card_table_steps import CardTableStepsAPI
from basecamp_client_impl.card_tables import CardTablesAPI

DEFAULT_BASE_URL = "https://3.basecampapi.com"

# ---------------------------------------------------------------------------
# Client implementation
# ---------------------------------------------------------------------------


class BasecampClient(CardTablesAPI, CardTableColumnsAPI, CardTableCardsAPI, CardTableStepsAPI):
    """Card table client for one Basecamp account.

    Args:
        transport: Anything implementing the Transport contract. get_client()
                   builds a RequestsTransport; tests pass a mock.
    """

    def __init__(self, transport: Transport) -> None:
        self._transport = transport

    @property
    def transport(self) -> Transport:
        return self._transport

    def __enter__(self) -> BasecampClient:
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def close(self) -> None:
        """Close the transport, if it holds anything open."""
        close = getattr(self._transport, "close", None)
        if callable(close):
            close()


def _timeout_from_env(raw: str) -> float:
    if not raw:
        return DEFAULT_TIMEOUT
    try:
        return float(raw)
    except ValueError:
        return DEFAULT_TIMEOUT


# ---------------------------------------------------------------------------
# Get client
# ---------------------------------------------------------------------------


def get_client(*, interactive: bool = False) -> BasecampClient:
    """Return a BasecampClient talking to the account named in the environment.

    If "interactive = True" and any required variable is missing, the user will be prompted.

    Environment variables:
        BASECAMP_ACCOUNT_ID:    Numeric id of the Basecamp account.
        BASECAMP_ACCESS_TOKEN:  OAuth 2 access token.
        BASECAMP_USER_AGENT:    Name and contact of the integration.

    Raises:
        EnvironmentError: In non-interactive mode, when a required variable is missing.
    """
    account_id = os.environ.get("BASECAMP_ACCOUNT_ID", "")
    access_token = os.environ.get("BASECAMP_ACCESS_TOKEN", "")
    user_agent = os.environ.get("BASECAMP_USER_AGENT", "")
    base_url = os.environ.get("BASECAMP_BASE_URL", "") or DEFAULT_BASE_URL
    timeout = _timeout_from_env(os.environ.get("BASECAMP_TIMEOUT", ""))

    if interactive:
        if not account_id:
            account_id = input("Basecamp account id: ").strip()
        if not user_agent:
            user_agent = input("User-Agent (e.g. MyApp (me@example.com)): ").strip()
        if not access_token:
            access_token = getpass("Basecamp access token: ")
    else:
        #collects the missing fields and raises an error alerting to the missing values
        missing = [name for name, val in [
            ("BASECAMP_ACCOUNT_ID", account_id),
            ("BASECAMP_ACCESS_TOKEN", access_token),
            ("BASECAMP_USER_AGENT", user_agent),
        ] if not val]
        if missing:
            raise EnvironmentError(
                f"Missing required environment variables: {', '.join(missing)}. "
                "Set them or call get_client(interactive=True)."
            )

    transport = RequestsTransport(f"{base_url.rstrip('/')}/{account_id}", access_token, user_agent, timeout=timeout)
    return BasecampClient(transport)
