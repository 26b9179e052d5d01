"""Tests for BasecampClient wiring and the get_client factory."""

from unittest.mock import MagicMock

import pytest

from basecamp_client_impl.basecamp_impl import BasecampClient, get_client
from basecamp_client_impl.basecamp_transport import RequestsTransport

ENV_VARS = ["BASECAMP_ACCOUNT_ID", "BASECAMP_ACCESS_TOKEN", "BASECAMP_USER_AGENT", "BASECAMP_BASE_URL", "BASECAMP_TIMEOUT"]


@pytest.fixture
def clean_env(monkeypatch):
    for var in ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    return monkeypatch


#--------------------------- get_client --------------------------

def test_get_client_raises_when_env_vars_missing(clean_env):
    with pytest.raises(EnvironmentError) as excinfo:
        get_client(interactive=False)

    message = str(excinfo.value)
    assert "BASECAMP_ACCOUNT_ID" in message
    assert "BASECAMP_ACCESS_TOKEN" in message
    assert "BASECAMP_USER_AGENT" in message


def test_get_client_names_only_missing_vars(clean_env):
    clean_env.setenv("BASECAMP_ACCOUNT_ID", "999")
    clean_env.setenv("BASECAMP_USER_AGENT", "CardTables (dev@example.com)")

    with pytest.raises(EnvironmentError, match="BASECAMP_ACCESS_TOKEN") as excinfo:
        get_client()

    assert "BASECAMP_ACCOUNT_ID" not in str(excinfo.value)


def test_get_client_succeeds_when_env_vars_present(clean_env):
    clean_env.setenv("BASECAMP_ACCOUNT_ID", "999")
    clean_env.setenv("BASECAMP_ACCESS_TOKEN", "dummy_token")
    clean_env.setenv("BASECAMP_USER_AGENT", "CardTables (dev@example.com)")

    client = get_client(interactive=False)

    assert isinstance(client, BasecampClient)
    assert isinstance(client.transport, RequestsTransport)
    assert client.transport._url("/buckets/1") == "https://3.basecampapi.com/999/buckets/1"
    assert client.transport._timeout == 30
    client.close()


def test_get_client_honours_base_url_and_timeout(clean_env):
    clean_env.setenv("BASECAMP_ACCOUNT_ID", "999")
    clean_env.setenv("BASECAMP_ACCESS_TOKEN", "dummy_token")
    clean_env.setenv("BASECAMP_USER_AGENT", "CardTables (dev@example.com)")
    clean_env.setenv("BASECAMP_BASE_URL", "http://localhost:3000/")
    clean_env.setenv("BASECAMP_TIMEOUT", "2.5")

    client = get_client()

    assert client.transport._url("/buckets/1") == "http://localhost:3000/999/buckets/1"
    assert client.transport._timeout == 2.5


def test_get_client_ignores_unparsable_timeout(clean_env):
    clean_env.setenv("BASECAMP_ACCOUNT_ID", "999")
    clean_env.setenv("BASECAMP_ACCESS_TOKEN", "dummy_token")
    clean_env.setenv("BASECAMP_USER_AGENT", "CardTables (dev@example.com)")
    clean_env.setenv("BASECAMP_TIMEOUT", "soon")

    assert get_client().transport._timeout == 30


def test_get_client_interactive_prompts_for_missing(clean_env):
    answers = iter(["999", "CardTables (dev@example.com)"])
    clean_env.setattr("builtins.input", lambda prompt: next(answers))
    clean_env.setattr("basecamp_client_impl.basecamp_impl.getpass", lambda prompt: "secret")

    client = get_client(interactive=True)

    assert client.transport._session.headers["Authorization"] == "Bearer secret"
    assert client.transport._url("/x") == "https://3.basecampapi.com/999/x"


#--------------------------- BasecampClient --------------------------

def test_client_context_manager_closes_transport():
    transport = MagicMock()

    with BasecampClient(transport) as client:
        assert client.transport is transport

    transport.close.assert_called_once()


def test_client_close_tolerates_transport_without_close():
    BasecampClient(object()).close()
