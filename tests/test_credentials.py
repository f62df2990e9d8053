"""Tests for the keyring-backed credential store."""

import pytest

from credentials import (
    API_KEY_ENTRY,
    SERVICE_NAME,
    TOKEN_ENTRY,
    CredentialsNotFoundError,
    KeyringCredentialStore,
    TrelloCredentials,
    mask,
)
from tests.conftest import MemoryKeyring


def test_get_returns_stored_pair(memory_keyring: MemoryKeyring) -> None:
    store = KeyringCredentialStore()
    store.set("my-key", "my-token")

    assert store.get() == TrelloCredentials(api_key="my-key", token="my-token")
    assert memory_keyring.passwords == {
        (SERVICE_NAME, API_KEY_ENTRY): "my-key",
        (SERVICE_NAME, TOKEN_ENTRY): "my-token",
    }


def test_get_lists_missing_entries(memory_keyring: MemoryKeyring) -> None:
    memory_keyring.set_password(SERVICE_NAME, API_KEY_ENTRY, "my-key")

    with pytest.raises(CredentialsNotFoundError) as exc_info:
        KeyringCredentialStore().get()

    message = str(exc_info.value)
    assert "missing: token" in message
    assert "trello-mcp-credentials store" in message
    assert "my-key" not in message


def test_set_rejects_empty_values(memory_keyring: MemoryKeyring) -> None:
    with pytest.raises(ValueError):
        KeyringCredentialStore().set("", "my-token")

    assert memory_keyring.passwords == {}


def test_delete_reports_removed_entries(memory_keyring: MemoryKeyring) -> None:
    store = KeyringCredentialStore()
    memory_keyring.set_password(SERVICE_NAME, TOKEN_ENTRY, "my-token")

    assert store.delete() == [TOKEN_ENTRY]
    assert store.delete() == []


def test_exists_requires_both_entries(memory_keyring: MemoryKeyring) -> None:
    store = KeyringCredentialStore()
    assert not store.exists()

    memory_keyring.set_password(SERVICE_NAME, API_KEY_ENTRY, "my-key")
    assert not store.exists()

    memory_keyring.set_password(SERVICE_NAME, TOKEN_ENTRY, "my-token")
    assert store.exists()


def test_stores_are_scoped_by_service_name(memory_keyring: MemoryKeyring) -> None:
    KeyringCredentialStore("other-service").set("k", "t")

    assert not KeyringCredentialStore().exists()


@pytest.mark.parametrize(
    ("value", "expected"),
    [("short", "*****"), ("0123456789abcdef", "0123...ef")],
)
def test_mask(value: str, expected: str) -> None:
    assert mask(value) == expected
