"""Tests for server wiring and the info resource."""

import pytest

import resources
import tools
from config import Settings
from credentials import CredentialsNotFoundError, KeyringCredentialStore
from server import build_services
from tests.conftest import MemoryKeyring


def test_info_resource_describes_server() -> None:
    settings = Settings(RATE_LIMIT_MAX_RETRIES=0)

    text = resources.read_resource("trello://info", settings, len(tools.TOOLS))

    assert text.startswith(f"Trello MCP Server v{settings.VERSION}")
    assert "Tools: 76" in text
    assert "Retries after HTTP 429: unbounded" in text


def test_unknown_resource_rejected() -> None:
    with pytest.raises(ValueError, match="Unknown resource"):
        resources.read_resource("trello://nope", Settings(), 0)


@pytest.mark.asyncio
async def test_build_services_uses_settings(memory_keyring: MemoryKeyring) -> None:
    KeyringCredentialStore().set("k", "t")
    settings = Settings(API_BASE_URL="https://trello.test/1/", RATE_LIMIT_SAFETY_BUFFER=2)

    services = build_services(settings)
    try:
        assert services.gateway.build_url("/boards/b1") == "https://trello.test/1/boards/b1?key=k&token=t"
        assert services.boards.gateway is services.gateway
        assert services.checklists.gateway is services.gateway
    finally:
        await services.aclose()


def test_build_services_requires_credentials(memory_keyring: MemoryKeyring) -> None:
    with pytest.raises(CredentialsNotFoundError):
        build_services(Settings())
