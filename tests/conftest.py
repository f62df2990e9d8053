"""Shared fixtures for the Trello MCP server tests."""

from collections.abc import AsyncIterator

import keyring
import pytest
from keyring.errors import PasswordDeleteError

from credentials import TrelloCredentials
from services import TrelloServices
from services.gateway import TrelloGateway

API_KEY = "test-api-key"
TOKEN = "test-token-0123456789"
BASE_URL = "https://api.trello.com/1"


class FakeClock:
    """Deterministic wall clock whose sleep advances time instantly."""

    def __init__(self, now: float = 1000.0) -> None:
        self.now = now
        self.sleeps: list[float] = []

    def __call__(self) -> float:
        return self.now

    async def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.now += seconds


class MemoryKeyring:
    """In-memory stand-in for the OS keyring backend."""

    def __init__(self) -> None:
        self.passwords: dict[tuple[str, str], str] = {}

    def get_password(self, service: str, username: str) -> str | None:
        return self.passwords.get((service, username))

    def set_password(self, service: str, username: str, password: str) -> None:
        self.passwords[(service, username)] = password

    def delete_password(self, service: str, username: str) -> None:
        if (service, username) not in self.passwords:
            raise PasswordDeleteError("Password not found")
        del self.passwords[(service, username)]


@pytest.fixture
def memory_keyring(monkeypatch: pytest.MonkeyPatch) -> MemoryKeyring:
    backend = MemoryKeyring()
    monkeypatch.setattr(keyring, "get_password", backend.get_password)
    monkeypatch.setattr(keyring, "set_password", backend.set_password)
    monkeypatch.setattr(keyring, "delete_password", backend.delete_password)
    return backend


@pytest.fixture
def credentials() -> TrelloCredentials:
    return TrelloCredentials(api_key=API_KEY, token=TOKEN)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
async def gateway(credentials: TrelloCredentials, clock: FakeClock) -> AsyncIterator[TrelloGateway]:
    """Gateway with an owned httpx client (intercepted by respx) and a fake clock."""
    async with TrelloGateway(credentials, clock=clock, sleep=clock.sleep) as trello_gateway:
        yield trello_gateway


@pytest.fixture
def services(gateway: TrelloGateway) -> TrelloServices:
    return TrelloServices.from_gateway(gateway)
