"""
Secure credential storage using the OS native credential manager.

Backed by `keyring`: macOS Keychain, Windows Credential Manager,
libsecret on Linux. There is no plaintext fallback.
"""

from dataclasses import dataclass, field

import keyring
from keyring.errors import PasswordDeleteError

SERVICE_NAME = "trello-mcp-server"
API_KEY_ENTRY = "api_key"
TOKEN_ENTRY = "token"

SETUP_HINT = (
    "Run 'trello-mcp-credentials store' to save your Trello API key and token.\n\n"
    "To get your credentials:\n"
    "  1. Go to https://trello.com/app-key to get your API key\n"
    "  2. Click \"Generate a Token\" on that page to get your token"
)


class CredentialsNotFoundError(Exception):
    """Raised when the credential store has no Trello key or token."""


@dataclass(frozen=True)
class TrelloCredentials:
    api_key: str = field(repr=False)
    token: str = field(repr=False)


class KeyringCredentialStore:
    """Reads and writes the Trello credential pair in the OS keyring."""

    def __init__(self, service_name: str = SERVICE_NAME) -> None:
        self.service_name = service_name

    def get(self) -> TrelloCredentials:
        """
        Get Trello credentials.

        Raises:
            CredentialsNotFoundError: If either entry is missing.
        """
        api_key = keyring.get_password(self.service_name, API_KEY_ENTRY)
        token = keyring.get_password(self.service_name, TOKEN_ENTRY)

        missing = [name for name, value in ((API_KEY_ENTRY, api_key), (TOKEN_ENTRY, token)) if not value]
        if missing:
            raise CredentialsNotFoundError(
                f"Trello credentials not found in OS credential store "
                f"(missing: {', '.join(missing)}).\n\n{SETUP_HINT}"
            )

        return TrelloCredentials(api_key=api_key, token=token)

    def set(self, api_key: str, token: str) -> None:
        """Store both entries."""
        if not api_key or not token:
            raise ValueError("API key and token must both be non-empty.")
        keyring.set_password(self.service_name, API_KEY_ENTRY, api_key)
        keyring.set_password(self.service_name, TOKEN_ENTRY, token)

    def delete(self) -> list[str]:
        """Delete both entries. Returns the names of entries that were removed."""
        removed = []
        for entry in (API_KEY_ENTRY, TOKEN_ENTRY):
            try:
                keyring.delete_password(self.service_name, entry)
            except PasswordDeleteError:
                continue
            removed.append(entry)
        return removed

    def exists(self) -> bool:
        return (
            keyring.get_password(self.service_name, API_KEY_ENTRY) is not None
            and keyring.get_password(self.service_name, TOKEN_ENTRY) is not None
        )


def mask(value: str) -> str:
    """Mask a secret for display, keeping the first few characters."""
    if len(value) <= 8:
        return "*" * len(value)
    return value[:4] + "..." + value[-2:]
