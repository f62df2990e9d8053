"""
Credential setup CLI for the Trello MCP Server.

Stores the Trello API key and token in the OS credential manager
(macOS Keychain, Windows Credential Manager, libsecret on Linux) and can
migrate them out of a legacy .env file.
"""

import asyncio
from dataclasses import dataclass
from pathlib import Path

import typer
from dotenv import dotenv_values

from config import load_settings
from credentials import CredentialsNotFoundError, KeyringCredentialStore, mask
from logging_utils import configure_logging
from server import build_services
from services.errors import TrelloError

app = typer.Typer(help="Manage the Trello credentials used by the MCP server")

ENV_FILES = (".env", ".env.local")
API_KEY_VARIABLE = "TRELLO_API_KEY"
TOKEN_VARIABLE = "TRELLO_TOKEN"

# Values left in from the example .env file
_PLACEHOLDERS = {"your_trello_api_key_here", "your_trello_token_here"}


@dataclass
class EnvCredentials:
    path: Path
    api_key: str | None
    token: str | None


def find_env_credentials(directory: Path) -> EnvCredentials | None:
    """First .env file in `directory` holding a Trello key or token."""
    for name in ENV_FILES:
        path = directory / name
        if not path.is_file():
            continue
        values = dotenv_values(path)
        api_key = values.get(API_KEY_VARIABLE)
        token = values.get(TOKEN_VARIABLE)
        api_key = api_key if api_key and api_key not in _PLACEHOLDERS else None
        token = token if token and token not in _PLACEHOLDERS else None
        if api_key or token:
            return EnvCredentials(path=path, api_key=api_key, token=token)
    return None


def remove_env_credentials(path: Path) -> bool:
    """
    Drop the Trello variables from an env file.

    Returns True if the file was deleted because nothing else was left in it.
    """
    kept = [
        line
        for line in path.read_text(encoding="utf-8").splitlines()
        if line.split("=", 1)[0].strip() not in (API_KEY_VARIABLE, TOKEN_VARIABLE)
    ]
    if not "\n".join(kept).strip():
        path.unlink()
        return True
    path.write_text("\n".join(kept) + "\n", encoding="utf-8")
    return False


def _prompt_secret(label: str) -> str:
    value = typer.prompt(f"Enter your Trello {label}", hide_input=True).strip()
    if not value:
        typer.secho(f"{label} cannot be empty.", fg=typer.colors.RED, err=True)
        raise typer.Exit(1)
    return value


def _migrate(store: KeyringCredentialStore, found: EnvCredentials) -> bool:
    typer.echo(f"Found Trello credentials in {found.path}")
    if not typer.confirm("Migrate these credentials to secure storage?", default=True):
        return False

    api_key = found.api_key or _prompt_secret("API Key")
    token = found.token or _prompt_secret("Token")
    store.set(api_key, token)
    typer.secho("Credentials migrated to secure storage.", fg=typer.colors.GREEN)

    if typer.confirm(f"Remove credentials from {found.path.name}?", default=True):
        try:
            deleted = remove_env_credentials(found.path)
        except OSError as exc:
            typer.secho(f"Could not modify {found.path}: {exc}", fg=typer.colors.YELLOW, err=True)
        else:
            action = "Deleted empty" if deleted else "Removed Trello credentials from"
            typer.echo(f"{action} {found.path}")
    return True


@app.command()
def store(
    env_dir: Path = typer.Option(
        Path("."), "--env-dir", help="Directory to search for a .env file to migrate", file_okay=False
    ),
) -> None:
    """Store the Trello API key and token in the OS credential manager."""
    settings = load_settings()
    credential_store = KeyringCredentialStore(settings.SERVICE_NAME)

    found = find_env_credentials(env_dir)
    if found and _migrate(credential_store, found):
        return

    if credential_store.exists() and not typer.confirm(
        "Credentials already exist in your credential store. Overwrite them?", default=False
    ):
        typer.echo("Setup cancelled. Existing credentials unchanged.")
        raise typer.Exit(0)

    typer.echo("To get your Trello credentials:")
    typer.echo("  1. Go to https://trello.com/app-key and copy your API Key")
    typer.echo('  2. Click "Generate a Token" and copy the token')

    api_key = _prompt_secret("API Key")
    token = _prompt_secret("Token")
    credential_store.set(api_key, token)
    typer.secho("Credentials stored in your OS credential manager.", fg=typer.colors.GREEN)


@app.command()
def status() -> None:
    """Show whether credentials are stored, with the values masked."""
    settings = load_settings()
    credential_store = KeyringCredentialStore(settings.SERVICE_NAME)
    if not credential_store.exists():
        typer.echo("No Trello credentials stored.")
        raise typer.Exit(1)
    credentials = credential_store.get()
    typer.echo(f"API Key: {mask(credentials.api_key)}")
    typer.echo(f"Token:   {mask(credentials.token)}")


@app.command()
def delete(
    yes: bool = typer.Option(False, "--yes", "-y", help="Do not ask for confirmation"),
) -> None:
    """Delete the stored credentials."""
    settings = load_settings()
    if not yes and not typer.confirm("Delete the stored Trello credentials?", default=False):
        raise typer.Exit(0)
    removed = KeyringCredentialStore(settings.SERVICE_NAME).delete()
    if removed:
        typer.secho(f"Deleted: {', '.join(removed)}", fg=typer.colors.GREEN)
    else:
        typer.echo("No Trello credentials were stored.")


async def _fetch_me(services) -> dict:
    try:
        return await services.members.get_me(fields=["username", "fullName"])
    finally:
        await services.aclose()


@app.command()
def verify() -> None:
    """Check the stored credentials against GET /members/me."""
    settings = load_settings()
    configure_logging(settings.effective_log_level, settings.LOG_FORMAT)
    try:
        services = build_services(settings)
        me = asyncio.run(_fetch_me(services))
    except (CredentialsNotFoundError, TrelloError) as exc:
        typer.secho(f"Verification failed: {exc}", fg=typer.colors.RED, err=True)
        raise typer.Exit(1)
    typer.secho(
        f"Authenticated as {me.get('fullName') or me.get('username')} (@{me.get('username')})",
        fg=typer.colors.GREEN,
    )


if __name__ == "__main__":
    app()
