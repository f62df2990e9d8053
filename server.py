#!/usr/bin/env python3
"""
Trello MCP Server
A Model Context Protocol server that exposes the Trello REST API as tools.
"""

import asyncio
import sys

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import Resource, TextContent, Tool

import resources
import tools
from config import Settings, load_settings
from credentials import CredentialsNotFoundError, KeyringCredentialStore
from logging_utils import configure_logging, create_logger
from services import TrelloServices
from services.gateway import TrelloGateway

logger = create_logger("trello.server")


class ToolCallError(Exception):
    """Carries an error result's text back through the MCP server."""


def create_server(services: TrelloServices, settings: Settings) -> Server:
    """Build the MCP server with every handler bound to `services`."""
    app = Server(settings.SERVICE_NAME)

    @app.list_tools()
    async def list_tools() -> list[Tool]:
        return tools.TOOLS

    @app.call_tool()
    async def call_tool(name: str, arguments: dict) -> list[TextContent]:
        result = await tools.call_tool(services, name, arguments)
        if result.isError:
            # The server turns a raised exception into an isError result
            raise ToolCallError(result.content[0].text)
        return result.content

    @app.list_resources()
    async def list_resources() -> list[Resource]:
        return resources.RESOURCES

    @app.read_resource()
    async def read_resource(uri) -> str:
        return resources.read_resource(str(uri), settings, len(tools.TOOLS))

    return app


def build_services(settings: Settings, store: KeyringCredentialStore | None = None) -> TrelloServices:
    """
    Wire the gateway and adapters from settings and stored credentials.

    Raises:
        CredentialsNotFoundError: If the keyring has no credential pair.
    """
    store = store or KeyringCredentialStore(settings.SERVICE_NAME)
    gateway = TrelloGateway(
        store.get(),
        base_url=settings.API_BASE_URL,
        timeout=settings.REQUEST_TIMEOUT_SECONDS,
        safety_buffer=settings.RATE_LIMIT_SAFETY_BUFFER,
        max_rate_limit_retries=settings.RATE_LIMIT_MAX_RETRIES,
    )
    return TrelloServices.from_gateway(gateway)


async def main(settings: Settings, services: TrelloServices) -> None:
    """Run the MCP server."""
    app = create_server(services, settings)
    logger.info("Trello MCP server running on stdio", tools=len(tools.TOOLS), version=settings.VERSION)
    try:
        async with stdio_server() as (read_stream, write_stream):
            await app.run(
                read_stream,
                write_stream,
                app.create_initialization_options(),
            )
    finally:
        await services.aclose()


def run() -> None:
    """Console entry point."""
    settings = load_settings()
    configure_logging(settings.effective_log_level, settings.LOG_FORMAT)
    try:
        services = build_services(settings)
    except CredentialsNotFoundError as exc:
        logger.error("Trello credentials not available", error=str(exc))
        sys.exit(1)
    asyncio.run(main(settings, services))


if __name__ == "__main__":
    run()
