"""MCP server for UniFi Protect tools.

Wires the tool registry into the MCP SDK's low-level server and runs it over
stdio. Tool call results are returned to the caller exactly as the registry
produced them, including error envelopes.
"""

from __future__ import annotations

import asyncio
import sys

import mcp.types as types
from loguru import logger
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server

from unifi_protect_mcp import __version__
from unifi_protect_mcp.client import ProtectClient
from unifi_protect_mcp.config import ProtectConfig, load_config
from unifi_protect_mcp.mcp.registry import ToolRegistry, register_all
from unifi_protect_mcp.mcp.tools import build_catalog


SERVER_NAME = 'unifi-protect'


def create_server(registry: ToolRegistry) -> Server:
    """Create an MCP server exposing the registry's installed tools."""
    server: Server = Server(SERVER_NAME, version=__version__)

    @server.list_tools()
    async def list_tools() -> list[types.Tool]:
        return registry.list_tools()

    # Registered directly so the envelope reaches the caller unmodified.
    async def call_tool(request: types.CallToolRequest) -> types.ServerResult:
        result = await registry.call_tool(request.params.name, request.params.arguments)
        return types.ServerResult(result)

    server.request_handlers[types.CallToolRequest] = call_tool
    return server


async def serve(config: ProtectConfig) -> None:
    """Connect to the Protect API and serve tools over stdio until EOF."""
    async with ProtectClient(config) as client:
        registry = register_all(ToolRegistry(client), build_catalog(), config.read_only)
        server = create_server(registry)

        async with stdio_server() as (read_stream, write_stream):
            logger.info(f'UniFi Protect MCP server running on stdio ({config.host})')
            await server.run(
                read_stream,
                write_stream,
                server.create_initialization_options(),
            )


def configure_logging(debug: bool = False) -> None:
    """Send logs to stderr; stdout carries the MCP protocol."""
    logger.remove()
    logger.add(sys.stderr, level='DEBUG' if debug else 'INFO')


def main() -> None:
    """Entry point for the unifi-protect-mcp console script."""
    configure_logging()
    config = load_config()
    configure_logging(config.debug)
    asyncio.run(serve(config))


if __name__ == '__main__':
    main()
