"""Tool registry for the UniFi Protect MCP server.

Holds the operations installed for this process and dispatches tool calls to
them. Which operations get installed is decided once, at startup, by
:func:`register_all` from the catalog and the read-only mode.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Iterable, Iterator

from loguru import logger
from mcp.types import CallToolResult, Tool

from unifi_protect_mcp.mcp.catalog import Operation
from unifi_protect_mcp.mcp.responses import format_error
from unifi_protect_mcp.mcp.safety import READ_ONLY, SafetyClass


if TYPE_CHECKING:
    from unifi_protect_mcp.client import ProtectClient


class ToolRegistry:
    """Installed tools, keyed by name, in installation order.

    Example:
        >>> registry = ToolRegistry(client)
        >>> register_all(registry, build_catalog(), read_only=True)
        >>> result = await registry.call_tool('protect_list_cameras', {})
    """

    def __init__(self, client: ProtectClient) -> None:
        """Initialize an empty registry bound to a Protect API client."""
        self._client = client
        self._tools: dict[str, Operation] = {}

    def install(self, operation: Operation) -> None:
        """Install one operation.

        Raises:
            ValueError: If a tool with the same name is already installed.
        """
        if operation.name in self._tools:
            raise ValueError(f'Tool already installed: {operation.name}')
        self._tools[operation.name] = operation

    @property
    def names(self) -> list[str]:
        """Names of installed tools, in installation order."""
        return list(self._tools)

    def get_tool(self, name: str) -> Operation | None:
        """Get an installed operation by name."""
        return self._tools.get(name)

    def search(
        self,
        query: str | None = None,
        family: str | None = None,
        safety: SafetyClass | None = None,
    ) -> list[dict[str, Any]]:
        """Search installed tools.

        Args:
            query: Text search in tool names and descriptions
            family: Filter by catalog family
            safety: Filter by safety class

        Returns:
            Summaries of matching tools, in installation order
        """
        results: list[dict[str, Any]] = []

        for name, operation in self._tools.items():
            if family and operation.family != family:
                continue

            if safety and operation.safety is not safety:
                continue

            if query:
                search_text = f'{name} {operation.description}'.lower()
                if query.lower() not in search_text:
                    continue

            results.append(
                {
                    'name': name,
                    'description': operation.description,
                    'family': operation.family,
                    'safety': operation.safety.value,
                }
            )

        return results

    def list_tools(self) -> list[Tool]:
        """MCP tool definitions for every installed operation."""
        return [
            Tool(
                name=operation.name,
                description=operation.description,
                inputSchema=operation.input_schema,
                annotations=operation.safety.annotations,
            )
            for operation in self._tools.values()
        ]

    async def call_tool(
        self, name: str, arguments: dict[str, Any] | None = None
    ) -> CallToolResult:
        """Dispatch a tool call; unknown or uninstalled names get an error envelope."""
        operation = self._tools.get(name)
        if operation is None:
            logger.warning(f'Call to unknown tool: {name}')
            return format_error(f'Unknown tool: {name}')
        return await operation.invoke(self._client, arguments)

    def __iter__(self) -> Iterator[Operation]:
        return iter(self._tools.values())

    def __len__(self) -> int:
        """Return the number of installed tools."""
        return len(self._tools)

    def __contains__(self, name: object) -> bool:
        """Check if a tool is installed."""
        return name in self._tools


def is_installable(operation: Operation, read_only: bool) -> bool:
    """Whether an operation may be installed in the given mode."""
    return not read_only or operation.safety is READ_ONLY


def register_all(
    registry: ToolRegistry,
    catalog: Iterable[Operation],
    read_only: bool,
) -> ToolRegistry:
    """Install every operation allowed by the mode, in catalog order.

    In read-only mode exactly the read-only operations are installed.
    """
    skipped = 0
    for operation in catalog:
        if is_installable(operation, read_only):
            registry.install(operation)
        else:
            skipped += 1

    mode = 'read-only' if read_only else 'read-write'
    logger.info(f'Registered {len(registry)} tools in {mode} mode ({skipped} withheld)')
    return registry
