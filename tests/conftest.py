"""Shared fixtures for UniFi Protect MCP tests."""

from __future__ import annotations

import json
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest
from mcp.types import CallToolResult
from pydantic import SecretStr

from unifi_protect_mcp.config import ProtectConfig
from unifi_protect_mcp.mcp.catalog import Operation
from unifi_protect_mcp.mcp.registry import ToolRegistry, register_all
from unifi_protect_mcp.mcp.tools import build_catalog


@pytest.fixture
def protect_config() -> ProtectConfig:
    """Create a test ProtectConfig instance."""
    return ProtectConfig(host='192.168.1.1', api_key=SecretStr('test-api-key'))


@pytest.fixture
def mock_client() -> MagicMock:
    """Create a Protect client with every request method mocked."""
    client = MagicMock()
    client.get = AsyncMock()
    client.post = AsyncMock()
    client.patch = AsyncMock()
    client.delete = AsyncMock()
    client.get_binary = AsyncMock()
    client.post_binary = AsyncMock()
    return client


@pytest.fixture
def catalog() -> tuple[Operation, ...]:
    """Build the full tool catalog."""
    return build_catalog()


@pytest.fixture
def rw_registry(mock_client: MagicMock, catalog: tuple[Operation, ...]) -> ToolRegistry:
    """Registry with every tool installed (read-write mode)."""
    return register_all(ToolRegistry(mock_client), catalog, read_only=False)


@pytest.fixture
def ro_registry(mock_client: MagicMock, catalog: tuple[Operation, ...]) -> ToolRegistry:
    """Registry with read-only tools installed."""
    return register_all(ToolRegistry(mock_client), catalog, read_only=True)


def result_text(result: CallToolResult) -> str:
    """Text of the single content block of a result."""
    assert len(result.content) == 1
    return result.content[0].text  # type: ignore[union-attr]


def result_json(result: CallToolResult) -> Any:
    """Parse the JSON payload of a success result."""
    assert not result.isError
    return json.loads(result_text(result))


def assert_no_network(client: MagicMock) -> None:
    """Assert that no request method of the mock client was awaited."""
    for method in ('get', 'post', 'patch', 'delete', 'get_binary', 'post_binary'):
        getattr(client, method).assert_not_awaited()
