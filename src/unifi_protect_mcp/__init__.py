"""UniFi Protect MCP server package.

Example:
    >>> from unifi_protect_mcp import ProtectConfig, ProtectClient
    >>>
    >>> config = ProtectConfig.from_env()
    >>> async with ProtectClient(config) as client:
    ...     cameras = await client.get('/cameras')
"""

from unifi_protect_mcp.client import (
    BinaryPayload,
    ProtectAPIError,
    ProtectClient,
    ProtectClientError,
    ProtectConnectionError,
)
from unifi_protect_mcp.config import ProtectConfig, load_config


__version__ = '1.0.0'

__all__ = [
    '__version__',
    # Configuration
    'ProtectConfig',
    'load_config',
    # Client
    'ProtectClient',
    'BinaryPayload',
    # Exceptions
    'ProtectClientError',
    'ProtectAPIError',
    'ProtectConnectionError',
]
