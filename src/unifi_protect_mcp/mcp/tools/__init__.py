"""Tool catalog for the UniFi Protect MCP server.

The catalog is built once, in family order: system, camera, device,
live view, file.
"""

from __future__ import annotations

from unifi_protect_mcp.mcp.catalog import Operation
from unifi_protect_mcp.mcp.tools.cameras import camera_operations
from unifi_protect_mcp.mcp.tools.devices import DEVICE_TYPES, DeviceType, all_device_operations
from unifi_protect_mcp.mcp.tools.files import file_operations
from unifi_protect_mcp.mcp.tools.liveviews import liveview_operations
from unifi_protect_mcp.mcp.tools.system import system_operations


def build_catalog() -> tuple[Operation, ...]:
    """Build the full, ordered tool catalog.

    Raises:
        ValueError: If two operations share a name.
    """
    catalog = (
        *system_operations(),
        *camera_operations(),
        *all_device_operations(),
        *liveview_operations(),
        *file_operations(),
    )
    seen: set[str] = set()
    for operation in catalog:
        if operation.name in seen:
            raise ValueError(f'Duplicate tool name in catalog: {operation.name}')
        seen.add(operation.name)
    return catalog


__all__ = [
    'DEVICE_TYPES',
    'DeviceType',
    'build_catalog',
    'camera_operations',
    'all_device_operations',
    'file_operations',
    'liveview_operations',
    'system_operations',
]
