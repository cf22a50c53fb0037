"""System tools: controller information and NVR inventory."""

from __future__ import annotations

from unifi_protect_mcp.mcp.catalog import Operation
from unifi_protect_mcp.mcp.safety import READ_ONLY


def system_operations() -> tuple[Operation, ...]:
    """Build the system family of the catalog."""
    return (
        Operation(
            name='protect_get_info',
            description='Get UniFi Protect system information and version details',
            method='GET',
            path_template='/meta/info',
            safety=READ_ONLY,
            family='system',
        ),
        Operation(
            name='protect_list_nvrs',
            description='List all NVR (Network Video Recorder) devices',
            method='GET',
            path_template='/nvrs',
            safety=READ_ONLY,
            family='system',
        ),
    )
