"""UniFi Protect MCP server.

This package exposes UniFi Protect Integration API calls as MCP tools, each
classified as read-only, write or destructive.

Safety classes:
    - read_only: always installed, no guard
    - write: installed in read-write mode only, offers a ``dryRun`` preview
    - destructive: installed in read-write mode only, requires
      ``confirm: true`` and/or offers a ``dryRun`` preview

Usage:
    # Run the MCP server (read-only unless UNIFI_PROTECT_READ_ONLY=false)
    unifi-protect-mcp
"""

from .catalog import Operation
from .registry import ToolRegistry, register_all
from .safety import SafetyClass, format_dry_run, require_confirmation
from .server import create_server, main, serve

__all__ = [
    'Operation',
    'SafetyClass',
    'ToolRegistry',
    'create_server',
    'format_dry_run',
    'main',
    'register_all',
    'require_confirmation',
    'serve',
]
