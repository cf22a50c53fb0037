"""Safety classification for Protect tools.

Every tool belongs to exactly one safety class. The class decides the MCP
annotations the tool advertises, whether it is installed in read-only mode,
and which guard (confirmation or dry-run) it must offer.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from mcp.types import CallToolResult, TextContent, ToolAnnotations

from unifi_protect_mcp.mcp.responses import format_success


class SafetyClass(str, Enum):
    """Safety classes for tools.

    Attributes:
        READ_ONLY: Never mutates controller state; always installed.
        WRITE: Mutates state reversibly; offers a dry-run preview.
        DESTRUCTIVE: Irreversible or externally visible side effect; offers
            confirmation and/or a dry-run preview.
    """

    READ_ONLY = 'read_only'
    WRITE = 'write'
    DESTRUCTIVE = 'destructive'

    @property
    def read_only_hint(self) -> bool:
        return self is SafetyClass.READ_ONLY

    @property
    def destructive_hint(self) -> bool:
        return self is SafetyClass.DESTRUCTIVE

    @property
    def annotations(self) -> ToolAnnotations:
        """MCP annotations advertised for tools of this class."""
        return ToolAnnotations(
            readOnlyHint=self.read_only_hint,
            destructiveHint=self.destructive_hint,
        )


READ_ONLY = SafetyClass.READ_ONLY
WRITE = SafetyClass.WRITE
DESTRUCTIVE = SafetyClass.DESTRUCTIVE

_NO_BODY: Any = object()


def format_dry_run(method: str, path: str, body: Any = _NO_BODY) -> CallToolResult:
    """Build the preview of a request that would have been sent.

    The payload is ``{"dryRun": true, "action": method, "path": path}`` with a
    ``body`` key only when a body is passed.
    """
    preview: dict[str, Any] = {'dryRun': True, 'action': method, 'path': path}
    if body is not _NO_BODY:
        preview['body'] = body
    return format_success(preview)


def require_confirmation(confirm: Any, action: str) -> CallToolResult | None:
    """Refuse an irreversible action unless ``confirm`` is literally ``True``.

    Returns:
        An error envelope when confirmation is missing, otherwise None.
    """
    if confirm is not True:
        return CallToolResult(
            content=[
                TextContent(
                    type='text',
                    text=f'Error: You must set confirm to true to {action}',
                )
            ],
            isError=True,
        )
    return None
