"""Uniform result envelopes returned by every tool handler."""

from __future__ import annotations

import base64
import json
from typing import Any

from mcp.types import CallToolResult, ImageContent, TextContent

from unifi_protect_mcp.client import ProtectClientError


def format_success(data: Any) -> CallToolResult:
    """Wrap a value as pretty-printed JSON text."""
    text = json.dumps(data, indent=2, ensure_ascii=False)
    return CallToolResult(content=[TextContent(type='text', text=text)])


def format_image(data: bytes, mime_type: str) -> CallToolResult:
    """Wrap binary image data as a base64 image block."""
    encoded = base64.b64encode(data).decode('ascii')
    return CallToolResult(
        content=[ImageContent(type='image', data=encoded, mimeType=mime_type)]
    )


def format_error(err: object) -> CallToolResult:
    """Wrap an error as an ``isError`` envelope with ``Error: <message>`` text."""
    if isinstance(err, ProtectClientError):
        message = err.message
    else:
        try:
            message = str(err)
        except Exception:
            message = repr(err)
    return CallToolResult(
        content=[TextContent(type='text', text=f'Error: {message}')],
        isError=True,
    )
