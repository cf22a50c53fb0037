"""File tools: listing, uploads and alarm manager webhooks."""

from __future__ import annotations

import base64
from typing import TYPE_CHECKING, Any

from mcp.types import CallToolResult
from pydantic import Field

from unifi_protect_mcp.mcp.catalog import (
    Operation,
    confirm_field,
    dry_run_field,
    id_field,
    params_model,
)
from unifi_protect_mcp.mcp.responses import format_success
from unifi_protect_mcp.mcp.safety import DESTRUCTIVE, READ_ONLY, WRITE


if TYPE_CHECKING:
    from unifi_protect_mcp.client import ProtectClient


ListFilesParams = params_model(
    'ListFilesParams',
    file_type=(
        str,
        Field(alias='fileType', description="File type to list (e.g. 'video', 'timelapse')"),
    ),
)

UploadFileParams = params_model(
    'UploadFileParams',
    file_type=(str, Field(alias='fileType', description='File type category for upload')),
    base64_data=(str, Field(alias='base64Data', description='Base64-encoded file content')),
    content_type=(
        str,
        Field(
            default='application/octet-stream',
            alias='contentType',
            description='MIME type of the file',
        ),
    ),
    dry_run=dry_run_field(),
)

TriggerWebhookParams = params_model(
    'TriggerWebhookParams',
    id=id_field('Webhook'),
    confirm=confirm_field('Must be true to confirm triggering the alarm webhook'),
)


def _upload_summary(params: Any) -> dict[str, Any]:
    return {'contentType': params.content_type, 'dataLength': len(params.base64_data)}


async def _upload(
    operation: Operation, client: ProtectClient, params: Any, path: str
) -> CallToolResult:
    data = base64.b64decode(params.base64_data, validate=True)
    result = await client.post_binary(path, data, params.content_type)
    return format_success(result)


async def _trigger_webhook(
    operation: Operation, client: ProtectClient, params: Any, path: str
) -> CallToolResult:
    await client.post(path)
    return format_success({'triggered': True, 'webhookId': params.id})


def file_operations() -> tuple[Operation, ...]:
    """Build the file family of the catalog."""
    return (
        Operation(
            name='protect_list_files',
            description="List files of a given type (e.g. 'video', 'timelapse')",
            method='GET',
            path_template='/files/{file_type}',
            safety=READ_ONLY,
            family='file',
            params=ListFilesParams,
        ),
        Operation(
            name='protect_trigger_alarm_webhook',
            description=(
                'Trigger an alarm manager webhook by ID. '
                'This fires an external alarm action.'
            ),
            method='POST',
            path_template='/alarm-manager/webhook/{id}',
            safety=DESTRUCTIVE,
            family='file',
            params=TriggerWebhookParams,
            confirm_action='trigger alarm webhook {id}',
            execute=_trigger_webhook,
        ),
        Operation(
            name='protect_upload_file',
            description='Upload a base64-encoded file to UniFi Protect',
            method='POST',
            path_template='/files/{file_type}',
            safety=WRITE,
            family='file',
            params=UploadFileParams,
            body=_upload_summary,
            execute=_upload,
        ),
    )
