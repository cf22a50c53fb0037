"""Camera tools: inventory, snapshots, RTSPS streams, talkback and PTZ."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from mcp.types import CallToolResult

from unifi_protect_mcp.mcp.catalog import (
    Operation,
    confirm_field,
    dry_run_field,
    id_field,
    params_model,
    settings_body,
    settings_field,
    slot_field,
)
from unifi_protect_mcp.mcp.responses import format_image
from unifi_protect_mcp.mcp.safety import DESTRUCTIVE, READ_ONLY, WRITE


if TYPE_CHECKING:
    from unifi_protect_mcp.client import ProtectClient


CameraParams = params_model('CameraParams', id=id_field('Camera'))

CameraActionParams = params_model(
    'CameraActionParams',
    id=id_field('Camera'),
    dry_run=dry_run_field(),
)

UpdateCameraParams = params_model(
    'UpdateCameraParams',
    id=id_field('Camera'),
    settings=settings_field('Partial camera settings to update (JSON object)'),
    dry_run=dry_run_field(),
)

DisableMicParams = params_model(
    'DisableMicParams',
    id=id_field('Camera'),
    confirm=confirm_field('Must be true to confirm this irreversible action'),
)

PatrolParams = params_model(
    'PatrolParams',
    id=id_field('Camera'),
    slot=slot_field('Patrol slot number'),
    dry_run=dry_run_field(),
)

PresetParams = params_model(
    'PresetParams',
    id=id_field('Camera'),
    slot=slot_field('PTZ preset slot number'),
    dry_run=dry_run_field(),
)


async def _fetch_snapshot(
    operation: Operation, client: ProtectClient, params: Any, path: str
) -> CallToolResult:
    snapshot = await client.get_binary(path)
    return format_image(snapshot.data, snapshot.mime_type)


def camera_operations() -> tuple[Operation, ...]:
    """Build the camera family of the catalog."""
    return (
        Operation(
            name='protect_list_cameras',
            description='List all cameras managed by UniFi Protect',
            method='GET',
            path_template='/cameras',
            safety=READ_ONLY,
            family='camera',
        ),
        Operation(
            name='protect_get_camera',
            description='Get details for a specific camera by ID',
            method='GET',
            path_template='/cameras/{id}',
            safety=READ_ONLY,
            family='camera',
            params=CameraParams,
        ),
        Operation(
            name='protect_get_snapshot',
            description='Get a JPEG snapshot from a camera (returns image)',
            method='GET',
            path_template='/cameras/{id}/snapshot',
            safety=READ_ONLY,
            family='camera',
            params=CameraParams,
            execute=_fetch_snapshot,
        ),
        Operation(
            name='protect_get_rtsp_streams',
            description='Get active RTSPS stream sessions for a camera',
            method='GET',
            path_template='/cameras/{id}/rtsps-stream',
            safety=READ_ONLY,
            family='camera',
            params=CameraParams,
        ),
        Operation(
            name='protect_update_camera',
            description='Update camera settings (partial update via PATCH)',
            method='PATCH',
            path_template='/cameras/{id}',
            safety=WRITE,
            family='camera',
            params=UpdateCameraParams,
            body=settings_body,
        ),
        Operation(
            name='protect_create_rtsp_stream',
            description='Create an RTSPS stream session for a camera',
            method='POST',
            path_template='/cameras/{id}/rtsps-stream',
            safety=WRITE,
            family='camera',
            params=CameraActionParams,
        ),
        Operation(
            name='protect_delete_rtsp_stream',
            description='Stop and delete an active RTSPS stream session for a camera',
            method='DELETE',
            path_template='/cameras/{id}/rtsps-stream',
            safety=DESTRUCTIVE,
            family='camera',
            params=CameraActionParams,
        ),
        Operation(
            name='protect_create_talkback',
            description='Create a talkback (two-way audio) session for a camera',
            method='POST',
            path_template='/cameras/{id}/talkback-session',
            safety=WRITE,
            family='camera',
            params=CameraActionParams,
        ),
        Operation(
            name='protect_disable_mic',
            description=(
                'IRREVERSIBLE: Permanently disable the microphone on a camera. '
                'Cannot be re-enabled.'
            ),
            method='POST',
            path_template='/cameras/{id}/disable-mic-permanently',
            safety=DESTRUCTIVE,
            family='camera',
            params=DisableMicParams,
            confirm_action='permanently disable the microphone on camera {id}',
        ),
        Operation(
            name='protect_start_ptz_patrol',
            description='Start PTZ patrol on a camera at a given slot',
            method='POST',
            path_template='/cameras/{id}/ptz/patrol/start/{slot}',
            safety=WRITE,
            family='camera',
            params=PatrolParams,
        ),
        Operation(
            name='protect_stop_ptz_patrol',
            description='Stop PTZ patrol on a camera',
            method='POST',
            path_template='/cameras/{id}/ptz/patrol/stop',
            safety=WRITE,
            family='camera',
            params=CameraActionParams,
        ),
        Operation(
            name='protect_goto_ptz_preset',
            description='Move camera PTZ to a preset position',
            method='POST',
            path_template='/cameras/{id}/ptz/goto/{slot}',
            safety=WRITE,
            family='camera',
            params=PresetParams,
        ),
    )
