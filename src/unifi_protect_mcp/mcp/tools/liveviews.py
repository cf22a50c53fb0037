"""Live view tools."""

from __future__ import annotations

from unifi_protect_mcp.mcp.catalog import (
    Operation,
    dry_run_field,
    id_field,
    params_model,
    settings_body,
    settings_field,
)
from unifi_protect_mcp.mcp.safety import READ_ONLY, WRITE


LiveviewParams = params_model('LiveviewParams', id=id_field('Liveview'))

CreateLiveviewParams = params_model(
    'CreateLiveviewParams',
    settings=settings_field('Liveview configuration (JSON object with name, slots, etc.)'),
    dry_run=dry_run_field(),
)

UpdateLiveviewParams = params_model(
    'UpdateLiveviewParams',
    id=id_field('Liveview'),
    settings=settings_field('Partial liveview settings to update (JSON object)'),
    dry_run=dry_run_field(),
)


def liveview_operations() -> tuple[Operation, ...]:
    """Build the live view family of the catalog."""
    return (
        Operation(
            name='protect_list_liveviews',
            description='List all live views configured in UniFi Protect',
            method='GET',
            path_template='/liveviews',
            safety=READ_ONLY,
            family='liveview',
        ),
        Operation(
            name='protect_get_liveview',
            description='Get details for a specific live view by ID',
            method='GET',
            path_template='/liveviews/{id}',
            safety=READ_ONLY,
            family='liveview',
            params=LiveviewParams,
        ),
        Operation(
            name='protect_create_liveview',
            description='Create a new live view',
            method='POST',
            path_template='/liveviews',
            safety=WRITE,
            family='liveview',
            params=CreateLiveviewParams,
            body=settings_body,
        ),
        Operation(
            name='protect_update_liveview',
            description='Update an existing live view (partial update via PATCH)',
            method='PATCH',
            path_template='/liveviews/{id}',
            safety=WRITE,
            family='liveview',
            params=UpdateLiveviewParams,
            body=settings_body,
        ),
    )
