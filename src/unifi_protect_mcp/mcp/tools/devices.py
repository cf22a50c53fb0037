"""Generic device tools for lights, sensors, chimes and viewers.

Each device type gets the same list/get/update triplet, built from one
template. None of these tools is destructive.
"""

from __future__ import annotations

from dataclasses import dataclass

from unifi_protect_mcp.mcp.catalog import (
    Operation,
    dry_run_field,
    id_field,
    params_model,
    settings_body,
    settings_field,
)
from unifi_protect_mcp.mcp.safety import READ_ONLY, WRITE


@dataclass(frozen=True)
class DeviceType:
    """A device type exposed through the generic device template.

    Attributes:
        name: Singular type name used in tool names, e.g. ``light``.
        settings_hint: Known settings fields, appended to the schema description.
        plural: Plural used in tool names and API paths (default: name + "s").
    """

    name: str
    settings_hint: str
    plural: str = ''

    @property
    def collection(self) -> str:
        return self.plural or f'{self.name}s'

    @property
    def label(self) -> str:
        return self.name.capitalize()


DEVICE_TYPES: tuple[DeviceType, ...] = (
    DeviceType(
        'light',
        'Known fields: name (string), isLightForceEnabled (boolean), '
        'lightModeSettings (object with mode, enableAt), lightDeviceSettings '
        '(object with isIndicatorEnabled, pirDuration, pirSensitivity, ledLevel)',
    ),
    DeviceType(
        'sensor',
        'Known fields: name (string), mountType (string), motionSettings (object), '
        'humiditySettings (object), temperatureSettings (object), lightSettings '
        '(object), alarmSettings (object)',
    ),
    DeviceType(
        'chime',
        'Known fields: name (string), volume (number), ringSettings '
        '(array of ring tone configurations)',
    ),
    DeviceType(
        'viewer',
        'Known fields: name (string), liveview (string, liveview ID to display)',
    ),
)


def device_operations(device: DeviceType) -> tuple[Operation, ...]:
    """Build the list/get/update tools for one device type."""
    plural = device.collection
    get_params = params_model(f'{device.label}Params', id=id_field(device.label))
    update_params = params_model(
        f'Update{device.label}Params',
        id=id_field(device.label),
        settings=settings_field(
            f'Partial {device.name} settings to update. {device.settings_hint}'
        ),
        dry_run=dry_run_field(),
    )

    return (
        Operation(
            name=f'protect_list_{plural}',
            description=f'List all {plural} managed by UniFi Protect',
            method='GET',
            path_template=f'/{plural}',
            safety=READ_ONLY,
            family='device',
        ),
        Operation(
            name=f'protect_get_{device.name}',
            description=f'Get details for a specific {device.name} by ID',
            method='GET',
            path_template=f'/{plural}/{{id}}',
            safety=READ_ONLY,
            family='device',
            params=get_params,
        ),
        Operation(
            name=f'protect_update_{device.name}',
            description=f'Update {device.name} settings (partial update via PATCH)',
            method='PATCH',
            path_template=f'/{plural}/{{id}}',
            safety=WRITE,
            family='device',
            params=update_params,
            body=settings_body,
        ),
    )


def all_device_operations(
    device_types: tuple[DeviceType, ...] = DEVICE_TYPES,
) -> tuple[Operation, ...]:
    """Build the device family of the catalog, one triplet per type."""
    return tuple(op for device in device_types for op in device_operations(device))
