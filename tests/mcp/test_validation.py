"""Tests for the parameter models of the catalog.

These check that the schemas themselves reject malformed arguments,
independently of any handler logic.
"""

from __future__ import annotations

from typing import Any

import pytest
from pydantic import ValidationError

from unifi_protect_mcp.mcp.tools import build_catalog


TOOLS = {op.name: op for op in build_catalog()}


def parse(tool_name: str, arguments: dict[str, Any]) -> Any:
    return TOOLS[tool_name].params.model_validate(arguments)


def rejects(tool_name: str, arguments: dict[str, Any]) -> bool:
    try:
        parse(tool_name, arguments)
    except ValidationError:
        return True
    return False


MINIMAL_INPUT: dict[str, dict[str, Any]] = {
    'protect_update_camera': {'id': 'cam1', 'settings': {}},
    'protect_create_rtsp_stream': {'id': 'cam1'},
    'protect_delete_rtsp_stream': {'id': 'cam1'},
    'protect_create_talkback': {'id': 'cam1'},
    'protect_start_ptz_patrol': {'id': 'cam1', 'slot': 1},
    'protect_stop_ptz_patrol': {'id': 'cam1'},
    'protect_goto_ptz_preset': {'id': 'cam1', 'slot': 1},
    'protect_update_light': {'id': 'l1', 'settings': {}},
    'protect_update_sensor': {'id': 's1', 'settings': {}},
    'protect_update_chime': {'id': 'c1', 'settings': {}},
    'protect_update_viewer': {'id': 'v1', 'settings': {}},
    'protect_create_liveview': {'settings': {}},
    'protect_update_liveview': {'id': 'lv1', 'settings': {}},
    'protect_upload_file': {'fileType': 'animations', 'base64Data': 'aGVsbG8='},
}


class TestConfirmLiteralTrue:
    """The confirm field accepts only the boolean true."""

    @pytest.mark.parametrize('tool', ['protect_disable_mic', 'protect_trigger_alarm_webhook'])
    def test_accepts_true(self, tool: str) -> None:
        assert parse(tool, {'id': 'test-id', 'confirm': True}).confirm is True

    @pytest.mark.parametrize('tool', ['protect_disable_mic', 'protect_trigger_alarm_webhook'])
    @pytest.mark.parametrize('value', [False, 'true', 1, 1.0, None, 'yes'])
    def test_rejects_non_true(self, tool: str, value: Any) -> None:
        assert rejects(tool, {'id': 'test-id', 'confirm': value})

    @pytest.mark.parametrize('tool', ['protect_disable_mic', 'protect_trigger_alarm_webhook'])
    def test_rejects_missing(self, tool: str) -> None:
        assert rejects(tool, {'id': 'test-id'})


class TestRequiredStrings:
    """Identifier fields are required strings."""

    TOOLS_WITH_ID = [
        'protect_get_camera',
        'protect_get_snapshot',
        'protect_get_rtsp_streams',
        'protect_get_light',
        'protect_get_sensor',
        'protect_get_chime',
        'protect_get_viewer',
        'protect_get_liveview',
    ]

    @pytest.mark.parametrize('tool', TOOLS_WITH_ID)
    def test_accepts_string(self, tool: str) -> None:
        assert parse(tool, {'id': 'abc123'}).id == 'abc123'

    @pytest.mark.parametrize('tool', TOOLS_WITH_ID)
    def test_rejects_missing(self, tool: str) -> None:
        assert rejects(tool, {})

    @pytest.mark.parametrize('tool', TOOLS_WITH_ID)
    def test_rejects_number(self, tool: str) -> None:
        assert rejects(tool, {'id': 123})

    def test_file_type_required(self) -> None:
        assert parse('protect_list_files', {'fileType': 'video'}).file_type == 'video'
        assert rejects('protect_list_files', {})
        assert rejects('protect_list_files', {'fileType': 5})


class TestIntegerSlots:
    """Slot fields accept whole numbers only."""

    @pytest.mark.parametrize('tool', ['protect_start_ptz_patrol', 'protect_goto_ptz_preset'])
    def test_accepts_integer(self, tool: str) -> None:
        assert parse(tool, {'id': 'cam1', 'slot': 2}).slot == 2

    @pytest.mark.parametrize('tool', ['protect_start_ptz_patrol', 'protect_goto_ptz_preset'])
    @pytest.mark.parametrize('value', [2.5, 1.7, '2', True, None, float('inf')])
    def test_rejects_non_integer(self, tool: str, value: Any) -> None:
        assert rejects(tool, {'id': 'cam1', 'slot': value})

    @pytest.mark.parametrize('tool', ['protect_start_ptz_patrol', 'protect_goto_ptz_preset'])
    def test_accepts_integral_float(self, tool: str) -> None:
        slot = parse(tool, {'id': 'cam1', 'slot': 2.0}).slot
        assert slot == 2
        assert isinstance(slot, int)

    def test_rejects_missing_slot(self) -> None:
        assert rejects('protect_start_ptz_patrol', {'id': 'cam1'})


class TestDryRunField:
    """dryRun is an optional strict boolean."""

    @pytest.mark.parametrize('tool', list(MINIMAL_INPUT))
    @pytest.mark.parametrize('value', [True, False])
    def test_accepts_bool(self, tool: str, value: bool) -> None:
        assert parse(tool, {**MINIMAL_INPUT[tool], 'dryRun': value}).dry_run is value

    @pytest.mark.parametrize('tool', list(MINIMAL_INPUT))
    def test_optional(self, tool: str) -> None:
        assert parse(tool, MINIMAL_INPUT[tool]).dry_run is None

    @pytest.mark.parametrize('tool', list(MINIMAL_INPUT))
    @pytest.mark.parametrize('value', ['true', 1])
    def test_rejects_non_bool(self, tool: str, value: Any) -> None:
        assert rejects(tool, {**MINIMAL_INPUT[tool], 'dryRun': value})


class TestSettingsField:
    """settings must be a JSON object."""

    TOOLS_WITH_SETTINGS = [
        'protect_update_camera',
        'protect_update_light',
        'protect_update_sensor',
        'protect_update_chime',
        'protect_update_viewer',
        'protect_create_liveview',
        'protect_update_liveview',
    ]

    @pytest.mark.parametrize('tool', TOOLS_WITH_SETTINGS)
    def test_accepts_object(self, tool: str) -> None:
        arguments = {**MINIMAL_INPUT[tool], 'settings': {'name': 'test', 'nested': {'a': 1}}}

        assert parse(tool, arguments).settings == {'name': 'test', 'nested': {'a': 1}}

    @pytest.mark.parametrize('tool', TOOLS_WITH_SETTINGS)
    @pytest.mark.parametrize('value', ['not-an-object', ['name'], None])
    def test_rejects_non_object(self, tool: str, value: Any) -> None:
        assert rejects(tool, {**MINIMAL_INPUT[tool], 'settings': value})

    @pytest.mark.parametrize('tool', TOOLS_WITH_SETTINGS)
    def test_rejects_missing(self, tool: str) -> None:
        arguments = {k: v for k, v in MINIMAL_INPUT[tool].items() if k != 'settings'}

        assert rejects(tool, arguments)


class TestUploadFields:
    """Upload parameters."""

    def test_content_type_default(self) -> None:
        params = parse('protect_upload_file', MINIMAL_INPUT['protect_upload_file'])

        assert params.content_type == 'application/octet-stream'

    def test_requires_data(self) -> None:
        assert rejects('protect_upload_file', {'fileType': 'animations'})


class TestUnknownArguments:
    """Unknown argument names are rejected."""

    def test_misspelled_guard(self) -> None:
        assert rejects('protect_update_camera', {'id': 'cam1', 'settings': {}, 'dry_run_': True})

    def test_extra_on_parameterless_tool(self) -> None:
        assert rejects('protect_list_cameras', {'id': 'cam1'})

    def test_snake_case_dry_run(self) -> None:
        assert rejects('protect_update_camera', {'id': 'cam1', 'settings': {}, 'dry_run': True})

    def test_snake_case_file_type(self) -> None:
        assert rejects('protect_list_files', {'file_type': 'video'})

    def test_snake_case_upload_fields(self) -> None:
        assert rejects(
            'protect_upload_file',
            {'base64_data': 'aGVsbG8=', 'content_type': 'image/png'},
        )
