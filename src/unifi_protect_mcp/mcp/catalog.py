"""Operation model shared by every tool family.

An :class:`Operation` is one row of the tool catalog: the MCP-facing name,
the HTTP call it translates to, a Pydantic model for its parameters and its
safety class. The MCP schema, the annotations and the guard behaviour are
all derived from that one row so they cannot drift apart.
"""

from __future__ import annotations

import string
from dataclasses import dataclass
from typing import TYPE_CHECKING, Annotated, Any, Awaitable, Callable, Literal

from loguru import logger
from mcp.types import CallToolResult
from pydantic import (
    BaseModel,
    BeforeValidator,
    Field,
    StrictBool,
    ValidationError,
    create_model,
)

from unifi_protect_mcp.mcp.responses import format_error, format_success
from unifi_protect_mcp.mcp.safety import (
    READ_ONLY,
    SafetyClass,
    format_dry_run,
    require_confirmation,
)


if TYPE_CHECKING:
    from unifi_protect_mcp.client import ProtectClient


HttpMethod = Literal['GET', 'POST', 'PATCH', 'DELETE']

DRY_RUN_DESCRIPTION = 'If true, return what would happen without making changes'


def _literal_true(value: Any) -> Any:
    if value is not True:
        raise ValueError('must be the boolean true')
    return value


Confirmation = Annotated[Literal[True], BeforeValidator(_literal_true)]


def _whole_number(value: Any) -> Any:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError('must be an integer')
    if isinstance(value, float):
        if not value.is_integer():
            raise ValueError('must be an integer')
        return int(value)
    return value


# Integral floats such as 2.0 are accepted and normalized to int.
Slot = Annotated[int, BeforeValidator(_whole_number)]


class ToolParams(BaseModel):
    """Base model for tool arguments; unknown argument names are rejected."""

    model_config = {'extra': 'forbid'}


def params_model(name: str, **fields: Any) -> type[ToolParams]:
    """Create a parameter model; keyword order is schema order."""
    return create_model(name, __base__=ToolParams, **fields)


def id_field(label: str) -> tuple[Any, Any]:
    return (str, Field(description=f'{label} ID'))


def settings_field(description: str) -> tuple[Any, Any]:
    return (dict[str, Any], Field(description=description))


def slot_field(description: str) -> tuple[Any, Any]:
    return (Slot, Field(description=description))


def dry_run_field() -> tuple[Any, Any]:
    return (
        StrictBool | None,
        Field(default=None, alias='dryRun', description=DRY_RUN_DESCRIPTION),
    )


def confirm_field(description: str) -> tuple[Any, Any]:
    return (Confirmation, Field(description=description))


NoParams = params_model('NoParams')


def settings_body(params: Any) -> Any:
    """Send the ``settings`` argument as the JSON request body."""
    return params.settings


Executor = Callable[['Operation', 'ProtectClient', Any, str], Awaitable[CallToolResult]]


@dataclass(frozen=True)
class Operation:
    """One tool in the catalog.

    Attributes:
        name: Stable tool name exposed over MCP.
        description: Human-readable description for tool listings.
        method: HTTP method of the underlying API call.
        path_template: API path with ``{field}`` placeholders.
        safety: Safety class governing annotations, guards and mode filtering.
        family: Catalog family (system, camera, device, liveview, file).
        params: Pydantic model validating the tool arguments.
        body: Extracts the JSON request body from validated arguments.
        confirm_action: Phrase completing "You must set confirm to true to ...".
        execute: Replaces the default JSON request/response round trip.
    """

    name: str
    description: str
    method: HttpMethod
    path_template: str
    safety: SafetyClass
    family: str
    params: type[ToolParams] = NoParams
    body: Callable[[Any], Any] | None = None
    confirm_action: str | None = None
    execute: Executor | None = None

    def __post_init__(self) -> None:
        fields = self.params.model_fields
        placeholders = {
            field for _, field, _, _ in string.Formatter().parse(self.path_template) if field
        }
        missing = placeholders - fields.keys()
        if missing:
            raise ValueError(f'{self.name}: path placeholders without parameters: {missing}')

        guarded = 'dry_run' in fields or 'confirm' in fields
        if self.safety is READ_ONLY and guarded:
            raise ValueError(f'{self.name}: read-only tools take no dryRun or confirm')
        if self.safety is not READ_ONLY and not guarded:
            raise ValueError(f'{self.name}: {self.safety.value} tools need dryRun or confirm')
        if 'confirm' in fields and not self.confirm_action:
            raise ValueError(f'{self.name}: confirm_action is required with confirm')

    @property
    def requires_confirmation(self) -> bool:
        return self.safety is not READ_ONLY and 'confirm' in self.params.model_fields

    @property
    def supports_dry_run(self) -> bool:
        return self.safety is not READ_ONLY and 'dry_run' in self.params.model_fields

    @property
    def input_schema(self) -> dict[str, Any]:
        """JSON schema of the arguments, keyed by wire names."""
        return self.params.model_json_schema(by_alias=True)

    def resolve_path(self, params: ToolParams) -> str:
        return self.path_template.format(**params.model_dump())

    async def invoke(
        self, client: ProtectClient, arguments: dict[str, Any] | None
    ) -> CallToolResult:
        """Run the tool; always returns an envelope, never raises.

        Arguments are validated first, then the confirmation guard and the
        dry-run preview are applied. Only then is the API called.
        """
        try:
            params = self.params.model_validate(arguments or {})
        except ValidationError as e:
            logger.warning(f'Rejected arguments for {self.name}: {e.error_count()} error(s)')
            return format_error(f'Invalid arguments for {self.name}: {_describe(e)}')

        path = self.resolve_path(params)

        if self.requires_confirmation:
            assert self.confirm_action is not None
            denied = require_confirmation(
                getattr(params, 'confirm', None),
                self.confirm_action.format(**params.model_dump()),
            )
            if denied is not None:
                return denied

        if self.supports_dry_run and getattr(params, 'dry_run', None) is True:
            logger.debug(f'Dry run of {self.name}: {self.method} {path}')
            if self.body is None:
                return format_dry_run(self.method, path)
            return format_dry_run(self.method, path, self.body(params))

        try:
            if self.execute is not None:
                return await self.execute(self, client, params, path)
            data = await send_json(client, self.method, path, self._request_body(params))
            return format_success(data)
        except Exception as e:
            logger.warning(f'{self.name} failed: {e}')
            return format_error(e)

    def _request_body(self, params: ToolParams) -> Any:
        return None if self.body is None else self.body(params)


async def send_json(client: ProtectClient, method: str, path: str, body: Any = None) -> Any:
    """Dispatch one JSON request to the matching client method."""
    if method == 'GET':
        return await client.get(path)
    if method == 'POST':
        if body is None:
            return await client.post(path)
        return await client.post(path, body)
    if method == 'PATCH':
        return await client.patch(path, body)
    if method == 'DELETE':
        return await client.delete(path)
    raise ValueError(f'Unsupported HTTP method: {method}')


def _describe(error: ValidationError) -> str:
    parts = []
    for item in error.errors():
        location = '.'.join(str(part) for part in item['loc']) or 'arguments'
        parts.append(f"{location}: {item['msg']}")
    return '; '.join(parts)
