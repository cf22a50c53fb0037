"""Configuration model for the UniFi Protect MCP server.

This module provides a Pydantic model describing how to reach the UniFi
Protect Integration API and which trust mode the server runs in, together
with environment variable loading and validation.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Annotated

from loguru import logger
from pydantic import BaseModel, Field, SecretStr, ValidationError, field_validator


class ProtectConfig(BaseModel):
    """Configuration for the UniFi Protect MCP server.

    Attributes:
        host: Hostname or IP address of the UniFi console.
        api_key: Integration API key (generated under Settings > Control Plane).
        verify_ssl: Whether to verify TLS certificates (default: True).
        read_only: Only expose read-only tools (default: True).
        timeout: HTTP request timeout in seconds (default: 30).
        debug: Enable debug logging (default: False).

    Example:
        >>> config = ProtectConfig(
        ...     host="192.168.1.1",
        ...     api_key=SecretStr("your-api-key"),
        ... )
        >>> config.api_base_url
        'https://192.168.1.1/proxy/protect/integration/v1'
    """

    host: Annotated[str, Field(min_length=1, description='UniFi console host')]
    api_key: Annotated[SecretStr, Field(description='Integration API key')]
    verify_ssl: Annotated[bool, Field(default=True, description='Verify TLS certificates')]
    read_only: Annotated[bool, Field(default=True, description='Expose read-only tools only')]
    timeout: Annotated[
        int, Field(default=30, ge=5, le=300, description='Request timeout in seconds')
    ]
    debug: Annotated[bool, Field(default=False, description='Enable debug logging')]

    model_config = {'extra': 'forbid', 'frozen': True}

    @field_validator('host')
    @classmethod
    def validate_host(cls, v: str) -> str:
        """Strip protocol prefixes and trailing slashes from the host.

        Raises:
            ValueError: If the host is empty after normalization.
        """
        normalized = v.strip()
        for prefix in ('https://', 'http://'):
            if normalized.lower().startswith(prefix):
                normalized = normalized[len(prefix) :]
                break
        normalized = normalized.rstrip('/')
        if not normalized:
            raise ValueError('Host cannot be empty')
        return normalized

    @field_validator('api_key')
    @classmethod
    def validate_api_key(cls, v: SecretStr) -> SecretStr:
        """Reject blank API keys."""
        if not v.get_secret_value().strip():
            raise ValueError('API key cannot be empty')
        return v

    @property
    def api_base_url(self) -> str:
        """Get the base URL of the Protect Integration API."""
        return f'https://{self.host}/proxy/protect/integration/v1'

    @classmethod
    def from_env(
        cls,
        env_file: str | Path | None = None,
        prefix: str = 'UNIFI_PROTECT_',
    ) -> ProtectConfig:
        """Load configuration from environment variables.

        ``VERIFY_SSL`` and ``READ_ONLY`` stay enabled unless explicitly set
        to ``false``.

        Args:
            env_file: Optional path to an environment file to load first.
            prefix: Environment variable prefix (default: 'UNIFI_PROTECT_').

        Returns:
            A ProtectConfig populated from the environment.

        Raises:
            ValueError: If a required variable is missing or a value is invalid.

        Example:
            >>> # UNIFI_PROTECT_HOST=192.168.1.1
            >>> # UNIFI_PROTECT_API_KEY=your-api-key
            >>> # UNIFI_PROTECT_READ_ONLY=false
            >>> config = ProtectConfig.from_env()
        """
        if env_file is not None:
            _load_env_file(Path(env_file))

        def get_env(key: str, default: str | None = None) -> str | None:
            return os.environ.get(f'{prefix}{key}', default)

        host = get_env('HOST')
        if not host:
            raise ValueError(f'{prefix}HOST environment variable is required')

        api_key = get_env('API_KEY')
        if not api_key:
            raise ValueError(f'{prefix}API_KEY environment variable is required')

        return cls(
            host=host,
            api_key=SecretStr(api_key),
            verify_ssl=_enabled_unless_false(get_env('VERIFY_SSL')),
            read_only=_enabled_unless_false(get_env('READ_ONLY')),
            timeout=int(get_env('TIMEOUT', '30') or '30'),
            debug=(get_env('DEBUG', 'false') or 'false').lower() == 'true',
        )


def load_config(env_file: str | Path | None = None) -> ProtectConfig:
    """Load configuration from the environment or exit the process.

    A missing or invalid setting is fatal at startup: the problem is logged
    and the process exits with status 1.
    """
    try:
        return ProtectConfig.from_env(env_file)
    except (ValueError, ValidationError) as e:
        logger.error(f'Configuration error: {e}')
        logger.error('Required env vars: UNIFI_PROTECT_HOST, UNIFI_PROTECT_API_KEY')
        sys.exit(1)


def _enabled_unless_false(value: str | None) -> bool:
    return value != 'false'


def _load_env_file(env_path: Path) -> None:
    """Populate Protect settings from a ``KEY=value`` file.

    Variables already present in the process environment win over the file.
    An optional ``export`` prefix and one level of matching quotes around
    the value are accepted.
    """
    if not env_path.is_file():
        raise FileNotFoundError(f'Environment file not found: {env_path}')

    for raw in env_path.read_text(encoding='utf-8').splitlines():
        entry = raw.strip()
        if not entry or entry.startswith('#') or '=' not in entry:
            continue
        key, _, value = entry.removeprefix('export ').partition('=')
        key, value = key.strip(), value.strip()
        if len(value) >= 2 and value[0] == value[-1] and value[0] in '"\'':
            value = value[1:-1]
        if key:
            os.environ.setdefault(key, value)
    logger.debug(f'Loaded settings from {env_path}')
