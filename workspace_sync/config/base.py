"""
Base configuration for workspace-sync.

Shared settings and helper functions for every entry point.
"""

from __future__ import annotations

import os
import pathlib
from typing import TypeVar

import lazy_object_proxy
import pydantic
import pydantic_settings

T = TypeVar('T', bound='BaseSyncSettings')


class BaseSyncSettings(pydantic_settings.BaseSettings):
    """Shared configuration across all entry points."""

    model_config = pydantic_settings.SettingsConfigDict(
        env_file='.env',
        env_file_encoding='utf-8',
        case_sensitive=True,  # Fail fast on misconfiguration
        extra='ignore',  # .env files are shared with the host IDE
    )

    # Application metadata
    APP_NAME: str = 'workspace-sync'
    VERSION: str = '0.1.0'

    # Workspace project API
    WORKSPACE_API_URL: str = 'http://localhost:8080/api'
    WORKSPACE_API_TOKEN: str | None = None
    REQUEST_TIMEOUT_SECONDS: float = 30.0

    # Source type assigned when the user supplies a location for a project that had none
    DEFAULT_SOURCE_TYPE: str = 'github'

    @pydantic.field_validator('WORKSPACE_API_URL')
    @classmethod
    def validate_api_url(cls, v: str) -> str:
        """Require an absolute http(s) URL and drop the trailing slash."""
        if not v.startswith(('http://', 'https://')):
            raise ValueError('WORKSPACE_API_URL must start with http:// or https://')
        return v.rstrip('/')

    @pydantic.field_validator('REQUEST_TIMEOUT_SECONDS')
    @classmethod
    def validate_timeout(cls, v: float) -> float:
        if v <= 0:
            raise ValueError('REQUEST_TIMEOUT_SECONDS must be positive')
        return v

    @pydantic.field_validator('DEFAULT_SOURCE_TYPE')
    @classmethod
    def validate_source_type(cls, v: str) -> str:
        if not v.strip():
            raise ValueError('DEFAULT_SOURCE_TYPE must not be empty')
        return v


def get_settings(settings_class: type[T], env_file: str | None = None) -> T:
    """
    Factory for creating settings with dynamic .env file loading.

    LOAD_ENV_FILE environment variable specifies custom .env file path.
    When unset (production), loads from environment variables only.

    Args:
        settings_class: Settings class to instantiate
        env_file: Optional path to .env file (overrides LOAD_ENV_FILE)

    Returns:
        Settings instance

    Raises:
        FileNotFoundError: If specified .env file doesn't exist
    """
    env_file_path = env_file or os.getenv('LOAD_ENV_FILE')

    if not env_file_path:
        return settings_class(_env_file=None)  # No .env file, load from environment only

    resolved_path = pathlib.Path(env_file_path).resolve()
    if not resolved_path.exists():
        raise FileNotFoundError(f'Environment file not found: {resolved_path}')

    return settings_class(_env_file=resolved_path)


def lazy_settings(settings_class: type[T]) -> T:
    """
    Lazy settings - defers instantiation until first access.

    Args:
        settings_class: Settings class to instantiate

    Returns:
        Proxy that instantiates settings on first access
    """
    return lazy_object_proxy.Proxy(lambda: get_settings(settings_class))
