"""Configuration for workspace-sync."""

from workspace_sync.config.base import BaseSyncSettings, get_settings, lazy_settings

__all__ = ['BaseSyncSettings', 'get_settings', 'lazy_settings']
