"""
CLI configuration.

Extends base configuration with command-line specific settings.
"""

from __future__ import annotations

from workspace_sync.config.base import BaseSyncSettings, lazy_settings


class CliSettings(BaseSyncSettings):
    """CLI-specific configuration."""

    # Show info-level log lines without --verbose
    VERBOSE: bool = False


# Module-level singleton (lazy-loaded)
settings = lazy_settings(CliSettings)
