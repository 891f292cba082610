"""Backends for the workspace project API."""

from workspace_sync.storage.workspace_api import WorkspaceApiClient

__all__ = ['WorkspaceApiClient']
