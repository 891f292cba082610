"""Pydantic schemas for workspace-sync."""

from workspace_sync.schemas.types import BaseStrictModel, PermissiveModel, ProjectPath

__all__ = ['BaseStrictModel', 'PermissiveModel', 'ProjectPath']
