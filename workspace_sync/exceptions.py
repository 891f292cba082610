"""
Shared exceptions for workspace-sync.

Exception Hierarchy:
    WorkspaceSyncError (base)
    ├── WorkspaceApiError (listing/fetching projects failed)
    │   └── ProjectNotFoundError (no project at the requested path)
    └── RemoteOperationError (a remediation call failed)
        ├── ProjectImportError
        └── ProjectDeleteError
"""

from __future__ import annotations


class WorkspaceSyncError(Exception):
    """Base exception for all workspace-sync errors."""


class WorkspaceApiError(WorkspaceSyncError):
    """Raised when the workspace project API cannot be read."""


class ProjectNotFoundError(WorkspaceApiError):
    """Raised when the workspace has no project at the requested path."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f'No project found at {path}')


class RemoteOperationError(WorkspaceSyncError):
    """Base exception for failed remediation calls."""

    operation = 'remote operation'

    def __init__(self, project_name: str, reason: str) -> None:
        self.project_name = project_name
        self.reason = reason
        super().__init__(f'{self.operation.capitalize()} of project {project_name!r} failed: {reason}')


class ProjectImportError(RemoteOperationError):
    """Raised when importing a project into the workspace root fails."""

    operation = 'import'


class ProjectDeleteError(RemoteOperationError):
    """Raised when removing a project from the workspace fails."""

    operation = 'delete'
