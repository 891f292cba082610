"""
Application context holder.

Keeps the current root project and the workspace root it belongs to. Hosts
replace the root project as the user navigates; the synchronizer reads it fresh
on every event.
"""

from __future__ import annotations

from workspace_sync.domain import Project
from workspace_sync.protocols import WorkspaceRoot


class WorkspaceAppContext:
    """Mutable AppContext implementation."""

    def __init__(self, workspace_root: WorkspaceRoot, root_project: Project | None = None) -> None:
        self.workspace_root = workspace_root
        self.root_project = root_project

    def get_root_project(self) -> Project | None:
        return self.root_project

    def get_workspace_root(self) -> WorkspaceRoot:
        return self.workspace_root

    def set_root_project(self, project: Project | None) -> None:
        self.root_project = project
