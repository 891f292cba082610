"""
Remediation executor - performs the remove or import chosen by the user.

Error Boundary Pattern:
- Remote failures are reported to the user (FAIL notification) and to the log
- The original exception is always re-raised after reporting
- No retry: the caller decides whether to try again
"""

from __future__ import annotations

import httpx

from workspace_sync.domain import Project
from workspace_sync.exceptions import ProjectDeleteError, ProjectImportError, RemoteOperationError
from workspace_sync.messages import Messages
from workspace_sync.protocols import (
    DisplayMode,
    LoggerProtocol,
    NotificationManager,
    NullLogger,
    Status,
    WorkspaceRoot,
)

__all__ = ['RemediationExecutor']


class RemediationExecutor:
    """
    Executes remediations against the workspace root.

    Both operations notify the user on success with a transient (emerge) balloon,
    and on failure with a floating error notification.
    """

    def __init__(
        self,
        workspace_root: WorkspaceRoot,
        notifications: NotificationManager,
        messages: Messages | None = None,
        logger: LoggerProtocol | None = None,
    ) -> None:
        self.workspace_root = workspace_root
        self.notifications = notifications
        self.messages = messages or Messages()
        self.logger = logger or NullLogger()

    async def delete(self, project: Project) -> None:
        """
        Remove the project from the workspace.

        Raises:
            ProjectDeleteError: If the remote delete fails (after reporting it)
        """
        try:
            await self.workspace_root.delete_project(project)
        except RemoteOperationError as e:
            await self._report_failure(self.messages.project_remove_failed(project.name, e.reason), e)
            raise
        except httpx.HTTPError as e:
            error = ProjectDeleteError(project.name, str(e))
            await self._report_failure(self.messages.project_remove_failed(project.name, error.reason), error)
            raise error from e

        self.notifications.notify(self.messages.project_removed(project.name), Status.SUCCESS, DisplayMode.EMERGE_MODE)
        await self.logger.info(f'Project {project.name} removed.')

    async def import_project(self, project: Project) -> Project:
        """
        Import the project into the workspace root using its current source descriptor.

        Returns:
            The imported project as reported by the workspace

        Raises:
            ProjectImportError: If the remote import fails (after reporting it)
        """
        try:
            imported = await self.workspace_root.import_project(project)
        except RemoteOperationError as e:
            await self._report_failure(self.messages.project_import_failed(project.name, e.reason), e)
            raise
        except httpx.HTTPError as e:
            error = ProjectImportError(project.name, str(e))
            await self._report_failure(self.messages.project_import_failed(project.name, error.reason), error)
            raise error from e

        await self.logger.info(f'Project {imported.name} imported.')
        self.notifications.notify(
            self.messages.project_imported(imported.name), Status.SUCCESS, DisplayMode.EMERGE_MODE
        )
        return imported

    async def _report_failure(self, message: str, error: RemoteOperationError) -> None:
        self.notifications.notify(message, Status.FAIL, DisplayMode.FLOAT_MODE)
        await self.logger.error(str(error))
