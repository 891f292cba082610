"""
Collaborator protocols for workspace synchronization.

The synchronizer never renders UI or speaks HTTP itself. Everything outside the
decision flow - application context, the workspace project API, dialogs,
notifications and logging - is reached through the Protocols below, so the
flow can run against the console, a real IDE host, or test fakes.
"""

from __future__ import annotations

from enum import StrEnum
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from workspace_sync.domain import Project


# ==============================================================================
# Logging
# ==============================================================================


class LoggerProtocol(Protocol):
    """
    Protocol for async logger - enables services to work with any logging implementation.

    Implementations:
    - CLILogger (cli/logger.py): Logs to stdout with optional verbose mode
    - NullLogger (below): No-op implementation for when logging is optional
    """

    async def info(self, message: str) -> None: ...
    async def warning(self, message: str) -> None: ...
    async def error(self, message: str) -> None: ...


class NullLogger:
    """
    No-op logger implementation for when logging is optional.

    Use this when a function requires a LoggerProtocol but the caller
    doesn't need logging output.
    """

    async def info(self, message: str) -> None:
        pass

    async def warning(self, message: str) -> None:
        pass

    async def error(self, message: str) -> None:
        pass


# ==============================================================================
# Application Context
# ==============================================================================


@runtime_checkable
class WorkspaceRoot(Protocol):
    """Remote operations on the workspace root container."""

    async def import_project(self, project: Project) -> Project:
        """
        Import a project into the workspace root using its source descriptor.

        Returns:
            The project as the workspace reports it after import

        Raises:
            ProjectImportError: If the remote import fails
        """
        ...

    async def delete_project(self, project: Project) -> None:
        """
        Remove a project from the workspace.

        Raises:
            ProjectDeleteError: If the remote delete fails
        """
        ...


class AppContext(Protocol):
    """Ambient application state."""

    def get_root_project(self) -> Project | None: ...
    def get_workspace_root(self) -> WorkspaceRoot: ...


# ==============================================================================
# Dialogs
# ==============================================================================


class DialogChoice(StrEnum):
    """How the user resolved a confirmation dialog."""

    POSITIVE = 'positive'
    NEGATIVE = 'negative'
    DISMISSED = 'dismissed'  # Closed without choosing a labeled option


class DialogFactory(Protocol):
    """Presents confirmation dialogs and resumes the caller with the user's answer."""

    async def confirm(
        self,
        title: str,
        message: str,
        *,
        positive_label: str,
        negative_label: str,
    ) -> DialogChoice: ...

    async def ask_text(
        self,
        title: str,
        prompt: str,
        *,
        positive_label: str,
        initial: str = '',
    ) -> str | None:
        """Show an editable text field. Returns the entered text, or None when dismissed."""
        ...


# ==============================================================================
# Notifications
# ==============================================================================


class Status(StrEnum):
    PROGRESS = 'progress'
    SUCCESS = 'success'
    FAIL = 'fail'
    WARNING = 'warning'


class DisplayMode(StrEnum):
    EMERGE_MODE = 'emerge'  # Transient balloon that hides on its own
    FLOAT_MODE = 'float'  # Stays until the user closes it
    NOT_EMERGE_MODE = 'not_emerge'  # Only recorded in the notification history


class NotificationManager(Protocol):
    """Fire-and-forget user-facing notifications."""

    def notify(self, message: str, status: Status, display_mode: DisplayMode) -> None: ...
