"""Shared fakes and fixtures for workspace-sync tests."""

from __future__ import annotations

from typing import Any

import pytest

from workspace_sync.app_context import WorkspaceAppContext
from workspace_sync.domain import ProblemCode, ProblemProjectMarker, Project, SourceDescriptor, UnknownMarker
from workspace_sync.protocols import DialogChoice, DisplayMode, Status

MISSING_ON_DISK = 'No project folder on file system'


class FakeDialogs:
    """Scripted DialogFactory recording every dialog it was asked to show."""

    def __init__(self, choice: DialogChoice = DialogChoice.DISMISSED, text: str | None = None) -> None:
        self.choice = choice
        self.text = text
        self.gate: Any = None  # asyncio.Event that holds the confirm dialog open
        self.confirm_calls: list[dict[str, str]] = []
        self.ask_text_calls: list[dict[str, str]] = []

    async def confirm(self, title: str, message: str, *, positive_label: str, negative_label: str) -> DialogChoice:
        self.confirm_calls.append(
            {'title': title, 'message': message, 'positive': positive_label, 'negative': negative_label}
        )
        if self.gate is not None:
            await self.gate.wait()
        return self.choice

    async def ask_text(self, title: str, prompt: str, *, positive_label: str, initial: str = '') -> str | None:
        self.ask_text_calls.append({'title': title, 'prompt': prompt, 'positive': positive_label})
        return self.text


class FakeNotifications:
    def __init__(self) -> None:
        self.notifications: list[tuple[str, Status, DisplayMode]] = []

    def notify(self, message: str, status: Status, display_mode: DisplayMode) -> None:
        self.notifications.append((message, status, display_mode))


class RecordingLogger:
    def __init__(self) -> None:
        self.records: list[tuple[str, str]] = []

    async def info(self, message: str) -> None:
        self.records.append(('info', message))

    async def warning(self, message: str) -> None:
        self.records.append(('warning', message))

    async def error(self, message: str) -> None:
        self.records.append(('error', message))


class FakeWorkspaceRoot:
    """WorkspaceRoot that snapshots the project body it receives."""

    def __init__(self, error: Exception | None = None) -> None:
        self.error = error
        self.imported: list[Project] = []
        self.deleted: list[Project] = []

    @property
    def calls(self) -> int:
        return len(self.imported) + len(self.deleted)

    async def import_project(self, project: Project) -> Project:
        self.imported.append(project.model_copy(deep=True))
        if self.error is not None:
            raise self.error
        return project.model_copy(update={'markers': []}, deep=True)

    async def delete_project(self, project: Project) -> None:
        self.deleted.append(project.model_copy(deep=True))
        if self.error is not None:
            raise self.error


def make_project(
    name: str = 'console-java-simple',
    *,
    location: str | None = 'https://github.com/che-samples/console-java-simple.git',
    source_type: str = 'git',
    problems: dict[int, str] | None = None,
    with_source: bool = True,
) -> Project:
    """Build a project; `problems=None` means the project is missing on disk."""
    if problems is None:
        problems = {ProblemCode.NO_PROJECT_FOLDER.value: MISSING_ON_DISK}
    markers: list[ProblemProjectMarker | UnknownMarker] = [ProblemProjectMarker(problems=problems)] if problems else []
    source = SourceDescriptor(location=location, type=source_type) if with_source else None
    return Project(name=name, source=source, markers=markers)


@pytest.fixture
def dialogs() -> FakeDialogs:
    return FakeDialogs()


@pytest.fixture
def notifications() -> FakeNotifications:
    return FakeNotifications()


@pytest.fixture
def sync_logger() -> RecordingLogger:
    return RecordingLogger()


@pytest.fixture
def workspace_root() -> FakeWorkspaceRoot:
    return FakeWorkspaceRoot()


@pytest.fixture
def app_context(workspace_root: FakeWorkspaceRoot) -> WorkspaceAppContext:
    return WorkspaceAppContext(workspace_root)

