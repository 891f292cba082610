"""
Project synchronizer - reconciles the workspace root project with the file system.

Reacts to selection changes: when the current root project is registered in the
workspace but has no folder on disk (problem code 10), asks the user whether to
import it again or remove it, and runs the chosen remediation.

Flow (one per project, never more than one in flight):

    MARKER_CHECKED -> AWAITING_USER_CHOICE
        -> remove  -> DELETING -> DONE
        -> import  -> [source location known]   -> IMPORTING -> DONE
                   -> [source location unknown] -> AWAITING_LOCATION_INPUT
                                                   -> (rewrite source) -> IMPORTING -> DONE
        -> dismissed (either dialog) -> ABANDONED
    Remote failure in DELETING/IMPORTING -> FAILED
"""

from __future__ import annotations

import asyncio
import logging

import attrs

from workspace_sync.domain import Project, SourceDescriptor
from workspace_sync.events import EventBus, HandlerRegistration, SelectionChangedEvent, WorkspaceEvent
from workspace_sync.exceptions import RemoteOperationError
from workspace_sync.messages import Messages
from workspace_sync.protocols import (
    AppContext,
    DialogChoice,
    DialogFactory,
    LoggerProtocol,
    NotificationManager,
    NullLogger,
)
from workspace_sync.schemas.operations import RemediationOutcome, RemediationResult, RemediationState
from workspace_sync.services.problems import has_missing_on_disk_problem
from workspace_sync.services.remediation import RemediationExecutor

__all__ = ['ProjectSynchronizer']

logger = logging.getLogger(__name__)


@attrs.define(frozen=True)
class _Flow:
    """An in-flight synchronization flow and the project reference it captured."""

    project: Project
    task: asyncio.Task[RemediationResult]


class ProjectSynchronizer:
    """
    Synchronize the workspace root project with the file system.

    Selection events are handled fire-and-forget: the handler returns immediately
    and the remediation flow continues as an asyncio task. Each flow works on the
    project reference it captured when the event was handled. While a flow for a
    project is in flight, further events for that project are ignored.
    """

    def __init__(
        self,
        app_context: AppContext,
        dialogs: DialogFactory,
        notifications: NotificationManager,
        messages: Messages | None = None,
        logger: LoggerProtocol | None = None,
        default_source_type: str = 'github',
    ) -> None:
        self.app_context = app_context
        self.dialogs = dialogs
        self.notifications = notifications
        self.messages = messages or Messages()
        self.logger = logger or NullLogger()
        self.default_source_type = default_source_type
        self._in_flight: dict[str, _Flow] = {}
        self._registration: HandlerRegistration | None = None
        self._loop: asyncio.AbstractEventLoop | None = None

    # ==========================================================================
    # Subscription
    # ==========================================================================

    def attach(self, event_bus: EventBus) -> HandlerRegistration:
        """
        Subscribe to selection changes. Replaces any previous subscription.

        When called from a running event loop, that loop is remembered so events
        fired from other threads still start their flows on it.
        """
        self.detach()
        try:
            self._loop = asyncio.get_running_loop()
        except RuntimeError:
            self._loop = None
        self._registration = event_bus.add_handler(SelectionChangedEvent, self.on_selection_changed)
        return self._registration

    def detach(self) -> None:
        """Unsubscribe and cancel every in-flight flow."""
        if self._registration is not None:
            self._registration.remove_handler()
            self._registration = None
        self._loop = None
        self.cancel_all()

    # ==========================================================================
    # Event Handling
    # ==========================================================================

    def on_selection_changed(self, event: WorkspaceEvent) -> None:
        """
        Start a remediation flow if the current root project is missing on disk.

        Never raises into the publisher. Flows run on the current event loop, or on
        the loop captured by attach() when the event is fired from another thread.
        Without either, the event is dropped with a warning.
        """
        project = self.app_context.get_root_project()
        if project is None:
            return

        if not has_missing_on_disk_problem(project):
            return

        try:
            asyncio.get_running_loop()
        except RuntimeError:
            if self._loop is None or self._loop.is_closed():
                logger.warning('No event loop to synchronize %s on, ignoring event', project.path)
                return
            self._loop.call_soon_threadsafe(self._start_flow, project)
            return

        self._start_flow(project)

    def _start_flow(self, project: Project) -> None:
        if project.path in self._in_flight:
            logger.debug('Synchronization of %s already in flight, ignoring event', project.path)
            return

        task = asyncio.get_running_loop().create_task(self.reconcile(project), name=f'synchronize:{project.path}')
        self._in_flight[project.path] = _Flow(project=project, task=task)
        task.add_done_callback(lambda t, path=project.path: self._on_flow_done(path, t))

    def in_flight(self) -> list[str]:
        """Paths of projects with a flow in progress."""
        return list(self._in_flight)

    def cancel(self, project: Project) -> bool:
        """Abandon the in-flight flow for a project. Returns False if there was none."""
        flow = self._in_flight.get(project.path)
        if flow is None:
            return False
        return flow.task.cancel()

    def cancel_all(self) -> None:
        for flow in list(self._in_flight.values()):
            flow.task.cancel()

    async def drain(self) -> list[RemediationResult]:
        """Wait for every in-flight flow and return their results."""
        flows = list(self._in_flight.values())
        if not flows:
            return []

        outcomes = await asyncio.gather(*(flow.task for flow in flows), return_exceptions=True)

        results = []
        for flow, outcome in zip(flows, outcomes, strict=True):
            if isinstance(outcome, RemediationResult):
                results.append(outcome)
            elif isinstance(outcome, asyncio.CancelledError):
                results.append(RemediationResult(project_name=flow.project.name, outcome=RemediationOutcome.SUPERSEDED))
            else:
                results.append(
                    RemediationResult(
                        project_name=flow.project.name,
                        outcome=RemediationOutcome.FAILED,
                        error_message=str(outcome),
                    )
                )
        return results

    def _on_flow_done(self, path: str, task: asyncio.Task[RemediationResult]) -> None:
        flow = self._in_flight.get(path)
        if flow is not None and flow.task is task:
            del self._in_flight[path]

        if task.cancelled():
            logger.debug('Synchronization of %s was cancelled', path)
            return

        error = task.exception()
        if error is not None:
            logger.error('Synchronization of %s failed', path, exc_info=error)

    # ==========================================================================
    # Remediation Flow
    # ==========================================================================

    async def reconcile(self, project: Project) -> RemediationResult:
        """
        Run the full remediation flow for one project.

        Returns:
            RemediationResult describing how the flow ended. Remote failures are
            reported to the user by the executor and returned as FAILED.
        """
        if not has_missing_on_disk_problem(project):
            return RemediationResult(project_name=project.name, outcome=RemediationOutcome.NO_PROBLEM)
        self._enter(project, RemediationState.MARKER_CHECKED)

        self._enter(project, RemediationState.AWAITING_USER_CHOICE)
        choice = await self.dialogs.confirm(
            self.messages.synchronize_dialog_title,
            self.messages.exist_in_workspace(project.name),
            positive_label=self.messages.button_import,
            negative_label=self.messages.button_remove,
        )

        executor = RemediationExecutor(
            self.app_context.get_workspace_root(),
            self.notifications,
            messages=self.messages,
            logger=self.logger,
        )

        try:
            match choice:
                case DialogChoice.POSITIVE:
                    return await self._import(project, executor)
                case DialogChoice.NEGATIVE:
                    self._enter(project, RemediationState.DELETING)
                    await executor.delete(project)
                    return self._done(project, RemediationOutcome.REMOVED)
                case _:
                    return await self._abandon(project, 'import/remove dialog dismissed')
        except RemoteOperationError as e:
            self._enter(project, RemediationState.FAILED)
            return RemediationResult(
                project_name=project.name,
                outcome=RemediationOutcome.FAILED,
                error_message=str(e),
            )

    async def _import(self, project: Project, executor: RemediationExecutor) -> RemediationResult:
        if project.source is None or not project.source.has_location:
            self._enter(project, RemediationState.AWAITING_LOCATION_INPUT)
            location = await self.dialogs.ask_text(
                self.messages.synchronize_dialog_title,
                self.messages.change_location_prompt,
                positive_label=self.messages.button_ok,
            )
            if location is None or not location.strip():
                return await self._abandon(project, 'no source location given')
            self._change_location(project, location)

        self._enter(project, RemediationState.IMPORTING)
        await executor.import_project(project)
        return self._done(project, RemediationOutcome.IMPORTED)

    def _change_location(self, project: Project, location: str) -> None:
        """Rewrite the project's source descriptor in place."""
        if project.source is None:
            project.source = SourceDescriptor()
        project.source.location = location
        project.source.type = self.default_source_type

    async def _abandon(self, project: Project, reason: str) -> RemediationResult:
        self._enter(project, RemediationState.ABANDONED)
        await self.logger.info(f'Synchronization of project {project.name} abandoned: {reason}')
        return RemediationResult(project_name=project.name, outcome=RemediationOutcome.ABANDONED)

    def _done(self, project: Project, outcome: RemediationOutcome) -> RemediationResult:
        self._enter(project, RemediationState.DONE)
        return RemediationResult(project_name=project.name, outcome=outcome)

    @staticmethod
    def _enter(project: Project, state: RemediationState) -> None:
        logger.debug('%s -> %s', project.path, state)
