"""Tests for the in-process event bus."""

from __future__ import annotations

from conftest import FakeDialogs, FakeNotifications, FakeWorkspaceRoot, make_project
from workspace_sync.app_context import WorkspaceAppContext
from workspace_sync.events import EventBus, SelectionChangedEvent, WorkspaceEvent
from workspace_sync.services.synchronizer import ProjectSynchronizer


class ProjectOpenedEvent(WorkspaceEvent):
    pass


def test_handlers_receive_matching_events_in_order() -> None:
    bus = EventBus()
    received: list[str] = []
    bus.add_handler(SelectionChangedEvent, lambda e: received.append('first'))
    bus.add_handler(SelectionChangedEvent, lambda e: received.append('second'))
    bus.add_handler(ProjectOpenedEvent, lambda e: received.append('opened'))

    bus.fire(SelectionChangedEvent())

    assert received == ['first', 'second']


def test_base_type_handler_sees_every_event() -> None:
    bus = EventBus()
    received: list[WorkspaceEvent] = []
    bus.add_handler(WorkspaceEvent, received.append)

    bus.fire(SelectionChangedEvent())
    bus.fire(ProjectOpenedEvent())

    assert [type(e) for e in received] == [SelectionChangedEvent, ProjectOpenedEvent]


def test_remove_handler_is_idempotent() -> None:
    bus = EventBus()
    received: list[WorkspaceEvent] = []
    registration = bus.add_handler(SelectionChangedEvent, received.append)

    registration.remove_handler()
    registration.remove_handler()
    bus.fire(SelectionChangedEvent())

    assert received == []
    assert bus.handler_count() == 0


def test_same_handler_registered_twice_is_removed_individually() -> None:
    bus = EventBus()
    received: list[WorkspaceEvent] = []
    first = bus.add_handler(SelectionChangedEvent, received.append)
    bus.add_handler(SelectionChangedEvent, received.append)

    first.remove_handler()
    bus.fire(SelectionChangedEvent())

    assert len(received) == 1


def test_handler_may_unsubscribe_while_notified() -> None:
    bus = EventBus()
    calls: list[int] = []

    def once(event: WorkspaceEvent) -> None:
        calls.append(1)
        registration.remove_handler()

    registration = bus.add_handler(SelectionChangedEvent, once)
    bus.fire(SelectionChangedEvent())
    bus.fire(SelectionChangedEvent())

    assert calls == [1]


def test_synchronizer_handler_does_not_raise_without_event_loop() -> None:
    workspace_root = FakeWorkspaceRoot()
    dialogs = FakeDialogs()
    context = WorkspaceAppContext(workspace_root, make_project())
    synchronizer = ProjectSynchronizer(context, dialogs, FakeNotifications())
    bus = EventBus()
    synchronizer.attach(bus)

    bus.fire(SelectionChangedEvent())

    assert synchronizer.in_flight() == []
    assert dialogs.confirm_calls == []
    assert workspace_root.calls == 0
