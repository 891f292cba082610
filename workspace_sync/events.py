"""
Workspace UI events and an in-process event bus.

Events are immutable records carrying no behavior. The bus delivers them
synchronously to registered handlers; every registration returns a handle
that its owner must keep in order to tear the subscription down.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TypeAlias

import attrs

from workspace_sync.base_model import StrictModel

__all__ = [
    'EventBus',
    'HandlerRegistration',
    'SelectionChangedEvent',
    'WorkspaceEvent',
]

logger = logging.getLogger(__name__)


class WorkspaceEvent(StrictModel):
    """Base class for workspace UI events."""


class SelectionChangedEvent(WorkspaceEvent):
    """The active UI selection changed. Carries no payload - it is only a trigger."""


EventHandler: TypeAlias = Callable[[WorkspaceEvent], None]


@attrs.define(eq=False)
class HandlerRegistration:
    """Subscription handle returned by EventBus.add_handler."""

    bus: EventBus
    event_type: type[WorkspaceEvent]
    handler: EventHandler
    active: bool = True

    def remove_handler(self) -> None:
        """Unsubscribe the handler. Calling this more than once is a no-op."""
        if self.active:
            self.bus._remove(self)
            self.active = False


class EventBus:
    """
    Synchronous in-process event bus.

    Handlers are invoked in registration order for events whose type matches
    (or subclasses) the registered event type. Delivery happens on the calling
    thread; handlers that start async work schedule it on a loop themselves.
    """

    def __init__(self) -> None:
        self._registrations: list[HandlerRegistration] = []

    def add_handler(self, event_type: type[WorkspaceEvent], handler: EventHandler) -> HandlerRegistration:
        registration = HandlerRegistration(bus=self, event_type=event_type, handler=handler)
        self._registrations.append(registration)
        return registration

    def fire(self, event: WorkspaceEvent) -> None:
        """Deliver an event to every matching handler."""
        # Snapshot so handlers may unsubscribe while being notified
        for registration in list(self._registrations):
            if isinstance(event, registration.event_type):
                logger.debug('Delivering %s to %r', type(event).__name__, registration.handler)
                registration.handler(event)

    def handler_count(self, event_type: type[WorkspaceEvent] | None = None) -> int:
        if event_type is None:
            return len(self._registrations)
        return sum(1 for r in self._registrations if r.event_type is event_type)

    def _remove(self, registration: HandlerRegistration) -> None:
        self._registrations.remove(registration)
