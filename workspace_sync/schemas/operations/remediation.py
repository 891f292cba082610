"""
Remediation operation schemas.

Models for the outcome of one synchronization flow.
"""

from __future__ import annotations

from enum import StrEnum

from workspace_sync.schemas.base import StrictModel


class RemediationState(StrEnum):
    """Named states of one synchronization flow."""

    MARKER_CHECKED = 'marker_checked'
    AWAITING_USER_CHOICE = 'awaiting_user_choice'
    AWAITING_LOCATION_INPUT = 'awaiting_location_input'
    IMPORTING = 'importing'
    DELETING = 'deleting'
    DONE = 'done'
    ABANDONED = 'abandoned'
    FAILED = 'failed'


class RemediationOutcome(StrEnum):
    """Terminal result of one synchronization flow."""

    NO_PROBLEM = 'no_problem'  # Project is present on disk, nothing to do
    ABANDONED = 'abandoned'  # A dialog was dismissed without choosing
    REMOVED = 'removed'
    IMPORTED = 'imported'
    FAILED = 'failed'  # Remote delete/import failed
    SUPERSEDED = 'superseded'  # Cancelled before completion


class RemediationResult(StrictModel):
    """Execution result."""

    project_name: str
    outcome: RemediationOutcome
    error_message: str | None = None

    @property
    def succeeded(self) -> bool:
        return self.outcome is not RemediationOutcome.FAILED
