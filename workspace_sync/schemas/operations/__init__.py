"""
Operation schemas for service results.

This package contains Pydantic models for operation results returned by services.
"""

from __future__ import annotations

from workspace_sync.schemas.operations.remediation import (
    RemediationOutcome,
    RemediationResult,
    RemediationState,
)

__all__ = [
    'RemediationOutcome',
    'RemediationResult',
    'RemediationState',
]
