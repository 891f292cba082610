"""Service layer for project synchronization."""

from workspace_sync.services.problems import get_problems, has_missing_on_disk_problem, has_problem
from workspace_sync.services.remediation import RemediationExecutor
from workspace_sync.services.synchronizer import ProjectSynchronizer

__all__ = [
    'ProjectSynchronizer',
    'RemediationExecutor',
    'get_problems',
    'has_missing_on_disk_problem',
    'has_problem',
]
