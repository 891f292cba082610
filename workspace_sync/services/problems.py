"""
Problem marker reader.

Answers whether a project carries a given workspace problem, based only on the
problem-project marker attached to it. Reading never raises: a missing marker,
a marker of another kind, a missing code and an empty description all mean
"not applicable".
"""

from __future__ import annotations

from workspace_sync.domain import PROBLEM_PROJECT, ProblemCode, ProblemProjectMarker, Project

__all__ = [
    'get_problems',
    'has_missing_on_disk_problem',
    'has_problem',
]


def get_problems(project: Project) -> dict[int, str]:
    """Return the applicable problems of a project, keyed by problem code."""
    match project.get_marker(PROBLEM_PROJECT):
        case ProblemProjectMarker(problems=problems):
            return {code: text for code, text in problems.items() if text}
        case _:
            return {}


def has_problem(project: Project, code: int) -> bool:
    return code in get_problems(project)


def has_missing_on_disk_problem(project: Project) -> bool:
    """True if the project is registered in the workspace but has no folder on the file system."""
    return has_problem(project, ProblemCode.NO_PROJECT_FOLDER)
