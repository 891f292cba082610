"""
Domain models for workspace project synchronization.

These models are the in-memory view of the workspace: the root project, where its
content comes from, and the diagnostic markers attached to it. Unlike the immutable
value objects in base_model.py, Project and SourceDescriptor are mutable - the
remediation flow rewrites a project's source in place before re-importing it.

Architecture (top-down):
1. Project - a workspace-tracked project
2. SourceDescriptor - where the project content is fetched from
3. Marker - closed set of diagnostic variants (ProblemProjectMarker | UnknownMarker)
"""

from __future__ import annotations

from enum import IntEnum
from typing import Annotated, Literal

import pydantic
from pydantic import BaseModel, ConfigDict, Field

from workspace_sync.schemas.types import BaseStrictModel, PermissiveModel, ProjectPath

# ==============================================================================
# Base Configuration for Domain Models
# ==============================================================================


class DomainModel(BaseModel):
    """Base model for mutable domain models."""

    model_config = ConfigDict(
        extra='forbid',
        strict=True,
        frozen=False,
    )


# ==============================================================================
# Problem Codes
# ==============================================================================


class ProblemCode(IntEnum):
    """Reserved project problem codes reported by the workspace."""

    # Registered in workspace metadata, but no project folder on the file system
    NO_PROJECT_FOLDER = 10


# ==============================================================================
# Markers
# ==============================================================================

PROBLEM_PROJECT = 'problemProjectMarker'


class ProblemProjectMarker(BaseStrictModel):
    """
    Diagnostic summary of detected inconsistencies for a project.

    A code applies iff it is present in `problems` with a non-empty description.
    """

    kind: Literal['problemProjectMarker'] = PROBLEM_PROJECT
    problems: dict[int, str] = Field(default_factory=dict)


class UnknownMarker(PermissiveModel):
    """Any marker kind this package does not act on."""

    kind: str


Marker = Annotated[
    ProblemProjectMarker | UnknownMarker,
    pydantic.Field(union_mode='left_to_right'),
]


# ==============================================================================
# Project Level
# ==============================================================================


class SourceDescriptor(DomainModel):
    """
    Where a project's content originates.

    An empty or absent location means the origin is unknown.
    """

    location: str | None = None
    type: str = ''
    parameters: dict[str, str] = Field(default_factory=dict)

    @property
    def has_location(self) -> bool:
        return bool(self.location)


class Project(DomainModel):
    """A project tracked by the workspace root."""

    name: str = Field(min_length=1)
    path: ProjectPath = ''
    type: str | None = None
    description: str | None = None
    source: SourceDescriptor | None = None
    markers: list[Marker] = Field(default_factory=list)

    @pydantic.model_validator(mode='after')
    def _default_path(self) -> Project:
        if not self.path:
            self.path = f'/{self.name}'
        return self

    def get_marker(self, kind: str) -> Marker | None:
        """Return the first marker of the given kind, or None."""
        for marker in self.markers:
            if marker.kind == kind:
                return marker
        return None
