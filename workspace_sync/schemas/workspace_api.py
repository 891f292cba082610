"""
Wire models for the workspace project REST API.

A project config on the wire looks like:

    {
      "name": "console-java-simple",
      "path": "/console-java-simple",
      "type": "maven",
      "description": null,
      "source": {"location": "https://github.com/che-samples/console-java-simple.git",
                 "type": "git", "parameters": {}},
      "problems": [{"code": 10, "message": "No project folder on file system"}]
    }

Payloads are permissive: the server sends attributes, mixins, links and other
fields this package does not use.
"""

from __future__ import annotations

from collections.abc import Sequence

import pydantic

from workspace_sync.domain import ProblemProjectMarker, Project, SourceDescriptor
from workspace_sync.schemas.types import PermissiveModel


class ProblemPayload(PermissiveModel):
    code: int
    message: str = ''


class SourcePayload(PermissiveModel):
    location: str | None = None
    type: str = ''
    parameters: dict[str, str] = pydantic.Field(default_factory=dict)

    @classmethod
    def from_source(cls, source: SourceDescriptor) -> SourcePayload:
        return cls(location=source.location, type=source.type, parameters=dict(source.parameters))


class ProjectConfigPayload(PermissiveModel):
    name: str
    path: str = ''
    type: str | None = None
    description: str | None = None
    source: SourcePayload | None = None
    problems: Sequence[ProblemPayload] = ()

    def to_project(self) -> Project:
        """Convert to the domain model. Problems become a single problem-project marker."""
        markers = []
        if self.problems:
            markers.append(ProblemProjectMarker(problems={p.code: p.message for p in self.problems}))

        source = None
        if self.source is not None:
            source = SourceDescriptor(
                location=self.source.location,
                type=self.source.type,
                parameters=dict(self.source.parameters),
            )

        return Project(
            name=self.name,
            path=self.path,
            type=self.type,
            description=self.description,
            source=source,
            markers=markers,
        )


ProjectConfigListAdapter = pydantic.TypeAdapter(list[ProjectConfigPayload])
