"""
Workspace project API backend.

Async httpx client for the workspace agent's project service. Implements the
WorkspaceRoot protocol (import/delete) and adds the read operations the CLI
needs to load projects.

Endpoints (relative to WORKSPACE_API_URL):
    GET    /project                 list project configs
    GET    /project/{path}          one project config
    POST   /project/import/{path}   import sources into the project folder (body: source)
    DELETE /project/{path}          remove the project from the workspace
"""

from __future__ import annotations

import httpx

from workspace_sync.domain import Project
from workspace_sync.exceptions import (
    ProjectDeleteError,
    ProjectImportError,
    ProjectNotFoundError,
    WorkspaceApiError,
)
from workspace_sync.schemas.workspace_api import ProjectConfigListAdapter, ProjectConfigPayload, SourcePayload


class WorkspaceApiClient:
    """
    Workspace project API backend.

    Opens a short-lived AsyncClient per call; no connection state is kept between
    operations.
    """

    def __init__(
        self,
        base_url: str,
        token: str | None = None,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Initialize the API client.

        Args:
            base_url: Workspace API root (e.g., http://localhost:8080/api)
            token: Optional bearer token sent with every request
            timeout: Request timeout in seconds
            transport: Optional httpx transport (tests use httpx.MockTransport)
        """
        self.base_url = base_url.rstrip('/')
        self.token = token
        self.timeout = timeout
        self.transport = transport

    def _client(self) -> httpx.AsyncClient:
        headers = {'Accept': 'application/json'}
        if self.token:
            headers['Authorization'] = f'Bearer {self.token}'
        return httpx.AsyncClient(
            base_url=self.base_url,
            headers=headers,
            timeout=self.timeout,
            transport=self.transport,
        )

    async def list_projects(self) -> list[Project]:
        """
        List every project registered in the workspace.

        Raises:
            WorkspaceApiError: If the API call fails
        """
        try:
            async with self._client() as client:
                response = await client.get('/project')
                response.raise_for_status()
        except httpx.HTTPError as e:
            raise WorkspaceApiError(f'Failed to list projects: {e}') from e

        return [payload.to_project() for payload in ProjectConfigListAdapter.validate_json(response.content)]

    async def get_project(self, path: str) -> Project:
        """
        Fetch one project by workspace path.

        Raises:
            ProjectNotFoundError: If the workspace has no such project
            WorkspaceApiError: If the API call fails
        """
        path = _normalize(path)
        try:
            async with self._client() as client:
                response = await client.get(f'/project{path}')
                if response.status_code == 404:
                    raise ProjectNotFoundError(path)
                response.raise_for_status()
        except httpx.HTTPError as e:
            raise WorkspaceApiError(f'Failed to fetch project {path}: {e}') from e

        return ProjectConfigPayload.model_validate_json(response.content).to_project()

    async def import_project(self, project: Project) -> Project:
        """
        Import sources into the project folder, then return the refreshed project.

        Raises:
            ProjectImportError: If the project has no source or the API call fails
        """
        if project.source is None or not project.source.has_location:
            raise ProjectImportError(project.name, 'project has no source location')

        path = _normalize(project.path)
        body = SourcePayload.from_source(project.source).model_dump(mode='json')
        try:
            async with self._client() as client:
                response = await client.post(f'/project/import{path}', json=body)
                response.raise_for_status()
                response = await client.get(f'/project{path}')
                response.raise_for_status()
        except httpx.HTTPError as e:
            raise ProjectImportError(project.name, _describe(e)) from e

        return ProjectConfigPayload.model_validate_json(response.content).to_project()

    async def delete_project(self, project: Project) -> None:
        """
        Remove the project from the workspace.

        Raises:
            ProjectDeleteError: If the API call fails
        """
        path = _normalize(project.path)
        try:
            async with self._client() as client:
                response = await client.delete(f'/project{path}')
                response.raise_for_status()
        except httpx.HTTPError as e:
            raise ProjectDeleteError(project.name, _describe(e)) from e


def _normalize(path: str) -> str:
    return '/' + path.strip('/')


def _describe(error: httpx.HTTPError) -> str:
    if isinstance(error, httpx.HTTPStatusError):
        return f'HTTP {error.response.status_code}'
    return str(error) or type(error).__name__
