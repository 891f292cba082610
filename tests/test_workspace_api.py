"""Tests for the workspace project API backend."""

from __future__ import annotations

import json

import httpx
import pytest

from conftest import MISSING_ON_DISK, make_project
from workspace_sync.domain import PROBLEM_PROJECT, ProblemProjectMarker
from workspace_sync.exceptions import ProjectDeleteError, ProjectImportError, ProjectNotFoundError, WorkspaceApiError
from workspace_sync.services.problems import has_missing_on_disk_problem
from workspace_sync.storage.workspace_api import WorkspaceApiClient

pytestmark = pytest.mark.asyncio

BASE_URL = 'http://che.local/api'

MISSING_PROJECT = {
    'name': 'console-java-simple',
    'path': '/console-java-simple',
    'type': 'maven',
    'description': None,
    'mixins': ['git'],
    'attributes': {'language': ['java']},
    'source': {
        'location': 'https://github.com/che-samples/console-java-simple.git',
        'type': 'git',
        'parameters': {},
    },
    'problems': [{'code': 10, 'message': MISSING_ON_DISK}],
}

HEALTHY_PROJECT = {
    'name': 'web-nodejs-simple',
    'path': '/web-nodejs-simple',
    'type': 'node-js',
    'source': {'location': 'https://github.com/che-samples/web-nodejs-sample.git', 'type': 'git'},
    'problems': [],
}


class Recorder:
    """httpx.MockTransport handler that records requests and replays canned responses."""

    def __init__(self, routes: dict[tuple[str, str], httpx.Response]) -> None:
        self.routes = routes
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.routes.get((request.method, request.url.path), httpx.Response(404))


def make_client(routes: dict[tuple[str, str], httpx.Response], token: str | None = None):
    recorder = Recorder(routes)
    client = WorkspaceApiClient(BASE_URL, token=token, transport=httpx.MockTransport(recorder))
    return client, recorder


async def test_list_projects_builds_problem_markers() -> None:
    client, _ = make_client({('GET', '/api/project'): httpx.Response(200, json=[MISSING_PROJECT, HEALTHY_PROJECT])})

    missing, healthy = await client.list_projects()

    assert missing.name == 'console-java-simple'
    assert missing.source is not None
    assert missing.source.type == 'git'
    marker = missing.get_marker(PROBLEM_PROJECT)
    assert isinstance(marker, ProblemProjectMarker)
    assert marker.problems == {10: MISSING_ON_DISK}
    assert has_missing_on_disk_problem(missing)

    assert healthy.markers == []
    assert not has_missing_on_disk_problem(healthy)


async def test_bearer_token_is_sent() -> None:
    client, recorder = make_client({('GET', '/api/project'): httpx.Response(200, json=[])}, token='secret')

    assert await client.list_projects() == []

    assert recorder.requests[0].headers['Authorization'] == 'Bearer secret'


async def test_list_projects_failure_raises_api_error() -> None:
    client, _ = make_client({('GET', '/api/project'): httpx.Response(503)})

    with pytest.raises(WorkspaceApiError):
        await client.list_projects()


async def test_get_project_not_found() -> None:
    client, _ = make_client({})

    with pytest.raises(ProjectNotFoundError) as exc_info:
        await client.get_project('missing')

    assert exc_info.value.path == '/missing'


async def test_import_posts_current_source_then_refreshes() -> None:
    imported = {**MISSING_PROJECT, 'problems': []}
    client, recorder = make_client(
        {
            ('POST', '/api/project/import/console-java-simple'): httpx.Response(204),
            ('GET', '/api/project/console-java-simple'): httpx.Response(200, json=imported),
        }
    )
    project = make_project(location='https://example/repo.git', source_type='github')

    result = await client.import_project(project)

    post, get = recorder.requests
    assert post.method == 'POST'
    assert json.loads(post.content) == {'location': 'https://example/repo.git', 'type': 'github', 'parameters': {}}
    assert get.method == 'GET'
    assert result.name == 'console-java-simple'
    assert not has_missing_on_disk_problem(result)


async def test_import_without_location_fails_before_any_request() -> None:
    client, recorder = make_client({})

    with pytest.raises(ProjectImportError):
        await client.import_project(make_project(location=None))

    assert recorder.requests == []


async def test_import_http_error_is_wrapped() -> None:
    client, _ = make_client({('POST', '/api/project/import/console-java-simple'): httpx.Response(409)})

    with pytest.raises(ProjectImportError) as exc_info:
        await client.import_project(make_project())

    assert exc_info.value.reason == 'HTTP 409'
    assert isinstance(exc_info.value.__cause__, httpx.HTTPStatusError)


async def test_delete_project() -> None:
    client, recorder = make_client({('DELETE', '/api/project/console-java-simple'): httpx.Response(204)})

    await client.delete_project(make_project())

    assert [(r.method, r.url.path) for r in recorder.requests] == [('DELETE', '/api/project/console-java-simple')]


async def test_delete_failure_is_wrapped() -> None:
    client, _ = make_client({('DELETE', '/api/project/console-java-simple'): httpx.Response(500)})

    with pytest.raises(ProjectDeleteError) as exc_info:
        await client.delete_project(make_project())

    assert exc_info.value.project_name == 'console-java-simple'
    assert exc_info.value.reason == 'HTTP 500'
