#!/usr/bin/env python3
"""
Command-line interface for workspace-sync.

Provides commands to inspect workspace project problems and to reconcile a
project that is registered in the workspace but missing on the file system.
"""

from __future__ import annotations

import asyncio
import traceback

import typer

from workspace_sync.app_context import WorkspaceAppContext
from workspace_sync.cli.console import ConsoleDialogFactory, ConsoleNotificationManager
from workspace_sync.cli.logger import CLILogger
from workspace_sync.config.cli import settings
from workspace_sync.domain import ProblemCode, Project
from workspace_sync.events import EventBus, SelectionChangedEvent
from workspace_sync.exceptions import WorkspaceApiError, WorkspaceSyncError
from workspace_sync.schemas.operations import RemediationOutcome, RemediationResult
from workspace_sync.services.problems import get_problems
from workspace_sync.services.synchronizer import ProjectSynchronizer
from workspace_sync.storage.workspace_api import WorkspaceApiClient

app = typer.Typer(
    name='workspace-sync',
    help='Synchronize workspace projects with the file system',
    add_completion=False,
)

OUTCOME_MESSAGES = {
    RemediationOutcome.NO_PROBLEM: 'Project {name} is present on the file system, nothing to do.',
    RemediationOutcome.ABANDONED: 'Synchronization of {name} cancelled.',
    RemediationOutcome.REMOVED: 'Project {name} removed from the workspace.',
    RemediationOutcome.IMPORTED: 'Project {name} imported.',
    RemediationOutcome.FAILED: 'Synchronization of {name} failed.',
    RemediationOutcome.SUPERSEDED: 'Synchronization of {name} was interrupted.',
}


def _make_client(api_url: str | None, token: str | None) -> WorkspaceApiClient:
    """Build the API client from CLI options, falling back to settings."""
    return WorkspaceApiClient(
        base_url=api_url or settings.WORKSPACE_API_URL,
        token=token or settings.WORKSPACE_API_TOKEN,
        timeout=settings.REQUEST_TIMEOUT_SECONDS,
    )


async def _load_root_project(client: WorkspaceApiClient, project_path: str | None) -> Project:
    if project_path:
        return await client.get_project(project_path)

    projects = await client.list_projects()
    if not projects:
        raise WorkspaceApiError('Workspace has no projects')
    return projects[0]


@app.command()
def status(
    project: str | None = typer.Option(None, '--project', '-p', help='Project path (default: all projects)'),
    api_url: str | None = typer.Option(None, '--api-url', help='Workspace API URL (or WORKSPACE_API_URL env)'),
    token: str | None = typer.Option(None, '--token', help='API token (or WORKSPACE_API_TOKEN env)'),
) -> None:
    """List projects and the problems the workspace reports for them."""
    asyncio.run(_status_async(project, api_url, token))


async def _status_async(project_path: str | None, api_url: str | None, token: str | None) -> None:
    """Async implementation of status command."""
    client = _make_client(api_url, token)

    try:
        projects = [await client.get_project(project_path)] if project_path else await client.list_projects()
    except WorkspaceSyncError as e:
        typer.secho(f'Error: {e}', fg=typer.colors.RED, err=True)
        raise typer.Exit(1)

    if not projects:
        typer.echo('No projects in workspace.')
        return

    for p in projects:
        problems = get_problems(p)
        color = typer.colors.YELLOW if problems else typer.colors.GREEN
        typer.secho(f'{p.path}', fg=color, bold=True)
        if p.source is not None and p.source.has_location:
            typer.echo(f'  Source: {p.source.location} ({p.source.type or "unknown"})')
        for code, text in sorted(problems.items()):
            flag = '  [missing on disk]' if code == ProblemCode.NO_PROJECT_FOLDER else ''
            typer.echo(f'  Problem {code}: {text}{flag}')


@app.command()
def check(
    project: str | None = typer.Option(None, '--project', '-p', help='Project path (default: first project)'),
    api_url: str | None = typer.Option(None, '--api-url', help='Workspace API URL (or WORKSPACE_API_URL env)'),
    token: str | None = typer.Option(None, '--token', help='API token (or WORKSPACE_API_TOKEN env)'),
    verbose: bool = typer.Option(False, '--verbose', '-v', help='Verbose output'),
) -> None:
    """Offer to import or remove a project that is missing on the file system."""
    asyncio.run(_check_async(project, api_url, token, verbose or settings.VERBOSE))


async def _check_async(project_path: str | None, api_url: str | None, token: str | None, verbose: bool) -> None:
    """Async implementation of check command."""
    logger = CLILogger(verbose=verbose)
    client = _make_client(api_url, token)

    try:
        root_project = await _load_root_project(client, project_path)
        await logger.info(f'Root project: {root_project.path}')

        context = WorkspaceAppContext(client, root_project)
        event_bus = EventBus()
        synchronizer = ProjectSynchronizer(
            context,
            ConsoleDialogFactory(),
            ConsoleNotificationManager(),
            logger=logger,
            default_source_type=settings.DEFAULT_SOURCE_TYPE,
        )

        synchronizer.attach(event_bus)
        try:
            event_bus.fire(SelectionChangedEvent())
            results = await synchronizer.drain()
        finally:
            synchronizer.detach()

    except WorkspaceSyncError as e:
        typer.secho(f'Error: {e}', fg=typer.colors.RED, err=True)
        raise typer.Exit(1)
    except Exception as e:
        await logger.error(f'Synchronization failed: {e}')
        if verbose:
            traceback.print_exc()
        raise typer.Exit(1)

    if not results:
        results = [RemediationResult(project_name=root_project.name, outcome=RemediationOutcome.NO_PROBLEM)]

    for result in results:
        message = OUTCOME_MESSAGES[result.outcome].format(name=result.project_name)
        if result.succeeded:
            typer.echo(message)
        else:
            typer.secho(message, fg=typer.colors.RED, err=True)
            if result.error_message:
                typer.echo(f'  {result.error_message}', err=True)
            raise typer.Exit(1)


def main() -> None:
    """Entry point for CLI."""
    app()


if __name__ == '__main__':
    main()
