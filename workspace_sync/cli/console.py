"""
Console collaborators - dialogs and notifications rendered with typer prompts.

Prompts block on stdin, so they run in a worker thread to keep the event loop free.
"""

from __future__ import annotations

import asyncio

import typer

from workspace_sync.protocols import DialogChoice, DisplayMode, Status

STATUS_COLORS = {
    Status.SUCCESS: typer.colors.GREEN,
    Status.FAIL: typer.colors.RED,
    Status.WARNING: typer.colors.YELLOW,
    Status.PROGRESS: typer.colors.CYAN,
}

STATUS_SYMBOLS = {
    Status.SUCCESS: '✓',
    Status.FAIL: '✗',
    Status.WARNING: '!',
    Status.PROGRESS: '…',
}

CANCEL_ANSWER = 'cancel'


class ConsoleDialogFactory:
    """DialogFactory that asks on the terminal."""

    async def confirm(
        self,
        title: str,
        message: str,
        *,
        positive_label: str,
        negative_label: str,
    ) -> DialogChoice:
        return await asyncio.to_thread(self._confirm, title, message, positive_label, negative_label)

    async def ask_text(
        self,
        title: str,
        prompt: str,
        *,
        positive_label: str,
        initial: str = '',
    ) -> str | None:
        return await asyncio.to_thread(self._ask_text, title, prompt, initial)

    def _confirm(self, title: str, message: str, positive_label: str, negative_label: str) -> DialogChoice:
        typer.secho(title, bold=True)
        typer.echo(message)
        try:
            answer = typer.prompt(
                f'{positive_label} / {negative_label} / {CANCEL_ANSWER}',
                default=CANCEL_ANSWER,
                show_default=False,
            )
        except typer.Abort:
            return DialogChoice.DISMISSED
        return _match_choice(answer, positive_label, negative_label)

    def _ask_text(self, title: str, prompt: str, initial: str) -> str | None:
        typer.secho(title, bold=True)
        try:
            return typer.prompt(prompt, default=initial, show_default=bool(initial))
        except typer.Abort:
            return None


def _match_choice(answer: str, positive_label: str, negative_label: str) -> DialogChoice:
    """Match a typed answer against the button labels (full label or first letter)."""
    answer = answer.strip().casefold()
    if not answer:
        return DialogChoice.DISMISSED
    for label, choice in ((positive_label, DialogChoice.POSITIVE), (negative_label, DialogChoice.NEGATIVE)):
        label = label.casefold()
        if answer == label or answer == label[:1]:
            return choice
    return DialogChoice.DISMISSED


class ConsoleNotificationManager:
    """NotificationManager that prints to the terminal."""

    def __init__(self) -> None:
        self.history: list[tuple[str, Status]] = []

    def notify(self, message: str, status: Status, display_mode: DisplayMode) -> None:
        self.history.append((message, status))
        if display_mode is DisplayMode.NOT_EMERGE_MODE:
            return
        typer.secho(
            f'{STATUS_SYMBOLS[status]} {message}',
            fg=STATUS_COLORS[status],
            err=status is Status.FAIL,
        )
