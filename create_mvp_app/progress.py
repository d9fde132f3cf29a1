"""Step progress reporting.

The pipeline announces every step through a :class:`StepReporter`; it never
draws to the terminal itself.  :class:`ConsoleReporter` renders Rich spinners
and status lines, :class:`RecordingReporter` keeps the events in memory.
"""

from __future__ import annotations

from typing import Any

from rich.console import Console
from rich.markup import escape
from rich.status import Status

from create_mvp_app.utils import console as default_console


class StepReporter:
    """Callback interface invoked by the pipeline around each step.

    The base implementation ignores every event.
    """

    def on_step_start(self, name: str) -> None:
        pass

    def on_step_succeed(self, name: str) -> None:
        pass

    def on_step_warn(self, name: str, message: str) -> None:
        pass

    def on_step_fail(self, name: str, error: BaseException) -> None:
        pass


class ConsoleReporter(StepReporter):
    """Renders step progress with a Rich spinner and coloured outcome lines.

    Spinners are disabled when *spinner* is ``False`` (debug mode), so that
    streamed tool output is not interleaved with the live display.
    """

    def __init__(self, console: Console | None = None, spinner: bool = True) -> None:
        self.console = console or default_console
        self.spinner = spinner
        self._status: Status | None = None

    def _stop(self) -> None:
        if self._status is not None:
            self._status.stop()
            self._status = None

    def on_step_start(self, name: str) -> None:
        self._stop()
        if self.spinner:
            self._status = self.console.status(f"{escape(name)}...", spinner="dots")
            self._status.start()
        else:
            self.console.print(f"[cyan]-[/cyan] {escape(name)}...")

    def on_step_succeed(self, name: str) -> None:
        self._stop()
        self.console.print(f"[green]✔[/green] {escape(name)}")

    def on_step_warn(self, name: str, message: str) -> None:
        self._stop()
        self.console.print(f"[yellow]![/yellow] {escape(name)}: [yellow]{escape(message)}[/yellow]")

    def on_step_fail(self, name: str, error: BaseException) -> None:
        self._stop()
        self.console.print(f"[red]✖[/red] {escape(name)} [red]failed[/red]")


class RecordingReporter(StepReporter):
    """Collects ``(event, name, detail)`` tuples in call order."""

    def __init__(self) -> None:
        self.events: list[tuple[str, str, Any]] = []

    def on_step_start(self, name: str) -> None:
        self.events.append(("start", name, None))

    def on_step_succeed(self, name: str) -> None:
        self.events.append(("succeed", name, None))

    def on_step_warn(self, name: str, message: str) -> None:
        self.events.append(("warn", name, message))

    def on_step_fail(self, name: str, error: BaseException) -> None:
        self.events.append(("fail", name, error))

    def names(self, event: str) -> list[str]:
        """Step names that received *event*, in order."""
        return [name for kind, name, _ in self.events if kind == event]
