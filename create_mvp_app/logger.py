"""Diagnostic logger with a debug toggle.

A thin layer over Rich consoles.  The debug flag is fixed when the logger is
created; ``debug`` messages are dropped unless it is set.
"""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape

from create_mvp_app.utils import console as default_console
from create_mvp_app.utils import err_console as default_err_console


class Logger:
    """Process-wide diagnostic sink for the project generator."""

    def __init__(
        self,
        debug: bool = False,
        console: Console | None = None,
        err_console: Console | None = None,
    ) -> None:
        self.debug_mode = debug
        self.console = console or default_console
        self.err_console = err_console or console or default_err_console

    def debug(self, message: str) -> None:
        if self.debug_mode:
            self.console.print(f"[grey50][DEBUG] {escape(message)}[/grey50]")

    def info(self, message: str) -> None:
        self.console.print(f"[blue]{escape(message)}[/blue]")

    def success(self, message: str) -> None:
        self.console.print(f"[green]{escape(message)}[/green]")

    def warn(self, message: str) -> None:
        self.console.print(f"[yellow]{escape(message)}[/yellow]")

    def error(self, message: str) -> None:
        self.err_console.print(f"[red]{escape(message)}[/red]")
