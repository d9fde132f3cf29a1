"""Shared pytest fixtures for the create-mvp-app test suite.

Provides reusable fixtures for:
- A fake command runner that records every external tool invocation
- Feature configurations
- Quiet loggers and recording step reporters
"""

from __future__ import annotations

import io
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import pytest
from rich.console import Console

from create_mvp_app.config import FeatureConfig
from create_mvp_app.logger import Logger
from create_mvp_app.progress import RecordingReporter
from create_mvp_app.runner import CommandResult


# ---------------------------------------------------------------------------
# Fake command runner
# ---------------------------------------------------------------------------


@dataclass
class RecordedCall:
    program: str
    args: list[str]
    cwd: Path | None
    input: str | None

    @property
    def command_line(self) -> str:
        return " ".join([self.program, *self.args])


class FakeRunner:
    """Stand-in for :class:`CommandRunner` that never spawns a process.

    Every call is recorded.  A call fails (exit code 1) when any registered
    predicate matches its command line.  ``create-next-app`` creates the
    target directory with a minimal ``src/app`` tree, as the real tool does,
    resolving its path argument against the call's ``cwd``.
    """

    def __init__(self, scaffold: bool = True) -> None:
        self.calls: list[RecordedCall] = []
        self.scaffold = scaffold
        self._failures: list[Callable[[str], bool]] = []

    def fail_when(self, predicate: Callable[[str], bool] | str) -> None:
        """Make matching commands fail.  A string matches as a substring."""
        if isinstance(predicate, str):
            needle = predicate
            predicate = lambda line: needle in line  # noqa: E731
        self._failures.append(predicate)

    async def run(
        self,
        program: str,
        args: list[str] | None = None,
        *,
        cwd: str | Path | None = None,
        input: str | None = None,
        check: bool = True,
    ) -> CommandResult:
        args = list(args or [])
        call = RecordedCall(program, args, Path(cwd) if cwd else None, input)
        self.calls.append(call)

        result = CommandResult(program=program, args=args)
        if any(predicate(call.command_line) for predicate in self._failures):
            result.exit_code = 1
            result.stderr = f"{program} failed"
        else:
            result.exit_code = 0
            if self.scaffold and args[:1] == ["create-next-app@latest"]:
                target = (call.cwd or Path.cwd()) / args[1]
                (target / "src" / "app").mkdir(parents=True)
                (target / "src" / "app" / "page.tsx").write_text(
                    "export default function Home() { return null; }\n", encoding="utf-8"
                )

        if check:
            result.check()
        return result

    def command_lines(self) -> list[str]:
        return [call.command_line for call in self.calls]

    def calls_to(self, program: str) -> list[RecordedCall]:
        return [call for call in self.calls if call.program == program]


@pytest.fixture
def fake_runner() -> FakeRunner:
    """A FakeRunner whose commands all succeed until told otherwise."""
    return FakeRunner()


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------


@pytest.fixture
def make_config() -> Callable[..., FeatureConfig]:
    """Factory for FeatureConfig objects with test defaults.

    Usage:
        def test_x(make_config):
            config = make_config(include_blocks=False)
    """

    def _make(**overrides: Any) -> FeatureConfig:
        values: dict[str, Any] = {"project_name": "test-app", "init_git": True}
        values.update(overrides)
        return FeatureConfig(**values)

    return _make


@pytest.fixture
def default_config(make_config) -> FeatureConfig:
    """Default feature set for ``test-app``."""
    return make_config()


# ---------------------------------------------------------------------------
# Output
# ---------------------------------------------------------------------------


@pytest.fixture
def log_output() -> io.StringIO:
    """Buffer receiving everything the quiet logger prints."""
    return io.StringIO()


@pytest.fixture
def quiet_logger(log_output: io.StringIO) -> Logger:
    """A debug-enabled Logger writing to an in-memory buffer."""
    console = Console(file=log_output, force_terminal=False, width=200)
    return Logger(debug=True, console=console, err_console=console)


@pytest.fixture
def reporter() -> RecordingReporter:
    """A StepReporter that records every event."""
    return RecordingReporter()
