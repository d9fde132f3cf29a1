"""External command execution.

Every external tool the generator drives (corepack, npx, pnpm, git, the
editor) is launched through :class:`CommandRunner`.  The runner does not
interpret failures: a non-zero exit or a spawn error is reported on the
returned :class:`CommandResult`, and optionally raised as
:class:`CommandError`.  There are no retries and no timeouts.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from pathlib import Path


@dataclass
class CommandResult:
    """Outcome of one external program invocation."""

    program: str
    args: list[str] = field(default_factory=list)
    exit_code: int | None = None
    stdout: str = ""
    stderr: str = ""
    error: OSError | None = None

    @property
    def success(self) -> bool:
        return self.error is None and self.exit_code == 0

    @property
    def command_line(self) -> str:
        return " ".join([self.program, *self.args])

    def check(self) -> "CommandResult":
        """Return ``self`` on success, raise :class:`CommandError` otherwise."""
        if self.success:
            return self
        if self.error is not None:
            raise CommandError(self) from self.error
        raise CommandError(self)


class CommandError(Exception):
    """Raised when an external command fails to spawn or exits non-zero."""

    def __init__(self, result: CommandResult) -> None:
        self.result = result
        if result.error is not None:
            reason = f"could not be started: {result.error}"
        else:
            reason = f"exited with code {result.exit_code}"
        message = f"Command `{result.command_line}` {reason}"
        if result.stderr:
            message += f"\n{result.stderr[-2000:]}"
        super().__init__(message)


class CommandRunner:
    """Runs external programs with a fixed output-visibility mode.

    When *visible* is ``True`` the child inherits the parent's stdout and
    stderr so tool output streams to the terminal.  Otherwise both streams
    are captured and kept on the result for failure diagnostics.
    """

    def __init__(self, visible: bool = False) -> None:
        self.visible = visible

    async def run(
        self,
        program: str,
        args: list[str] | None = None,
        *,
        cwd: str | Path | None = None,
        input: str | None = None,
        check: bool = True,
    ) -> CommandResult:
        """Run *program* with *args* and wait for it to exit.

        Args:
            program: Executable name, resolved through the caller's ``PATH``.
            args: Ordered argument list.
            cwd: Working directory for the child process.
            input: Text written to the child's stdin, which is then closed.
            check: Raise :class:`CommandError` when the command fails.

        Returns:
            The :class:`CommandResult` describing the run.
        """
        args = list(args or [])
        result = CommandResult(program=program, args=args)

        capture = None if self.visible else asyncio.subprocess.PIPE
        stdin = asyncio.subprocess.PIPE if input is not None else None

        try:
            process = await asyncio.create_subprocess_exec(
                program,
                *args,
                stdin=stdin,
                stdout=capture,
                stderr=capture,
                cwd=str(cwd) if cwd else None,
            )
        except OSError as exc:
            result.error = exc
        else:
            stdout_bytes, stderr_bytes = await process.communicate(
                input.encode("utf-8") if input is not None else None
            )
            result.exit_code = process.returncode
            result.stdout = (stdout_bytes or b"").decode("utf-8", errors="replace").strip()
            result.stderr = (stderr_bytes or b"").decode("utf-8", errors="replace").strip()

        if check:
            result.check()
        return result
