"""Scaffold the Next.js application with ``create-next-app``."""

from __future__ import annotations

from pathlib import Path

from create_mvp_app.logger import Logger
from create_mvp_app.runner import CommandRunner

CREATE_NEXT_APP_FLAGS: tuple[str, ...] = (
    "--typescript",
    "--tailwind",
    "--eslint",
    "--app",
    "--src-dir",
    "--import-alias",
    "@/*",
    "--use-pnpm",
    "--no-git",
)


async def install_nextjs(runner: CommandRunner, logger: Logger, target_dir: Path) -> None:
    """Create the Next.js app at *target_dir*.

    The command runs from the parent of *target_dir* and receives only the
    directory name.  ``create-next-app`` asks whether to enable the React
    Compiler; the answer ``n`` is fed on stdin.

    Raises:
        CommandError: If ``create-next-app`` fails.
    """
    target_dir = Path(target_dir)
    logger.debug(f"Running create-next-app for {target_dir}...")
    await runner.run(
        "npx",
        ["create-next-app@latest", target_dir.name, *CREATE_NEXT_APP_FLAGS],
        cwd=target_dir.parent,
        input="n\n",
    )
