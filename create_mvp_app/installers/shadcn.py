"""Initialise Shadcn UI and add every component."""

from __future__ import annotations

from pathlib import Path

from create_mvp_app.logger import Logger
from create_mvp_app.runner import CommandRunner


async def install_shadcn(runner: CommandRunner, logger: Logger, base_path: Path) -> None:
    """Run ``shadcn init`` with defaults, then ``shadcn add --all``.

    The ``add`` call is only issued once ``init`` has succeeded.

    Raises:
        CommandError: If either invocation fails.
    """
    logger.debug("Installing shadcn init...")
    await runner.run("pnpm", ["dlx", "shadcn@latest", "init", "-d"], cwd=base_path)

    logger.debug("Adding all shadcn components...")
    await runner.run("pnpm", ["dlx", "shadcn@latest", "add", "--all"], cwd=base_path)
