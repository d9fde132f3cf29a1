"""Activate the latest pnpm through corepack."""

from __future__ import annotations

from create_mvp_app.logger import Logger
from create_mvp_app.runner import CommandRunner


async def install_pnpm(runner: CommandRunner, logger: Logger) -> None:
    """Enable corepack and activate ``pnpm@latest``.

    Raises:
        CommandError: If either corepack invocation fails.
    """
    logger.debug("Enabling corepack...")
    await runner.run("corepack", ["enable"])

    logger.debug("Preparing pnpm...")
    await runner.run("corepack", ["prepare", "pnpm@latest", "--activate"])
