"""Git repository initialisation for the generated project."""

from __future__ import annotations

from pathlib import Path

from create_mvp_app.logger import Logger
from create_mvp_app.runner import CommandError, CommandRunner

INITIAL_COMMIT_MESSAGE = "Initial commit via create-mvp-app"


async def init_git(runner: CommandRunner, logger: Logger, base_path: Path) -> bool:
    """Initialise a repository in *base_path* and commit the whole tree.

    Any failing git command abandons the step, leaving whatever partial
    state exists (for example an initialised repo without a commit).

    Returns:
        ``True`` if the initial commit was created, ``False`` otherwise.
    """
    try:
        logger.debug("Initializing git...")
        await runner.run("git", ["init"], cwd=base_path)

        logger.debug("Adding all files...")
        await runner.run("git", ["add", "-A"], cwd=base_path)

        logger.debug("Creating initial commit...")
        await runner.run(
            "git",
            ["commit", "-m", INITIAL_COMMIT_MESSAGE, "--no-verify"],
            cwd=base_path,
        )
    except CommandError as exc:
        logger.debug(f"Git error: {exc}")
        return False

    return True
