"""Batch installation of Shadcn Blocks.

Blocks are installed one ``shadcn add`` call at a time.  A failing block is
logged and skipped; it never stops the remaining installs and never fails
the pipeline.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path

from create_mvp_app.logger import Logger
from create_mvp_app.runner import CommandError, CommandRunner

BLOCK_REGISTRY = "@shadcnblocks"

# shadcn may ask to overwrite files shared between blocks; always decline.
# stdin is a finite buffer, so the answers are bounded.  A block asking more
# often than this reads EOF after the last answer.
MAX_OVERWRITE_ANSWERS = 1024
_DECLINE_ALL = "n\n" * MAX_OVERWRITE_ANSWERS


@dataclass
class BlockInstallReport:
    """Which blocks were installed and which failed."""

    installed: list[str] = field(default_factory=list)
    failed: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failed


async def install_blocks(
    runner: CommandRunner,
    logger: Logger,
    blocks: Sequence[str],
    base_path: Path,
) -> BlockInstallReport:
    """Install every block identifier in *blocks*, in order."""
    report = BlockInstallReport()
    logger.debug(f"Installing {len(blocks)} Shadcn blocks...")

    for block in blocks:
        logger.debug(f"Installing block: {block}")
        try:
            await runner.run(
                "pnpm",
                ["dlx", "shadcn", "add", f"{BLOCK_REGISTRY}/{block}", "-y"],
                cwd=base_path,
                input=_DECLINE_ALL,
            )
        except CommandError as exc:
            logger.debug(f"Block {block} failed: {exc}")
            report.failed.append(block)
        else:
            report.installed.append(block)

    return report
