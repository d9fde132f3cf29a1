"""Installer steps that delegate to external tools.

Every step is an ``async`` function taking a
:class:`~create_mvp_app.runner.CommandRunner` and a
:class:`~create_mvp_app.logger.Logger`.  Fatal steps let
:class:`~create_mvp_app.runner.CommandError` propagate; the block installer
isolates failures and reports them instead.
"""

from create_mvp_app.installers.blocks import BlockInstallReport, install_blocks
from create_mvp_app.installers.deps import (
    dependency_list,
    install_dependencies,
    install_dev_dependencies,
)
from create_mvp_app.installers.nextjs import install_nextjs
from create_mvp_app.installers.pnpm import install_pnpm
from create_mvp_app.installers.shadcn import install_shadcn

__all__ = [
    "BlockInstallReport",
    "dependency_list",
    "install_blocks",
    "install_dependencies",
    "install_dev_dependencies",
    "install_nextjs",
    "install_pnpm",
    "install_shadcn",
]
