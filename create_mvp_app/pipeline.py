"""create-mvp-app pipeline orchestrator.

Runs the project creation steps strictly in order:

    PREREQ_CHECK       -- the target directory must not exist yet
    PNPM_READY         -- corepack enables and activates pnpm
    SCAFFOLD_CREATED   -- create-next-app builds the project
    CWD_SWITCHED       -- the project directory becomes the base path
    UI_KIT_READY       -- Shadcn UI init + all components      (optional)
    DEPS_INSTALLED     -- runtime dependencies
    DEV_DEPS_INSTALLED -- testing and formatting toolchain       (optional)
    BLOCKS_INSTALLED   -- Shadcn Blocks, failures tolerated      (optional)
    FILES_GENERATED    -- config, env, rules, stubs, landing page
    GIT_INITIALIZED    -- git init + initial commit, tolerated   (optional)
    DONE

Every step is awaited before the next one starts.  A fatal failure stops the
run and propagates unchanged; the partially created directory is left in
place.  The process working directory is never changed: the project
directory is threaded through each step as an explicit base path.
"""

from __future__ import annotations

import time
from collections.abc import Awaitable, Sequence
from enum import Enum
from pathlib import Path
from typing import Any, TypeVar

from create_mvp_app.config import FeatureConfig
from create_mvp_app.constants import SHADCN_BLOCKS
from create_mvp_app.generators import TemplateRenderer, generate_project_files
from create_mvp_app.installers import (
    install_blocks,
    install_dependencies,
    install_dev_dependencies,
    install_nextjs,
    install_pnpm,
    install_shadcn,
)
from create_mvp_app.logger import Logger
from create_mvp_app.progress import StepReporter
from create_mvp_app.runner import CommandRunner
from create_mvp_app.utils import format_duration
from create_mvp_app.vcs import init_git

T = TypeVar("T")


class Stage(str, Enum):
    """Pipeline states, in execution order."""

    INIT = "init"
    PREREQ_CHECK = "prereq-check"
    PNPM_READY = "pnpm-ready"
    SCAFFOLD_CREATED = "scaffold-created"
    CWD_SWITCHED = "cwd-switched"
    UI_KIT_READY = "ui-kit-ready"
    DEPS_INSTALLED = "deps-installed"
    DEV_DEPS_INSTALLED = "dev-deps-installed"
    BLOCKS_INSTALLED = "blocks-installed"
    FILES_GENERATED = "files-generated"
    GIT_INITIALIZED = "git-initialized"
    DONE = "done"


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class PipelineError(Exception):
    """Raised when the pipeline itself (not an external tool) cannot continue."""

    def __init__(self, stage: Stage, message: str) -> None:
        self.stage = stage
        super().__init__(message)


class TargetExistsError(PipelineError):
    """The project directory already exists; nothing has been touched."""


# ---------------------------------------------------------------------------
# Pipeline Orchestrator
# ---------------------------------------------------------------------------


class Pipeline:
    """Creates one project from a :class:`FeatureConfig`.

    Attributes:
        config: The immutable feature configuration.
        target_dir: ``<cwd>/<project_name>``.
        base_path: The project directory once it has been scaffolded; every
            step after ``CWD_SWITCHED`` runs relative to it.
        stage: The last stage reached.
        state: Run summary (completed stages, warnings, timing, outcome).
    """

    def __init__(
        self,
        config: FeatureConfig,
        *,
        cwd: str | Path | None = None,
        runner: CommandRunner | None = None,
        logger: Logger | None = None,
        reporter: StepReporter | None = None,
        blocks: Sequence[str] = SHADCN_BLOCKS,
        renderer: TemplateRenderer | None = None,
    ) -> None:
        self.config = config
        self.cwd = Path(cwd).resolve() if cwd is not None else Path.cwd()
        self.target_dir = config.target_dir(self.cwd)
        self.runner = runner or CommandRunner(visible=config.debug)
        self.logger = logger or Logger(debug=config.debug)
        self.reporter = reporter or StepReporter()
        self.blocks = tuple(blocks)
        self.renderer = renderer or TemplateRenderer()

        self.base_path: Path | None = None
        self.stage = Stage.INIT
        self.state: dict[str, Any] = {
            "project_path": str(self.target_dir),
            "stages_completed": [],
            "warnings": [],
            "blocks_failed": [],
            "success": False,
        }

    # ------------------------------------------------------------------
    # Run
    # ------------------------------------------------------------------

    async def run(self) -> dict[str, Any]:
        """Execute every applicable step in order.

        Returns:
            The final state dictionary, with ``success`` set to ``True``.

        Raises:
            TargetExistsError: The project directory already exists.
            CommandError: A fatal external tool failed.
            OSError: Writing a generated file failed.
        """
        started = time.monotonic()
        config = self.config

        self.logger.debug(f"Target directory: {self.target_dir}")
        self.logger.debug(
            f"Configuration: {config.model_dump_json(indent=2, exclude={'env_vars'})}"
        )

        try:
            self._check_target()

            await self._step(
                Stage.PNPM_READY,
                "Installing latest pnpm",
                install_pnpm(self.runner, self.logger),
            )
            await self._step(
                Stage.SCAFFOLD_CREATED,
                "Creating Next.js app",
                install_nextjs(self.runner, self.logger, self.target_dir),
            )

            base_path = self._switch_to_target()

            if config.include_ui:
                await self._step(
                    Stage.UI_KIT_READY,
                    "Installing Shadcn UI",
                    install_shadcn(self.runner, self.logger, base_path),
                )

            await self._step(
                Stage.DEPS_INSTALLED,
                "Installing dependencies",
                install_dependencies(self.runner, self.logger, config, base_path),
            )

            if config.include_tests:
                await self._step(
                    Stage.DEV_DEPS_INSTALLED,
                    "Installing dev dependencies",
                    install_dev_dependencies(self.runner, self.logger, base_path),
                )

            if config.include_blocks:
                await self._install_blocks(base_path)

            await self._step(
                Stage.FILES_GENERATED,
                "Generating project files",
                generate_project_files(base_path, config, self.renderer),
            )

            if config.init_git:
                await self._init_git(base_path)

        except Exception as exc:
            stage = exc.stage if isinstance(exc, PipelineError) else self.stage
            self.state.setdefault("failed_stage", stage.value)
            self.state["error"] = str(exc)
            raise

        finally:
            self.state["duration"] = format_duration(time.monotonic() - started)

        self._advance(Stage.DONE)
        self.state["success"] = True
        return self.state

    # ------------------------------------------------------------------
    # Stage helpers
    # ------------------------------------------------------------------

    def _advance(self, stage: Stage) -> None:
        self.stage = stage
        self.state["stages_completed"].append(stage.value)

    def _warn(self, label: str, message: str) -> None:
        self.state["warnings"].append(f"{label}: {message}")
        self.reporter.on_step_warn(label, message)

    async def _step(self, stage: Stage, label: str, work: Awaitable[T]) -> T:
        """Run one fatal step, reporting its outcome.

        The exception of a failing step is re-raised unchanged.
        """
        self.reporter.on_step_start(label)
        try:
            result = await work
        except Exception as exc:
            self.state["failed_stage"] = stage.value
            self.reporter.on_step_fail(label, exc)
            raise
        self._advance(stage)
        self.reporter.on_step_succeed(label)
        return result

    def _check_target(self) -> None:
        self.stage = Stage.PREREQ_CHECK
        if self.target_dir.exists():
            raise TargetExistsError(
                Stage.PREREQ_CHECK,
                f"Directory {self.config.project_name} already exists",
            )
        self._advance(Stage.PREREQ_CHECK)

    def _switch_to_target(self) -> Path:
        """Make the scaffolded directory the base path of all later steps."""
        if not self.target_dir.is_dir():
            raise PipelineError(
                Stage.CWD_SWITCHED,
                f"Scaffolding finished but {self.target_dir} does not exist",
            )
        self.logger.debug(f"Changing base path to {self.target_dir}")
        self.base_path = self.target_dir
        self._advance(Stage.CWD_SWITCHED)
        return self.base_path

    # ------------------------------------------------------------------
    # Non-fatal steps
    # ------------------------------------------------------------------

    async def _install_blocks(self, base_path: Path) -> None:
        label = "Installing Shadcn Blocks (this may take a while)"
        self.reporter.on_step_start(label)
        try:
            report = await install_blocks(self.runner, self.logger, self.blocks, base_path)
        except Exception as exc:
            self.logger.debug(f"Block installation aborted: {exc}")
            self._warn(label, "Some Shadcn Blocks may have failed to install")
            return

        self._advance(Stage.BLOCKS_INSTALLED)
        if report.failed:
            self.state["blocks_failed"] = list(report.failed)
            self._warn(
                label,
                f"{len(report.failed)} of {len(self.blocks)} Shadcn Blocks failed to install",
            )
        else:
            self.reporter.on_step_succeed(label)

    async def _init_git(self, base_path: Path) -> None:
        label = "Initializing Git repository"
        self.reporter.on_step_start(label)
        try:
            committed = await init_git(self.runner, self.logger, base_path)
        except Exception as exc:
            self.logger.debug(f"Git error: {exc}")
            committed = False

        if committed:
            self._advance(Stage.GIT_INITIALIZED)
            self.reporter.on_step_succeed(label)
        else:
            self._warn(label, "Git initialization skipped")
