"""Runtime and dev dependency installation."""

from __future__ import annotations

from pathlib import Path

from create_mvp_app.config import FeatureConfig
from create_mvp_app.constants import BASE_DEPENDENCIES, DEV_DEPENDENCIES
from create_mvp_app.logger import Logger
from create_mvp_app.runner import CommandRunner

_CORE_PACKAGES: tuple[tuple[str, tuple[str, ...], str], ...] = (
    ("include_auth", ("@clerk/nextjs",), "Clerk to dependencies"),
    ("include_db", ("@supabase/supabase-js",), "Supabase to dependencies"),
)

# Packages pulled in by each production feature, in flag declaration order.
_PRODUCTION_PACKAGES: tuple[tuple[str, tuple[str, ...], str], ...] = (
    ("include_caching", ("@upstash/redis", "@upstash/ratelimit"), "Upstash Redis for caching & rate limiting"),
    ("include_background_jobs", ("inngest",), "Inngest for background jobs"),
    ("include_webhooks", ("svix",), "Svix for webhooks"),
    ("include_feature_flags", ("@vercel/flags",), "Vercel Flags for feature flags"),
    ("include_ab_testing", ("@vercel/edge-config",), "Vercel Edge Config for A/B testing"),
    ("include_monitoring", ("@sentry/nextjs",), "Sentry for error monitoring"),
    ("include_analytics", ("@vercel/analytics", "@vercel/speed-insights"), "Vercel Analytics & Speed Insights"),
)


def dependency_list(config: FeatureConfig, logger: Logger | None = None) -> list[str]:
    """Return the ordered ``pnpm add`` package list for *config*."""
    deps = list(BASE_DEPENDENCIES)

    for flag, packages, label in _CORE_PACKAGES:
        if getattr(config, flag):
            deps.extend(packages)
            if logger:
                logger.debug(f"Adding {label}")

    if config.include_auth or config.include_db:
        deps.append("@t3-oss/env-nextjs")
        if logger:
            logger.debug("Adding env validation")

    for flag, packages, label in _PRODUCTION_PACKAGES:
        if getattr(config, flag):
            deps.extend(packages)
            if logger:
                logger.debug(f"Adding {label}")

    return deps


async def install_dependencies(
    runner: CommandRunner,
    logger: Logger,
    config: FeatureConfig,
    base_path: Path,
) -> list[str]:
    """Install the runtime dependencies selected by *config*.

    Returns:
        The installed package names.

    Raises:
        CommandError: If ``pnpm add`` fails.
    """
    deps = dependency_list(config, logger)
    logger.debug(f"Installing: {', '.join(deps)}")
    await runner.run("pnpm", ["add", *deps], cwd=base_path)
    return deps


async def install_dev_dependencies(
    runner: CommandRunner,
    logger: Logger,
    base_path: Path,
) -> list[str]:
    """Install the testing and formatting toolchain as dev dependencies.

    Raises:
        CommandError: If ``pnpm add -D`` fails.
    """
    logger.debug("Installing testing libraries...")
    await runner.run("pnpm", ["add", "-D", *DEV_DEPENDENCIES], cwd=base_path)
    return list(DEV_DEPENDENCIES)
