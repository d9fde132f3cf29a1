"""Command-line entry point for ``create-mvp-app``.

Usage::

    create-mvp-app                      # interactive
    create-mvp-app my-app --yes         # defaults, no prompts
    create-mvp-app my-app -y --no-blocks --caching --monitoring
    python -m create_mvp_app my-app -y --debug
"""

from __future__ import annotations

import argparse
import asyncio
import re
import sys
import traceback
from pathlib import Path
from typing import Any

from pydantic import ValidationError
from rich.markup import escape
from rich.prompt import Confirm, Prompt

from create_mvp_app import __version__
from create_mvp_app.config import PROJECT_NAME_PATTERN, EnvVars, FeatureConfig
from create_mvp_app.logger import Logger
from create_mvp_app.pipeline import Pipeline
from create_mvp_app.progress import ConsoleReporter
from create_mvp_app.runner import CommandRunner
from create_mvp_app.utils import (
    console,
    print_error,
    print_success,
    print_summary_table,
)

# (attribute, CLI flag stem, prompt title) for the features on by default.
CORE_FEATURES: tuple[tuple[str, str, str], ...] = (
    ("include_auth", "auth", "Authentication (Clerk)"),
    ("include_db", "db", "Database (Supabase)"),
    ("include_ui", "ui", "Shadcn UI Components"),
    ("include_blocks", "blocks", "Shadcn Blocks (90+ components)"),
    ("include_tests", "tests", "Testing (Vitest + Playwright)"),
)

# Opt-in production features.
PRODUCTION_FEATURE_OPTIONS: tuple[tuple[str, str, str], ...] = (
    ("include_caching", "caching", "Caching & rate limiting (Upstash Redis)"),
    ("include_background_jobs", "background-jobs", "Background jobs (Inngest)"),
    ("include_webhooks", "webhooks", "Webhooks (Svix)"),
    ("include_multi_tenancy", "multi-tenancy", "Multi-tenancy"),
    ("include_feature_flags", "feature-flags", "Feature flags (Vercel Flags)"),
    ("include_ab_testing", "ab-testing", "A/B testing (Vercel Edge Config)"),
    ("include_monitoring", "monitoring", "Error monitoring (Sentry)"),
    ("include_analytics", "analytics", "Analytics (Vercel Analytics)"),
)

# EnvVars field -> argparse dest
ENV_OPTIONS: dict[str, str] = {
    "clerk_publishable_key": "clerk_key",
    "clerk_secret_key": "clerk_secret",
    "supabase_url": "supabase_url",
    "supabase_anon_key": "supabase_key",
    "upstash_redis_url": "redis_url",
    "upstash_redis_token": "redis_token",
    "sentry_dsn": "sentry_dsn",
}


# ---------------------------------------------------------------------------
# Argument parsing
# ---------------------------------------------------------------------------


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="create-mvp-app",
        description=(
            "Create a production-ready Next.js MVP with authentication, "
            "database, and UI components"
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  create-mvp-app\n"
            "  create-mvp-app my-app --yes\n"
            "  create-mvp-app my-app -y --no-blocks --caching --monitoring\n"
            "\n"
            "Secret options default to the matching environment variables\n"
            "(NEXT_PUBLIC_CLERK_PUBLISHABLE_KEY, CLERK_SECRET_KEY, ...).\n"
        ),
    )
    parser.add_argument("project_name", nargs="?", help="Name of your project")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-y", "--yes", action="store_true", help="Skip prompts and use defaults")
    parser.add_argument(
        "-d", "--debug", action="store_true", help="Show detailed logs and command output"
    )

    for _, stem, title in CORE_FEATURES:
        parser.add_argument(
            f"--no-{stem}",
            dest=stem.replace("-", "_"),
            action="store_false",
            help=f"Skip {title}",
        )
    parser.add_argument("--no-git", dest="git", action="store_false", help="Skip git initialization")

    production = parser.add_argument_group("production features")
    for _, stem, title in PRODUCTION_FEATURE_OPTIONS:
        production.add_argument(
            f"--{stem}",
            dest=stem.replace("-", "_"),
            action="store_true",
            help=f"Add {title}",
        )

    secrets = parser.add_argument_group("environment values")
    secrets.add_argument("--clerk-key", metavar="KEY", help="Clerk publishable key")
    secrets.add_argument("--clerk-secret", metavar="SECRET", help="Clerk secret key")
    secrets.add_argument("--supabase-url", metavar="URL", help="Supabase project URL")
    secrets.add_argument("--supabase-key", metavar="KEY", help="Supabase anon key")
    secrets.add_argument("--redis-url", metavar="URL", help="Upstash Redis REST URL")
    secrets.add_argument("--redis-token", metavar="TOKEN", help="Upstash Redis REST token")
    secrets.add_argument("--sentry-dsn", metavar="DSN", help="Sentry DSN")

    parser.add_argument(
        "--open", action="store_true", help="Open project in Cursor after creation"
    )
    return parser


def _env_vars_from_args(args: argparse.Namespace) -> EnvVars:
    """Command-line values win over values found in the environment."""
    values = EnvVars.from_env().model_dump()
    for field_name, dest in ENV_OPTIONS.items():
        value = getattr(args, dest, None)
        if value:
            values[field_name] = value
    return EnvVars(**values)


def _production_flags(args: argparse.Namespace) -> dict[str, bool]:
    return {
        attr: getattr(args, stem.replace("-", "_"))
        for attr, stem, _ in PRODUCTION_FEATURE_OPTIONS
    }


def config_from_args(args: argparse.Namespace) -> FeatureConfig:
    """Build the configuration for ``--yes`` mode.

    Raises:
        ValidationError: If the project name is invalid.
    """
    return FeatureConfig(
        project_name=args.project_name,
        include_auth=args.auth,
        include_db=args.db,
        include_ui=args.ui,
        include_blocks=args.blocks,
        include_tests=args.tests,
        init_git=args.git,
        debug=args.debug,
        env_vars=_env_vars_from_args(args),
        open_in_editor=args.open,
        **_production_flags(args),
    )


# ---------------------------------------------------------------------------
# Interactive mode
# ---------------------------------------------------------------------------


def _valid_project_name(name: str) -> bool:
    if re.match(PROJECT_NAME_PATTERN, name):
        return True
    console.print("[red]Project name must be lowercase with hyphens only[/red]")
    return False


def _ask_project_name() -> str:
    while True:
        name = Prompt.ask("What is your project name?", default="my-mvp-app", console=console)
        if _valid_project_name(name):
            return name


def prompt_for_config(args: argparse.Namespace) -> FeatureConfig:
    """Ask for every setting not fixed on the command line.

    Command-line flags become the prompt defaults.  An invalid positional
    project name is rejected before any feature prompt and asked for again.

    Raises:
        KeyboardInterrupt, EOFError: The user aborted the prompts.
    """
    project_name = args.project_name
    if not project_name or not _valid_project_name(project_name):
        project_name = _ask_project_name()

    values: dict[str, Any] = {}
    console.print("\n[bold]Select features to include:[/bold]")
    for attr, stem, title in CORE_FEATURES:
        values[attr] = Confirm.ask(f"  {title}", default=getattr(args, stem), console=console)

    production = _production_flags(args)
    if any(production.values()) or Confirm.ask(
        "Add production features?", default=False, console=console
    ):
        for attr, _, title in PRODUCTION_FEATURE_OPTIONS:
            production[attr] = Confirm.ask(
                f"  {title}", default=production[attr], console=console
            )
    values.update(production)

    values["init_git"] = Confirm.ask("Initialize Git repository?", default=args.git, console=console)

    env_values = _env_vars_from_args(args).model_dump()
    if Confirm.ask(
        "Would you like to provide environment variables now?", default=False, console=console
    ):
        if values["include_auth"]:
            env_values["clerk_publishable_key"] = Prompt.ask(
                "Clerk Publishable Key (leave empty to skip)",
                default=env_values["clerk_publishable_key"],
                show_default=False,
                console=console,
            )
            env_values["clerk_secret_key"] = Prompt.ask(
                "Clerk Secret Key (leave empty to skip)",
                default=env_values["clerk_secret_key"],
                show_default=False,
                password=True,
                console=console,
            )
        if values["include_db"]:
            env_values["supabase_url"] = Prompt.ask(
                "Supabase Project URL (leave empty to skip)",
                default=env_values["supabase_url"],
                show_default=False,
                console=console,
            )
            env_values["supabase_anon_key"] = Prompt.ask(
                "Supabase Anon Key (leave empty to skip)",
                default=env_values["supabase_anon_key"],
                show_default=False,
                password=True,
                console=console,
            )

    values["open_in_editor"] = Confirm.ask(
        "Open project in Cursor after creation?", default=True, console=console
    )

    return FeatureConfig(
        project_name=project_name,
        debug=args.debug,
        env_vars=EnvVars(**env_values),
        **values,
    )


# ---------------------------------------------------------------------------
# Run
# ---------------------------------------------------------------------------


async def open_in_editor(runner: CommandRunner, logger: Logger, project_dir: Path) -> bool:
    """Open *project_dir* in Cursor.  Failure only produces a warning."""
    with console.status("Opening in Cursor..."):
        result = await runner.run("cursor", ["."], cwd=project_dir, check=False)
    if result.success:
        logger.success("Opened in Cursor!")
        return True
    logger.warn("Could not open Cursor automatically")
    logger.debug('Make sure Cursor is installed and "cursor" command is in PATH')
    return False


async def create_project(config: FeatureConfig) -> dict[str, Any]:
    """Run the pipeline with terminal reporting, then open the editor."""
    logger = Logger(debug=config.debug)
    runner = CommandRunner(visible=config.debug)
    pipeline = Pipeline(
        config,
        runner=runner,
        logger=logger,
        reporter=ConsoleReporter(spinner=not config.debug),
    )
    state = await pipeline.run()

    print_success(f"\n✅ Setup Complete! ({state['duration']})\n")

    if config.open_in_editor:
        await open_in_editor(runner, logger, pipeline.target_dir)
    return state


def _summary(config: FeatureConfig) -> dict[str, str]:
    core = [title for attr, _, title in CORE_FEATURES if getattr(config, attr)]
    production = [
        title for attr, _, title in PRODUCTION_FEATURE_OPTIONS if getattr(config, attr)
    ]
    return {
        "Project": config.project_name,
        "Brand": config.brand_name,
        "Features": ", ".join(core) or "none",
        "Production features": ", ".join(production) or "none",
        "Git": "yes" if config.init_git else "no",
    }


def print_next_steps(config: FeatureConfig) -> None:
    console.print("[blue]👉 Next Steps:[/blue]\n")
    console.print(f"   cd {config.project_name}")
    if config.include_auth and not config.env_vars.clerk_publishable_key:
        console.print("   Add your Clerk keys to .env.local")
    if config.include_db and not config.env_vars.supabase_url:
        console.print("   Add your Supabase keys to .env.local")
    console.print("   pnpm dev\n")


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for ``create-mvp-app`` and ``python -m create_mvp_app``."""
    args = build_parser().parse_args(argv)

    console.print("\n[bold blue]🚀 Create MVP App[/bold blue]\n")
    if args.debug:
        console.print("[yellow]🐛 Debug mode enabled - showing detailed logs[/yellow]\n")

    try:
        if args.yes:
            if not args.project_name:
                print_error("❌ Project name is required in quick mode")
                sys.exit(1)
            config = config_from_args(args)
        else:
            config = prompt_for_config(args)
    except ValidationError as exc:
        message = exc.errors()[0].get("msg", str(exc))
        print_error(f"❌ Invalid configuration: {escape(message)}")
        sys.exit(1)
    except (KeyboardInterrupt, EOFError):
        console.print("\n[yellow]👋 Setup cancelled[/yellow]")
        sys.exit(0)

    print_summary_table(_summary(config), title="Project Configuration")

    try:
        asyncio.run(create_project(config))
    except Exception as exc:
        print_error(f"\n❌ Error creating project: {escape(str(exc))}")
        if config.debug:
            console.print(f"[dim]{escape(traceback.format_exc())}[/dim]")
        sys.exit(1)

    print_next_steps(config)


if __name__ == "__main__":
    main()
