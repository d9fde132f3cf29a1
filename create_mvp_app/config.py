"""Feature configuration for a create-mvp-app run.

The :class:`FeatureConfig` is resolved once per invocation (from CLI flags or
interactive prompts) and is immutable afterwards.  Every pipeline step reads
from it; none may change it.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from create_mvp_app.utils import project_name_to_brand_name

PROJECT_NAME_PATTERN = r"^[a-z0-9-]+$"

# Production feature flags, in declaration order.  Generated artefacts that
# depend on several of them (env file blocks, dependency list) follow it.
PRODUCTION_FEATURES: tuple[str, ...] = (
    "caching",
    "background_jobs",
    "webhooks",
    "multi_tenancy",
    "feature_flags",
    "ab_testing",
    "monitoring",
    "analytics",
)


# Variable names as they appear in the generated ``.env.local``.
ENV_VAR_NAMES: dict[str, str] = {
    "clerk_publishable_key": "NEXT_PUBLIC_CLERK_PUBLISHABLE_KEY",
    "clerk_secret_key": "CLERK_SECRET_KEY",
    "supabase_url": "NEXT_PUBLIC_SUPABASE_URL",
    "supabase_anon_key": "NEXT_PUBLIC_SUPABASE_ANON_KEY",
    "upstash_redis_url": "UPSTASH_REDIS_REST_URL",
    "upstash_redis_token": "UPSTASH_REDIS_REST_TOKEN",
    "sentry_dsn": "SENTRY_DSN",
}


class EnvVars(BaseModel):
    """Secret and URL values seeded into ``.env.local``.

    Empty or missing values are never an error: the env file generator emits
    a placeholder instead.
    """

    model_config = ConfigDict(frozen=True)

    clerk_publishable_key: str = ""
    clerk_secret_key: str = ""
    supabase_url: str = ""
    supabase_anon_key: str = ""
    upstash_redis_url: Optional[str] = None
    upstash_redis_token: Optional[str] = None
    sentry_dsn: Optional[str] = None

    @classmethod
    def from_env(cls) -> "EnvVars":
        """Build an ``EnvVars`` from the invoking process's environment.

        Recognised variables (all optional) use the same names as the
        generated ``.env.local``: NEXT_PUBLIC_CLERK_PUBLISHABLE_KEY,
        CLERK_SECRET_KEY, NEXT_PUBLIC_SUPABASE_URL,
        NEXT_PUBLIC_SUPABASE_ANON_KEY, UPSTASH_REDIS_REST_URL,
        UPSTASH_REDIS_REST_TOKEN, SENTRY_DSN.
        """
        kwargs = {
            field_name: os.environ[env_name]
            for field_name, env_name in ENV_VAR_NAMES.items()
            if os.environ.get(env_name)
        }
        return cls(**kwargs)


class FeatureConfig(BaseModel):
    """Fully resolved description of the project to create."""

    model_config = ConfigDict(frozen=True)

    project_name: str = Field(
        ...,
        pattern=PROJECT_NAME_PATTERN,
        description="Lowercase letters, digits and hyphens; used as the directory name",
    )

    include_auth: bool = Field(default=True, description="Clerk authentication")
    include_db: bool = Field(default=True, description="Supabase database")
    include_ui: bool = Field(default=True, description="Shadcn UI components")
    include_blocks: bool = Field(default=True, description="Shadcn Blocks and landing page")
    include_tests: bool = Field(default=True, description="Vitest + Playwright dev tooling")
    init_git: bool = Field(default=True, description="Initialise a git repository")
    debug: bool = Field(default=False, description="Verbose logs and streamed tool output")

    # Production features
    include_caching: bool = False
    include_background_jobs: bool = False
    include_webhooks: bool = False
    include_multi_tenancy: bool = False
    include_feature_flags: bool = False
    include_ab_testing: bool = False
    include_monitoring: bool = False
    include_analytics: bool = False

    env_vars: EnvVars = Field(default_factory=EnvVars)
    open_in_editor: bool = Field(
        default=False, description="Open the project in Cursor afterwards (no effect on output)"
    )

    # ------------------------------------------------------------------
    # Derived values (read-only properties)
    # ------------------------------------------------------------------

    @property
    def brand_name(self) -> str:
        """Human-readable label derived from the project name."""
        return project_name_to_brand_name(self.project_name)

    @property
    def production_features(self) -> list[str]:
        """Names of the enabled production features, in declaration order."""
        return [name for name in PRODUCTION_FEATURES if getattr(self, f"include_{name}")]

    def target_dir(self, cwd: str | Path) -> Path:
        """Directory the project will be created in, relative to *cwd*."""
        return Path(cwd) / self.project_name
