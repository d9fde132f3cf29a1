"""``.env.local`` generation.

The Clerk and Supabase keys are always written, whether or not those
features are selected, so the file stays valid when a feature is added
later.  Production features append their own labelled blocks.
"""

from __future__ import annotations

from typing import Any

from create_mvp_app.config import FeatureConfig

from .base import FileGenerator

ENV_FILE = ".env.local"

PLACEHOLDERS: dict[str, str] = {
    "clerk_publishable_key": "pk_test_...",
    "clerk_secret_key": "sk_test_...",
    "supabase_url": "https://your-project.supabase.co",
    "supabase_anon_key": "your-anon-key",
    "upstash_redis_url": "https://your-redis.upstash.io",
    "upstash_redis_token": "your-redis-token",
    "sentry_dsn": "https://your-sentry-dsn@sentry.io/project-id",
}


def build_env_context(config: FeatureConfig) -> dict[str, Any]:
    """Template context: provided values, falling back to placeholders."""
    env = config.env_vars
    context: dict[str, Any] = {
        name: getattr(env, name) or placeholder
        for name, placeholder in PLACEHOLDERS.items()
    }
    context.update(
        include_caching=config.include_caching,
        include_background_jobs=config.include_background_jobs,
        include_webhooks=config.include_webhooks,
        include_feature_flags=config.include_feature_flags,
        include_ab_testing=config.include_ab_testing,
        include_monitoring=config.include_monitoring,
    )
    return context


class EnvFileGenerator(FileGenerator):
    """Writes ``.env.local`` for the selected features."""

    def render(self, subject: FeatureConfig) -> dict[str, str]:
        content = self.renderer.render("env.local.j2", build_env_context(subject))
        return {ENV_FILE: content}
