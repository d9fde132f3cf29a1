"""Client stubs for the production features.

Each stub is fixed content; a feature flag only decides whether its files
are written.
"""

from __future__ import annotations

from create_mvp_app.config import FeatureConfig

from .base import FileGenerator

# Sentry needs one init file per Next.js runtime.
SENTRY_RUNTIMES: tuple[str, ...] = ("client", "server", "edge")


class ProductionLibsGenerator(FileGenerator):
    """Writes Redis, Inngest and Sentry client stubs for enabled features."""

    def render(self, subject: FeatureConfig) -> dict[str, str]:
        files: dict[str, str] = {}

        if subject.include_caching:
            files["src/lib/redis.ts"] = self.renderer.render("libs/redis.ts.j2", {})

        if subject.include_background_jobs:
            files["src/lib/inngest.ts"] = self.renderer.render("libs/inngest.ts.j2", {})

        if subject.include_monitoring:
            sentry = self.renderer.render("libs/sentry.config.ts.j2", {})
            for runtime in SENTRY_RUNTIMES:
                files[f"sentry.{runtime}.config.ts"] = sentry

        return files
