"""``.cursorrules`` generation.

The rules document is an ordered list of :class:`Section` descriptors, each
backed by one template under ``templates/rules/``.  Feature-specific
sections carry a predicate over the :class:`FeatureConfig`; the rest are
always present.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from create_mvp_app.config import FeatureConfig

from .base import FileGenerator
from .sections import Section, always, render_sections
from .templates import TemplateRenderer

RULES_FILE = ".cursorrules"


@dataclass(frozen=True)
class StackItem:
    label: str
    value: str
    include: Callable[[FeatureConfig], bool] = always


TECH_STACK: tuple[StackItem, ...] = (
    StackItem("Framework", "Next.js 15 (App Router)"),
    StackItem("Language", "TypeScript"),
    StackItem("Styling", "Tailwind CSS + Shadcn UI"),
    StackItem("Auth", "Clerk", lambda c: c.include_auth),
    StackItem("Database", "Supabase (PostgreSQL)", lambda c: c.include_db),
    StackItem("Testing", "Vitest + Playwright", lambda c: c.include_tests),
    StackItem("Caching", "Upstash Redis", lambda c: c.include_caching),
    StackItem("Background Jobs", "Inngest", lambda c: c.include_background_jobs),
    StackItem("Monitoring", "Sentry", lambda c: c.include_monitoring),
)

# (section name, template, inclusion predicate), in document order.
RULE_SECTIONS: tuple[tuple[str, str, Callable[[FeatureConfig], bool]], ...] = (
    ("overview", "rules/overview.md.j2", always),
    ("tech-stack", "rules/tech_stack.md.j2", always),
    ("architecture", "rules/architecture.md.j2", always),
    ("code-style", "rules/code_style.md.j2", always),
    ("nextjs-patterns", "rules/nextjs.md.j2", always),
    ("authentication", "rules/auth.md.j2", lambda c: c.include_auth),
    ("database", "rules/database.md.j2", lambda c: c.include_db),
    ("caching", "rules/caching.md.j2", lambda c: c.include_caching),
    ("performance", "rules/performance.md.j2", always),
    ("commands", "rules/commands.md.j2", always),
    ("checklist", "rules/checklist.md.j2", always),
)


def build_rules_context(config: FeatureConfig) -> dict[str, Any]:
    return {
        "project_name": config.project_name,
        "brand_name": config.brand_name,
        "tech_stack": [item for item in TECH_STACK if item.include(config)],
        "include_tests": config.include_tests,
    }


class RulesFileGenerator(FileGenerator):
    """Writes the AI-assistant rules file (``.cursorrules``)."""

    def __init__(self, renderer: TemplateRenderer | None = None) -> None:
        super().__init__(renderer)
        self.sections = [
            Section(name, self._template_content(template), include)
            for name, template, include in RULE_SECTIONS
        ]

    def _template_content(self, template: str) -> Callable[[FeatureConfig], str]:
        def content(config: FeatureConfig) -> str:
            return self.renderer.render(template, build_rules_context(config))

        return content

    def render(self, subject: FeatureConfig) -> dict[str, str]:
        return {RULES_FILE: render_sections(self.sections, subject)}
