"""Tests for ``.cursorrules`` generation."""

from __future__ import annotations

from pathlib import Path

import pytest

from create_mvp_app.generators import RulesFileGenerator
from create_mvp_app.generators.rules_file import RULES_FILE, TECH_STACK

pytestmark = pytest.mark.unit


def _render(config) -> str:
    return RulesFileGenerator().render(config)[RULES_FILE]


def _headings(content: str) -> list[str]:
    return [line for line in content.splitlines() if line.startswith("## ")]


# ---------------------------------------------------------------------------
# Structure
# ---------------------------------------------------------------------------


class TestStructure:
    def test_title_uses_project_name(self, make_config):
        content = _render(make_config(project_name="my-awesome-app"))
        assert content.startswith("# my-awesome-app - AI Development Rules\n")
        assert "**My Awesome App**" in content

    def test_default_section_order(self, make_config):
        assert _headings(_render(make_config())) == [
            "## Tech Stack",
            "## Scalable Architecture Guidelines",
            "## Code Style Rules",
            "## Next.js Patterns",
            "## Authentication (Clerk)",
            "## Database (Supabase)",
            "## Performance & Scalability Best Practices",
            "## Commands",
            "## Scalability Checklist",
        ]

    def test_minimal_section_order(self, make_config):
        config = make_config(include_auth=False, include_db=False, include_tests=False)
        assert _headings(_render(config)) == [
            "## Tech Stack",
            "## Scalable Architecture Guidelines",
            "## Code Style Rules",
            "## Next.js Patterns",
            "## Performance & Scalability Best Practices",
            "## Commands",
            "## Scalability Checklist",
        ]

    def test_caching_section_between_database_and_performance(self, make_config):
        headings = _headings(_render(make_config(include_caching=True)))
        index = headings.index("## Caching (Redis)")
        assert headings[index - 1] == "## Database (Supabase)"
        assert headings[index + 1] == "## Performance & Scalability Best Practices"

    def test_always_present_subsections(self, make_config):
        content = _render(make_config(include_auth=False, include_db=False))
        for text in (
            "### File Size Limits",
            "### Service Layer Pattern",
            "### Repository Pattern",
            "Use Server Components by default",
            "### File Naming",
            "### Import Order",
            "### Data Fetching",
            "### Route Handlers",
            "### Code Splitting",
            "### Memoization",
            "### Application Growth Strategy",
            "### When to Refactor",
        ):
            assert text in content

    def test_sections_separated_by_blank_line(self, make_config):
        content = _render(make_config())
        for heading in _headings(content):
            assert f"\n\n{heading}\n" in content
        assert content.endswith("\n")
        assert "\n\n\n" not in content


# ---------------------------------------------------------------------------
# Feature-dependent content
# ---------------------------------------------------------------------------


class TestFeatureContent:
    def test_tech_stack_default(self, make_config):
        content = _render(make_config())
        assert (
            "## Tech Stack\n\n"
            "- **Framework**: Next.js 15 (App Router)\n"
            "- **Language**: TypeScript\n"
            "- **Styling**: Tailwind CSS + Shadcn UI\n"
            "- **Auth**: Clerk\n"
            "- **Database**: Supabase (PostgreSQL)\n"
            "- **Testing**: Vitest + Playwright\n"
        ) in content

    def test_tech_stack_production_entries(self, make_config):
        content = _render(
            make_config(include_caching=True, include_background_jobs=True, include_monitoring=True)
        )
        assert "- **Caching**: Upstash Redis\n" in content
        assert "- **Background Jobs**: Inngest\n" in content
        assert "- **Monitoring**: Sentry\n" in content

    def test_tech_stack_labels_unique(self):
        labels = [item.label for item in TECH_STACK]
        assert len(labels) == len(set(labels))

    def test_auth_section_content(self, make_config):
        content = _render(make_config())
        assert "### Protected Routes" in content
        assert "@clerk/nextjs" in content

    def test_no_auth_mentions_without_auth(self, make_config):
        content = _render(make_config(include_auth=False))
        assert "Clerk" not in content

    def test_database_section_content(self, make_config):
        content = _render(make_config())
        assert "Server-side queries" in content
        assert "createClient" in content

    def test_caching_section_content(self, make_config):
        content = _render(make_config(include_caching=True))
        assert "### Rate Limiting" in content
        assert "### Data Caching" in content
        assert "ratelimit" in content

    def test_test_command_only_with_tests(self, make_config):
        assert "pnpm test        # Run tests\n" in _render(make_config())
        assert "pnpm test" not in _render(make_config(include_tests=False))

    def test_commands_block(self, make_config):
        content = _render(make_config(include_tests=False))
        assert (
            "```bash\n"
            "pnpm dev         # Start development server\n"
            "pnpm build       # Build for production\n"
            "pnpm lint        # Run ESLint\n"
            "```\n"
        ) in content


@pytest.mark.asyncio
async def test_generate_is_deterministic(make_config, tmp_path: Path):
    generator = RulesFileGenerator()
    config = make_config(include_caching=True)
    await generator.generate(tmp_path, config)
    first = (tmp_path / RULES_FILE).read_text(encoding="utf-8")
    await generator.generate(tmp_path, config)
    assert (tmp_path / RULES_FILE).read_text(encoding="utf-8") == first == _render(config)
