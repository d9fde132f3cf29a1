"""Tests for the combined file generation step."""

from __future__ import annotations

from pathlib import Path

import pytest

from create_mvp_app.generators import generate_project_files

pytestmark = [pytest.mark.unit, pytest.mark.asyncio]


def _relative(paths: list[Path], base: Path) -> list[str]:
    return [path.relative_to(base).as_posix() for path in paths]


async def test_default_file_set(make_config, tmp_path: Path):
    written = await generate_project_files(tmp_path, make_config())
    assert _relative(written, tmp_path) == [
        ".prettierrc",
        ".vscode/settings.json",
        ".env.local",
        ".cursorrules",
        "src/app/page.tsx",
    ]


async def test_no_landing_page_without_blocks(make_config, tmp_path: Path):
    written = await generate_project_files(tmp_path, make_config(include_blocks=False))
    assert "src/app/page.tsx" not in _relative(written, tmp_path)
    assert not (tmp_path / "src" / "app" / "page.tsx").exists()


async def test_production_files_included(make_config, tmp_path: Path):
    config = make_config(include_caching=True, include_background_jobs=True, include_monitoring=True)
    written = _relative(await generate_project_files(tmp_path, config), tmp_path)
    for name in (
        "src/lib/redis.ts",
        "src/lib/inngest.ts",
        "sentry.client.config.ts",
        "sentry.server.config.ts",
        "sentry.edge.config.ts",
    ):
        assert name in written


async def test_landing_page_uses_brand_name(make_config, tmp_path: Path):
    await generate_project_files(tmp_path, make_config(project_name="pet-shop"))
    page = (tmp_path / "src" / "app" / "page.tsx").read_text(encoding="utf-8")
    assert 'const brandName = "Pet Shop";' in page


async def test_running_twice_gives_identical_files(make_config, tmp_path: Path):
    config = make_config(include_caching=True, include_webhooks=True)
    first_paths = await generate_project_files(tmp_path, config)
    first = {path: path.read_bytes() for path in first_paths}

    second_paths = await generate_project_files(tmp_path, config)
    assert second_paths == first_paths
    assert {path: path.read_bytes() for path in second_paths} == first
