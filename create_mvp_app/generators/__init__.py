"""File generators for the scaffolded project.

Each generator is a pure function of the feature configuration (or, for the
landing page, of the brand label) to a ``{relative_path: content}`` mapping,
plus an async ``generate`` that writes the mapping under a base path.

Quick usage::

    from create_mvp_app.generators import generate_project_files

    written = await generate_project_files(project_root, config)
"""

from __future__ import annotations

from pathlib import Path

from create_mvp_app.config import FeatureConfig

from .base import FileGenerator
from .config_files import ConfigFilesGenerator
from .env_file import EnvFileGenerator
from .landing_page import LandingPageGenerator
from .production_libs import ProductionLibsGenerator
from .rules_file import RulesFileGenerator
from .sections import Section, render_sections
from .templates import TemplateRenderer, write_files


async def generate_project_files(
    base_path: str | Path,
    config: FeatureConfig,
    renderer: TemplateRenderer | None = None,
) -> list[Path]:
    """Write the whole generated file set for *config* under *base_path*.

    The landing page is only written when Shadcn Blocks are selected, since
    it is built from installed blocks.

    Returns:
        Every written path, in generation order.
    """
    renderer = renderer or TemplateRenderer()
    written: list[Path] = []

    written += await ConfigFilesGenerator(renderer).generate(base_path, config)
    written += await EnvFileGenerator(renderer).generate(base_path, config)
    written += await RulesFileGenerator(renderer).generate(base_path, config)
    written += await ProductionLibsGenerator(renderer).generate(base_path, config)

    if config.include_blocks:
        written += await LandingPageGenerator(renderer).generate(base_path, config.brand_name)

    return written


__all__ = [
    "ConfigFilesGenerator",
    "EnvFileGenerator",
    "FileGenerator",
    "LandingPageGenerator",
    "ProductionLibsGenerator",
    "RulesFileGenerator",
    "Section",
    "TemplateRenderer",
    "generate_project_files",
    "render_sections",
    "write_files",
]
