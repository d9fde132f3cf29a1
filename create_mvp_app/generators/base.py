"""Common shape of every file generator."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from .templates import TemplateRenderer, write_files


class FileGenerator:
    """Base class for generators producing a fixed set of project files.

    Subclasses implement :meth:`render`, a pure function from its subject
    (usually the :class:`~create_mvp_app.config.FeatureConfig`) to a mapping
    of project-relative paths to file contents.  :meth:`generate` writes that
    mapping under a base path, overwriting existing files.
    """

    def __init__(self, renderer: TemplateRenderer | None = None) -> None:
        self.renderer = renderer or TemplateRenderer()

    def render(self, subject: Any) -> dict[str, str]:
        raise NotImplementedError

    async def generate(self, base_path: str | Path, subject: Any) -> list[Path]:
        """Render for *subject* and write the files under *base_path*."""
        return await write_files(base_path, self.render(subject))
