"""Formatter and editor configuration files."""

from __future__ import annotations

import json
from typing import Any

from .base import FileGenerator

PRETTIER_CONFIG: dict[str, Any] = {
    "semi": True,
    "trailingComma": "es5",
    "singleQuote": False,
    "printWidth": 80,
    "tabWidth": 2,
    "useTabs": False,
}

VSCODE_SETTINGS: dict[str, Any] = {
    "editor.formatOnSave": True,
    "editor.defaultFormatter": "esbenp.prettier-vscode",
    "editor.codeActionsOnSave": {
        "source.fixAll.eslint": "explicit",
    },
    "typescript.tsdk": "node_modules/typescript/lib",
    "typescript.enablePromptUseWorkspaceTsdk": True,
    "files.associations": {
        "*.css": "tailwindcss",
    },
    # Tailwind IntelliSense inside cva(...) and cn(...) calls.
    "tailwindCSS.experimental.classRegex": [
        ["cva\\(([^)]*)\\)", "[\"`]([^\"`]*).*?[\"`]"],
        ["cn\\(([^)]*)\\)", "[\"`]([^\"`]*).*?[\"`]"],
    ],
}


def _dump(data: dict[str, Any]) -> str:
    return json.dumps(data, indent=2) + "\n"


class ConfigFilesGenerator(FileGenerator):
    """Writes ``.prettierrc`` and ``.vscode/settings.json``.

    The content is the same for every configuration.
    """

    def render(self, subject: Any = None) -> dict[str, str]:
        return {
            ".prettierrc": _dump(PRETTIER_CONFIG),
            ".vscode/settings.json": _dump(VSCODE_SETTINGS),
        }
