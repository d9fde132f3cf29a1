"""create-mvp-app: scaffold a production-ready Next.js MVP.

Drives create-next-app, pnpm and the Shadcn CLI to build the project, then
writes configuration, environment, editor-rules and landing-page files
tailored to the selected features.
"""

__version__ = "1.0.0"
