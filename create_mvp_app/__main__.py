"""Allow ``python -m create_mvp_app``."""

from create_mvp_app.cli import main

main()
