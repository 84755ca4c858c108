"""Allow running molt as ``python -m molt``."""

from molt.cli.main import app

app()
