"""Allow running as ``python -m reaper``."""

from reaper.cli.main import app

app(prog_name="reaper")
