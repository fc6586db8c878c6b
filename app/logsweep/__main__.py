"""Allow ``python -m logsweep``."""

from logsweep.cli.main import app

app()
