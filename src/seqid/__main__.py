"""Allow ``python -m seqid``."""

from seqid.cli.app import app

app()
