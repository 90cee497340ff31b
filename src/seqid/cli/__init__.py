"""
CLI layer for seqid.

Provides a Typer application that builds a generator from settings and
command-line options. All identifier logic lives in ``seqid.core``; this
package handles only terminal transport.

Entry point::

    seqid --help
"""

from seqid.cli.app import app

__all__ = ["app"]
