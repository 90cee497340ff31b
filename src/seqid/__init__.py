"""
seqid - compact, self-validating numeric identifiers.

Example:
    import seqid
    from seqid.core.logging import configure_logging

    configure_logging(level="WARNING")
    gen = seqid.Generator(seqid.RangeSequencer(0, 9999), seqid.LuhnValidator())
    order_no = gen.generate()
    assert gen.valid(order_no)

Until ``configure_logging`` is called, structlog's defaults print every
event (including debug ``id_generated``) to stdout.
"""

__version__ = "0.1.0"

from seqid.core import *  # noqa: F401,F403,E402
from seqid.core import __all__ as _core_all  # noqa: E402

__all__ = ["__version__", *_core_all]
