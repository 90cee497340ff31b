"""
Canonical protocol definitions for seqid.

``Generator`` depends on two capabilities only: something that hands out the
next number of a sequence, and something that signs and verifies numbers.
Both are structural protocols, so a database sequence, an HTTP counter
service or a test double satisfies them without inheriting from anything.

Architecture:
    ::

        protocols.py (YOU ARE HERE)
        ├── Sequencer   - next(ctx) -> int            (consumed by Generator)
        └── Validator   - sign(int) -> int, verify(int) -> bool

    Implementations:
        sequencers.py  RangeSequencer
        validators.py  LuhnValidator, NoValidator

Guardrails:
    ❌ DON'T: Signal sequencer failure with a sentinel return value
    ✅ DO: Raise (see seqid.core.errors.SequencerError)

    ❌ DON'T: Keep hidden state in ``Validator.sign``
    ✅ DO: Make ``sign`` a pure function so ``verify(sign(n))`` always holds

Tags:
    protocol, sequencer, validator, seqid-core, contracts

Doc-Types:
    - API Reference
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from seqid.core.context import CancelContext


@runtime_checkable
class Sequencer(Protocol):
    """
    Source of sequence numbers.

    Implementations may perform I/O. They must be safe to call repeatedly and,
    when shared by a concurrent Generator, safe to call from several threads.
    Blocking implementations should honor ``ctx`` and raise
    ``SequenceCancelled`` / ``DeadlineExceeded`` promptly.

    Examples:
        A PostgreSQL sequence:

        >>> class PgSequencer:
        ...     def __init__(self, conn, name):
        ...         self.conn, self.name = conn, name
        ...     def next(self, ctx=None):
        ...         if ctx is not None:
        ...             ctx.check()
        ...         row = self.conn.execute("SELECT nextval(%s)", (self.name,)).fetchone()
        ...         return row[0]
    """

    def next(self, ctx: CancelContext | None = None) -> int:
        """Return the next value of the sequence, or raise."""
        ...


@runtime_checkable
class Validator(Protocol):
    """
    Signs numbers and verifies signed numbers.

    Round-trip law: for every ``x`` returned by ``sign``, ``verify(x)`` is True.
    Both methods must be free of side effects from the caller's perspective.
    """

    def sign(self, number: int) -> int:
        """Return ``number`` with its signature attached."""
        ...

    def verify(self, number: int) -> bool:
        """Return True if ``number`` carries a valid signature."""
        ...


__all__ = ["Sequencer", "Validator"]
