"""Cancellation and deadline context passed to sequencers.

A ``CancelContext`` is handed from ``Generator.generate`` to
``Sequencer.next`` untouched. Sequencers that block (database round-trips,
HTTP calls) should consult it and give up promptly; in-memory sequencers may
ignore it.

Examples:
    >>> ctx = CancelContext.with_timeout(0.5)
    >>> ctx.check()              # fine while time remains
    >>> ctx.cancel()
    >>> ctx.check()
    Traceback (most recent call last):
    ...
    seqid.core.errors.SequenceCancelled: Sequence request cancelled

    A sequencer using the remaining budget as a driver timeout:

    >>> def next(self, ctx=None):
    ...     ctx = ctx or CancelContext.background()
    ...     ctx.check()
    ...     cursor.execute("SET statement_timeout = %s", (int(ctx.remaining() * 1000),))

Tags:
    cancellation, deadline, timeout, seqid-core
"""

from __future__ import annotations

import math
import threading
import time
from dataclasses import dataclass, field

from seqid.core.errors import DeadlineExceeded, SequenceCancelled


@dataclass
class CancelContext:
    """Deadline and cancel flag for one or more sequence requests.

    Attributes:
        deadline: Absolute deadline on the monotonic clock, or None for no deadline
        timeout_seconds: Original timeout in seconds, if created with one
    """

    deadline: float | None = None
    timeout_seconds: float | None = None
    _cancelled: threading.Event = field(default_factory=threading.Event, repr=False)

    @classmethod
    def background(cls) -> CancelContext:
        """A context that is never cancelled and has no deadline."""
        return cls()

    @classmethod
    def with_timeout(cls, seconds: float) -> CancelContext:
        """A context whose deadline is ``seconds`` from now."""
        if seconds < 0:
            raise ValueError(f"timeout must be non-negative, got {seconds}")
        return cls(deadline=time.monotonic() + seconds, timeout_seconds=seconds)

    def cancel(self) -> None:
        """Cancel the context. Safe to call from any thread, more than once."""
        self._cancelled.set()

    @property
    def cancelled(self) -> bool:
        return self._cancelled.is_set()

    def remaining(self) -> float:
        """Seconds until the deadline; ``inf`` without one, negative once expired."""
        if self.deadline is None:
            return math.inf
        return self.deadline - time.monotonic()

    def is_expired(self) -> bool:
        return self.deadline is not None and time.monotonic() >= self.deadline

    def wait(self, timeout: float | None = None) -> bool:
        """Block until cancelled, the deadline passes, or ``timeout`` elapses.

        Returns:
            True if the context was cancelled or expired while waiting.
        """
        end = math.inf if timeout is None else time.monotonic() + timeout
        while not self._cancelled.is_set():
            budget = min(self.remaining(), end - time.monotonic())
            if budget <= 0:
                break
            self._cancelled.wait(None if budget == math.inf else budget)
        return self.cancelled or self.is_expired()

    def check(self) -> None:
        """Raise if the context was cancelled or its deadline passed.

        Raises:
            SequenceCancelled: If ``cancel()`` was called
            DeadlineExceeded: If the deadline has passed
        """
        if self.cancelled:
            raise SequenceCancelled()
        if self.is_expired():
            raise DeadlineExceeded(self.timeout_seconds)


__all__ = ["CancelContext"]
