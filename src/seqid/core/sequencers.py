"""
In-process sequencer: a bounded, wrapping, lock-protected counter.

``RangeSequencer`` is the reference ``Sequencer``. It hands out
``minimum, minimum + 1, ..., maximum`` and then starts over at ``minimum``.
It never blocks and never raises.

Manifesto:
    - **Owned state:** The counter lives in the instance, never at module level
    - **Minimal critical section:** Read, increment, wrap; nothing else under the lock
    - **Forgiving construction:** Bad bounds are clamped, not rejected

Guardrails:
    ❌ DON'T: Share one RangeSequencer across processes and expect uniqueness
    ✅ DO: Use a database or service sequence when several processes mint ids

    ❌ DON'T: Use a span wider than 10000 with ``Generator`` unless collisions are acceptable
    ✅ DO: Keep ``maximum - minimum + 1 <= 10000``; only the low 4 digits survive composition

Examples:
    >>> seq = RangeSequencer(1, 3)
    >>> [seq.next() for _ in range(4)]
    [1, 2, 3, 1]

    >>> RangeSequencer(5, 2).next()   # minimum clamped to maximum
    2

Tags:
    sequencer, counter, thread-safe, seqid-core
"""

from __future__ import annotations

import threading
from typing import TYPE_CHECKING

from seqid.core.logging import get_logger

if TYPE_CHECKING:
    from seqid.core.context import CancelContext

logger = get_logger(__name__)


class RangeSequencer:
    """Thread-safe cyclic counter over ``[minimum, maximum]``.

    Args:
        minimum: Lowest value handed out. Clamped to ``maximum`` if larger.
        maximum: Highest value handed out before wrapping.
        initial: First value handed out. Ignored unless within the bounds.
    """

    def __init__(self, minimum: int, maximum: int, initial: int | None = None):
        if minimum > maximum:
            logger.warning("range_sequencer_clamped", minimum=minimum, maximum=maximum)
            minimum = maximum

        self._lock = threading.Lock()
        self._min = minimum
        self._max = maximum

        if initial is not None and minimum <= initial <= maximum:
            self._current = initial
        else:
            self._current = minimum

    @property
    def minimum(self) -> int:
        return self._min

    @property
    def maximum(self) -> int:
        return self._max

    @property
    def span(self) -> int:
        """Number of distinct values before the counter wraps."""
        return self._max - self._min + 1

    @property
    def current(self) -> int:
        """The value the next call to ``next`` will return."""
        with self._lock:
            return self._current

    def next(self, ctx: CancelContext | None = None) -> int:
        """Return the current value and advance, wrapping past ``maximum``.

        ``ctx`` is accepted for protocol compatibility and ignored: nothing
        here blocks.
        """
        with self._lock:
            value = self._current
            self._current += 1
            if self._current > self._max:
                self._current = self._min
            return value

    def __repr__(self) -> str:
        return f"RangeSequencer(minimum={self._min}, maximum={self._max})"


__all__ = ["RangeSequencer"]
