"""
Identifier generator: elapsed seconds + sequence value, then signed.

Manifesto:
    Order numbers and voucher codes need to be short, roughly time-ordered,
    and typed back in by humans. ``Generator`` builds them from three
    pluggable parts:

    - **Sequencer:** Where the per-second counter comes from
    - **Validator:** How the number is signed (Luhn check digit, or nothing)
    - **Origin:** The epoch the seconds are counted from (shorter ids with a recent origin)

Architecture:
    ::

        generate(ctx)
          │
          ├─ seq = sequencer.next(ctx)          raises → propagated unchanged
          │
          ├─ elapsed   = now - origin           whole seconds
          ├─ composite = elapsed * 10000 + low4(seq)
          │
          └─ return validator.sign(composite)

        e.g. origin=2024-01-01, now=2024-01-01T00:02:03, seq=42, Luhn:
            elapsed=123 → composite=1230042 → signed=12300422

        valid(value) → validator.verify(value)    (signature only; time and
                                                   sequence are not re-derived)

Guardrails:
    ❌ DON'T: Pair a sequencer whose span exceeds 10000 with a busy generator
    ✅ DO: Keep the span <= 10000, or accept that ``seq`` and ``seq + 10000``
       collide when issued in the same second

    ❌ DON'T: Put the origin in the future; composites go negative and the
       Luhn checksum degenerates to 0
    ✅ DO: Use a fixed origin at or before the first id ever issued

    ❌ DON'T: Retry inside a sequencer on behalf of the generator
    ✅ DO: Catch the sequencer's exception at the call site and decide there

Tags:
    generator, identifier, luhn, sequencer, seqid-core

Doc-Types:
    - API Reference
"""

from __future__ import annotations

import time
from collections.abc import Callable
from datetime import datetime
from typing import TYPE_CHECKING, Final

from seqid.core.logging import get_logger
from seqid.core.protocols import Sequencer, Validator
from seqid.core.timestamps import unix_seconds

if TYPE_CHECKING:
    from seqid.core.context import CancelContext

logger = get_logger(__name__)

# Decimal width reserved for the sequence component (4 digits).
SEQUENCE_WIDTH: Final[int] = 10000


def _low_digits(value: int, width: int = SEQUENCE_WIDTH) -> int:
    """``value mod width`` truncated toward zero (sign follows ``value``)."""
    low = abs(value) % width
    return -low if value < 0 else low


class Generator:
    """
    Produces signed identifiers from a sequencer, a validator and an origin.

    Instances are immutable after construction and hold no mutable state of
    their own, so a Generator is as thread-safe as its sequencer.

    Args:
        sequencer: Source of sequence values
        validator: Signs composites and verifies identifiers
        origin: Epoch for the time component. ``None`` means the Unix epoch;
            a datetime is truncated to whole seconds; an int is Unix seconds.
        clock: Returns the current POSIX time; defaults to ``time.time``

    Examples:
        >>> from seqid.core.sequencers import RangeSequencer
        >>> from seqid.core.timestamps import utc_now
        >>> from seqid.core.validators import LuhnValidator
        >>> gen = Generator(RangeSequencer(1, 100), LuhnValidator(), origin=utc_now())
        >>> value = gen.generate()
        >>> gen.valid(value), gen.valid(value + 1)
        (True, False)
    """

    def __init__(
        self,
        sequencer: Sequencer,
        validator: Validator,
        origin: datetime | int | None = None,
        *,
        clock: Callable[[], float] = time.time,
    ):
        self._sequencer = sequencer
        self._validator = validator
        self._origin = 0 if origin is None else unix_seconds(origin)
        self._clock = clock

        span = getattr(sequencer, "span", None)
        if isinstance(span, int) and span > SEQUENCE_WIDTH:
            logger.warning(
                "sequence_span_exceeds_width",
                span=span,
                width=SEQUENCE_WIDTH,
                sequencer=repr(sequencer),
            )

        now = unix_seconds(clock())
        if self._origin > now:
            logger.warning("origin_in_future", origin=self._origin, now=now)

    @property
    def sequencer(self) -> Sequencer:
        return self._sequencer

    @property
    def validator(self) -> Validator:
        return self._validator

    @property
    def origin(self) -> int:
        """Unix seconds the time component is counted from."""
        return self._origin

    def generate(self, ctx: CancelContext | None = None) -> int:
        """Produce a new signed identifier.

        Args:
            ctx: Passed to ``sequencer.next`` untouched

        Returns:
            ``validator.sign((now - origin) * 10000 + low4(seq))``

        Raises:
            Exception: Whatever the sequencer raised, unchanged. Nothing is
                combined or signed in that case.
        """
        try:
            seq = self._sequencer.next(ctx)
        except Exception as e:
            logger.warning(
                "sequence_unavailable",
                sequencer=repr(self._sequencer),
                error_type=type(e).__name__,
                error=str(e),
            )
            raise

        elapsed = unix_seconds(self._clock()) - self._origin
        composite = elapsed * SEQUENCE_WIDTH + _low_digits(seq)
        value = self._validator.sign(composite)

        logger.debug("id_generated", id=value, elapsed=elapsed, seq=seq)
        return value

    def valid(self, value: int) -> bool:
        """Check the signature of ``value`` with the generator's validator."""
        return self._validator.verify(value)

    def __repr__(self) -> str:
        return (
            f"Generator(sequencer={self._sequencer!r}, "
            f"validator={self._validator!r}, origin={self._origin})"
        )


__all__ = ["SEQUENCE_WIDTH", "Generator"]
