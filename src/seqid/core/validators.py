"""
Validator implementations: Luhn check digit and no-op.

``LuhnValidator`` appends one decimal check digit so that a single mistyped
or corrupted digit is detected. ``NoValidator`` keeps the time + sequence
shape of the identifiers but signs nothing.

Manifesto:
    - **Accidental corruption, not forgery:** A check digit is trivially
      recomputed by anyone; it catches typos, not attackers
    - **Stateless:** Validators hold no state, one instance can be shared
      freely across threads and generators

Limitations:
    The Luhn scheme detects every single-digit substitution and most adjacent
    transpositions; it misses the ``09 <-> 90`` transposition and some twin
    errors. This is inherent to the algorithm.

Examples:
    >>> v = LuhnValidator()
    >>> v.sign(123456789)
    1234567893
    >>> v.verify(1234567893)
    True
    >>> v.verify(1234567890)
    False

Tags:
    validator, luhn, check-digit, seqid-core
"""

from __future__ import annotations

from enum import Enum

from seqid.core.checksum import RADIX, checksum, split_check_digit
from seqid.core.protocols import Validator


class LuhnValidator:
    """Validator appending a Luhn check digit."""

    def sign(self, number: int) -> int:
        """Append the check digit that makes ``number`` verify."""
        digit = checksum(number)
        if digit != 0:
            digit = RADIX - digit
        return number * RADIX + digit

    def verify(self, number: int) -> bool:
        """Check the last digit of ``number`` against the checksum of the rest."""
        prefix, last = split_check_digit(number)
        return (last + checksum(prefix)) % RADIX == 0

    def __repr__(self) -> str:
        return "LuhnValidator()"


class NoValidator:
    """Validator that signs nothing and accepts everything."""

    def sign(self, number: int) -> int:
        return number

    def verify(self, number: int) -> bool:
        return True

    def __repr__(self) -> str:
        return "NoValidator()"


class ValidatorKind(str, Enum):
    """Validator names accepted by settings and the CLI."""

    LUHN = "luhn"
    NONE = "none"


_VALIDATORS: dict[ValidatorKind, type] = {
    ValidatorKind.LUHN: LuhnValidator,
    ValidatorKind.NONE: NoValidator,
}


def get_validator(kind: ValidatorKind | str) -> Validator:
    """Build a validator by name.

    Raises:
        ValueError: If ``kind`` is not a known validator name
    """
    return _VALIDATORS[ValidatorKind(kind)]()


__all__ = ["LuhnValidator", "NoValidator", "ValidatorKind", "get_validator"]
