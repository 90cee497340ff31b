"""
Luhn digit sum over the decimal digits of an integer.

The checksum is the only arithmetic the validators share. It is kept in its
own module so that ``LuhnValidator`` and the CLI ``checksum`` command compute
exactly the same value.

Manifesto:
    A check digit is only useful if every party computes it identically.
    This module is deliberately tiny and pure:

    - **Pure function:** No state, no I/O, no logging
    - **Integer-only:** Digits are peeled with ``divmod``, never via ``str``
    - **Defined for every int:** Non-positive input yields 0 instead of raising

Architecture:
    ::

        number = 7992739871, digits read least significant first

        digits  1  7  8  9  3  7  2  9  9  7
        double  -  x  -  x  -  x  -  x  -  x
        value   1  5  8  9  3  5  2  9  9  5   (x2, minus 9 if > 9)
        sum = 56  →  checksum = 56 % 10 = 6

Guardrails:
    ❌ DON'T: Feed negative composites and expect a meaningful digit
    ✅ DO: Treat ``checksum(n) == 0`` for ``n <= 0`` as a degenerate result

Tags:
    luhn, checksum, check-digit, mod-10, seqid-core

Doc-Types:
    - API Reference
"""

from __future__ import annotations

from typing import Final

RADIX: Final[int] = 10


def checksum(number: int) -> int:
    """Compute the Luhn digit sum of ``number`` modulo 10.

    Digits are processed from least to most significant. Every second digit,
    starting with the second-least-significant one, is doubled; doubled values
    above 9 have 9 subtracted.

    Args:
        number: The integer to checksum. Values ``<= 0`` yield 0.

    Returns:
        A single digit in ``[0, 9]``.

    Examples:
        >>> checksum(7992739871)
        6
        >>> checksum(0)
        0
        >>> checksum(-42)
        0
    """
    total = 0
    double = False

    while number > 0:
        number, digit = divmod(number, RADIX)

        if double:
            digit *= 2
            if digit > 9:
                digit -= 9

        total += digit
        double = not double

    return total % RADIX


def split_check_digit(number: int) -> tuple[int, int]:
    """Split ``number`` into ``(prefix, last_digit)``.

    Uses truncation toward zero, so for negative input the last digit carries
    the sign of ``number`` (``-15 -> (-1, -5)``), matching fixed-width integer
    arithmetic rather than Python's floor division.
    """
    prefix, last = divmod(abs(number), RADIX)
    if number < 0:
        return -prefix, -last
    return prefix, last


__all__ = ["RADIX", "checksum", "split_check_digit"]
