"""
Copyright (c) 2026, the ecdomain developers
See LICENSE for details

Integer helpers for curve arithmetic. Python ints are arbitrary precision, so
these only pin down the sign and parsing rules the curve code relies on.
"""

import string

from ecdomain import CurveConstructionError, ECDomainError


HEX_DIGITS = frozenset(string.hexdigits)


def modulo(x: int, n: int) -> int:
    """
    The least non-negative residue of x modulo n.

    Python's % takes the sign of the divisor, so for a positive modulus the
    result is in [0, n) for negative dividends too. A non-positive modulus is
    rejected rather than allowed to produce a non-positive remainder.

    Args:
        x: The dividend. May be negative.
        n: The modulus. Must be positive.

    Returns:
        The residue r with 0 <= r < n and r == x (mod n).
    """
    if n <= 0:
        raise ECDomainError(f"modulus must be positive, got {n}")
    return x % n


def fromHex(hx: str) -> int:
    """
    Parse a big-endian hexadecimal string. Unlike int(hx, 16), no prefix,
    sign, whitespace or digit separator is accepted.

    Args:
        hx: The hexadecimal digits, either case.

    Returns:
        The parsed integer.
    """
    if not isinstance(hx, str) or not hx:
        raise CurveConstructionError(f"invalid hex constant {hx!r}")
    if not HEX_DIGITS.issuperset(hx):
        raise CurveConstructionError(f"non-hex character in constant {hx!r}")
    return int(hx, 16)


def hexLength(i: int) -> int:
    """
    The number of hexadecimal digits needed to write the non-negative
    integer i, with 0 written as a single digit.
    """
    if i < 0:
        raise ECDomainError(f"hexLength of negative integer {i}")
    return len(format(i, "x"))
