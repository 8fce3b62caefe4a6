"""Byte-order reversal instructions of the Cortex-M core."""

from __future__ import annotations

import operator

_UINT_MASK = 0xFFFFFFFF
_HALF_MASK = 0xFFFF


def _word(value: int) -> int:
    return operator.index(value) & _UINT_MASK


def rev(value: int) -> int:
    """Reverse the byte order of a 32-bit value."""
    return int.from_bytes(_word(value).to_bytes(4, "little"), "big")


def rev16(value: int) -> int:
    """Reverse the byte order within each 16-bit halfword of a 32-bit value."""
    word = _word(value)
    return ((word & 0x00FF00FF) << 8) | ((word >> 8) & 0x00FF00FF)


def revsh(value: int) -> int:
    """Reverse the bytes of the low halfword and sign-extend it to 32 bits.

    The result is returned as a signed integer.
    """
    half = rev16(value) & _HALF_MASK
    return half - 0x10000 if half & 0x8000 else half