"""Minimal standard (Park-Miller) multiplicative random number generator."""

from __future__ import annotations

from dataclasses import dataclass

_A = 16807
_M = 2147483647
_Q = 127773
_R = 2836
_UINT_MASK = 0xFFFFFFFF


def rand_r(state: int) -> tuple[int, int]:
    """Advance ``state`` one step.

    Returns ``(result, new_state)``, where the result is the new state divided
    by the modulus (integer division).
    """
    seed = state & _UINT_MASK
    hi, lo = divmod(seed, _Q)
    test = _A * lo - _R * hi
    seed = test if test > 0 else test + _M
    return seed // _M, seed


@dataclass
class _Seed:
    value: int = 1


_seed = _Seed()


def rand() -> int:
    """Return the next result from the shared generator."""
    result, _seed.value = rand_r(_seed.value)
    return result


def srand(seed: int) -> None:
    """Reseed the shared generator."""
    _seed.value = seed & _UINT_MASK