"""
Cyclic bit translations of L-bit integer states.

A state of the chain is stored as an integer whose bit ``i`` describes site ``i``.
Translation by one site is a cyclic rotation of the lowest ``size`` bits. On top
of that primitive this module provides the orbit quantities used to classify
states into momentum sectors:

- periodicity       : smallest p > 0 with T^p |s> = |s> (p always divides L)
- representative    : smallest integer within the translation orbit
- state info        : all of the above plus the distance to the representative

All functions are compiled with numba, the state is a plain int64.

---------------------------------------------------
File        : heisenberg_project/hilbert/binary.py
Description : Cyclic bit translations and orbit classification.
Date        : 2026-10-17
---------------------------------------------------
"""

import numba

####################################################################################################
#! Translations
####################################################################################################

@numba.njit(cache=True)
def bitmov(state: int, size: int, forward: bool = False) -> int:
    """
    Cyclic bit shift for translations with periodic boundary conditions.

    Parameters
    ----------
    state : int
        Value whose binary representation is shifted.
    size : int
        Size of the cycle (number of bits).
    forward : bool
        ``True`` moves every bit one position up (~ multiplication by 2),
        ``False`` moves it one position down (~ division by 2). Both keep the
        periodic boundary conditions within ``size`` bits.

    Returns
    -------
    int
        The translated state.
    """
    highest_bit     = 1 << (size - 1)
    if forward:
        highest_value = (1 << size) - 1
        return 2 * state - (state // highest_bit) * highest_value
    return state // 2 + (state % 2) * highest_bit

@numba.njit(cache=True)
def get_periodicity(state: int, size: int) -> int:
    """Return the smallest positive number of translations mapping ``state`` onto itself."""
    translated  = bitmov(state, size, False)
    periodicity = 1
    while translated != state:
        translated   = bitmov(translated, size, False)
        periodicity += 1
    return periodicity

@numba.njit(cache=True)
def get_representative(state: int, size: int) -> int:
    """
    Return the representative of ``state``: the cyclic translation of ``state``
    with the smallest integer value.
    """
    result      = state
    translated  = state
    for _ in range(size - 1):
        translated = bitmov(translated, size, False)
        if translated < result:
            result = translated
    return result

@numba.njit(cache=True)
def has_momentum(state: int, size: int, momentum: int) -> bool:
    """Check whether ``state`` survives the projection onto momentum sector ``momentum``."""
    # L must divide momentum times periodicity
    return (momentum * get_periodicity(state, size)) % size == 0

@numba.njit(cache=True)
def get_state_info(state: int, size: int, momentum: int):
    """
    Combine `has_momentum`, `get_representative` and `get_periodicity` in a single pass.

    Parameters
    ----------
    state : int
        State in binary representation.
    size : int
        Number of sites.
    momentum : int
        Momentum sector index, k = 2*pi*momentum/size.

    Returns
    -------
    tuple
        ``(belongs, representative, periodicity, distance)`` where ``distance`` is the
        number of backward translations after which the representative is first met.
    """
    representative  = state
    translated      = bitmov(state, size, False)
    distance        = 0
    periodicity     = 1
    while translated != state:
        if translated < representative:
            representative  = translated
            distance        = periodicity
        periodicity += 1
        translated   = bitmov(translated, size, False)

    belongs = (momentum * periodicity) % size == 0
    return belongs, representative, periodicity, distance

####################################################################################################
#! Bit helpers
####################################################################################################

@numba.njit(cache=True)
def get_bit(state: int, site: int) -> int:
    """Return the occupation (0 or 1) of ``site`` in ``state``."""
    return (state >> site) & 1

@numba.njit(cache=True)
def popcount(state: int) -> int:
    """Number of set bits of a non-negative state."""
    count = 0
    while state:
        state &= state - 1
        count += 1
    return count

def int2binstr(state: int, size: int) -> str:
    """String of ``size`` bits, site 0 rightmost."""
    return format(state, f"0{size}b")

# ----------------------------------------------------------------

__all__ = [
    "bitmov",
    "get_periodicity",
    "get_representative",
    "has_momentum",
    "get_state_info",
    "get_bit",
    "popcount",
    "int2binstr",
]
