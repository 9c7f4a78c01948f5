"""
Enumeration of fixed-popcount bit patterns.

The magnetization sector of a chain with ``size`` sites and ``n_up`` spins up is
spanned by all ``size``-bit integers with exactly ``n_up`` set bits. They are
produced one at a time by a successor function, never stored all at once.

---------------------------------------------------
File        : heisenberg_project/hilbert/enumeration.py
Description : Successor function and generator over a magnetization sector.
Date        : 2026-10-17
---------------------------------------------------
"""

from math import comb
from typing import Iterator

import numba

#! sentinel returned past the last configuration
NO_NEXT_STATE = -1

# -------------------------------------------------

@numba.njit(cache=True)
def get_first_state(n_up: int) -> int:
    """State with the lowest ``n_up`` bits set (0 when ``n_up == 0``)."""
    return (1 << n_up) - 1

@numba.njit(cache=True)
def get_next_state(state: int, size: int) -> int:
    """
    Return the configuration following ``state`` within its magnetization sector.

    The bonds ``(i, i+1)`` are scanned from the lowest one (open chain, no wrap).
    Set bits followed by another set bit are cleared and counted; the first set bit
    followed by an empty site is moved up by one and the cleared bits are packed
    back at the bottom.

    Parameters
    ----------
    state : int
        Current configuration (bit 1 = spin up).
    size : int
        Number of sites.

    Returns
    -------
    int
        The next configuration or ``NO_NEXT_STATE`` when ``state`` was the last one.
    """
    count = 0
    for i in range(size - 1):
        i_value = 1 << i
        j_value = 1 << (i + 1)
        if state & i_value:
            if state & j_value:
                state &= ~i_value
                count += 1
            else:
                state ^= i_value + j_value
                state += (1 << count) - 1
                return state
    return NO_NEXT_STATE

def iterate_configurations(size: int, n_up: int) -> Iterator[int]:
    """
    Yield every ``size``-bit configuration with ``n_up`` set bits exactly once.

    The generator starts from `get_first_state` and applies `get_next_state`
    ``comb(size, n_up) - 1`` times.
    """
    if n_up < 0 or n_up > size:
        return
    state = get_first_state(n_up)
    for it in range(comb(size, n_up)):
        if it > 0:
            state = get_next_state(state, size)
        yield state

# ----------------------------------------------------------------

__all__ = [
    "NO_NEXT_STATE",
    "get_first_state",
    "get_next_state",
    "iterate_configurations",
]
