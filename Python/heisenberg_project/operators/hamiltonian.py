r"""
Action of the XXZ Hamiltonian on momentum basis states.

After the sublattice rotation the nearest-neighbour Hamiltonian reads

    H = J \sum_{<i,j>} [ 1/2 (b_i b_j + b_i^+ b_j^+)
                         - Delta (1/4 - (n_i + n_j)/2 + alpha n_i n_j) ]

where b_i annihilates a magnon at site i and n_i = b_i^+ b_i. Two neighbouring
sites with equal occupation are flipped together (pair creation/annihilation),
the remaining part is diagonal. ``alpha`` scales the magnon-magnon interaction,
``alpha = 1`` is the pure XXZ chain.

---------------------------------------------------
File        : heisenberg_project/operators/hamiltonian.py
Description : Operator action producing rows of the Hamiltonian matrix.
Date        : 2026-10-17
---------------------------------------------------
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, TYPE_CHECKING

import numpy as np

from ..hilbert.binary import get_periodicity, get_state_info

if TYPE_CHECKING:
    from ..hilbert.basis import Basis
    from ..models.system import SystemConfig

####################################################################################################
#! Linear combination
####################################################################################################

@dataclass
class LinearCombination:
    """
    Result of an operator acting on a basis state.

    Attributes
    ----------
    states : np.ndarray
        Representatives of the resulting states (int64, length ``size + 1``).
    coefficients : np.ndarray
        Complex coefficients multiplying ``states``. Slot 0 holds the diagonal part,
        slot ``i`` the contribution of bond ``(i, i+1)``.
    """

    states          : np.ndarray
    coefficients    : np.ndarray

    @classmethod
    def zeros(cls, state: int, size: int) -> "LinearCombination":
        """Every slot points at ``state`` with a vanishing coefficient."""
        return cls(
            states       = np.full(size + 1, state, dtype=np.int64),
            coefficients = np.zeros(size + 1, dtype=np.complex128),
        )

    def __len__(self) -> int:
        return len(self.states)

Operator = Callable[[int, "Basis", "SystemConfig"], LinearCombination]

####################################################################################################
#! Hamiltonian
####################################################################################################

def hamiltonian(state: int, basis: "Basis", system: "SystemConfig") -> LinearCombination:
    """
    Apply the Hamiltonian to ``state`` written in the momentum ``basis``.

    Parameters
    ----------
    state : int
        Representative state (magnon language).
    basis : Basis
        Basis of the sector built for ``system``.
    system : SystemConfig
        Model parameters.

    Returns
    -------
    LinearCombination
        ``size + 1`` slots; all coefficients vanish if ``state`` is not in ``basis``.
    """
    size    = system.size
    result  = LinearCombination.zeros(state, size)
    if state not in basis:
        return result

    ik          = 2.0j * np.pi * system.momentum / size
    periodicity = get_periodicity(state, size)
    diagonal    = 0.0

    for i in range(size):
        j       = (i + 1) % size
        i_bit   = (state >> i) & 1
        j_bit   = (state >> j) & 1

        if i_bit == j_bit:
            # equal occupations: create or annihilate a pair of magnons
            new_state = state ^ ((1 << i) | (1 << j))
            belongs, rep_state, rep_periodicity, distance = get_state_info(new_state, size, system.momentum)
            # states outside the momentum sector cancel after summing the orbit
            if belongs:
                result.states[i + 1]       = rep_state
                result.coefficients[i + 1] = 0.5 * np.exp(ik * distance) * np.sqrt(periodicity / rep_periodicity)

        diagonal -= (0.25 - 0.5 * (i_bit + j_bit) + system.interaction * i_bit * j_bit) * system.anisotropy

    result.coefficients[0]  = diagonal
    result.coefficients    *= system.coupling
    return result

def act(operator: Operator, state: int, basis: "Basis", system: "SystemConfig") -> LinearCombination:
    """Apply ``operator`` to ``state`` belonging to ``basis``."""
    return operator(state, basis, system)

# ----------------------------------------------------------------

__all__ = [
    "LinearCombination",
    "Operator",
    "hamiltonian",
    "act",
]
