"""
Symmetry-reduced basis of the Heisenberg chain.

The basis of a (magnetization, momentum) sector is built in magnon language:

1. every spin configuration with ``size//2 - magnetization`` spins up is enumerated,
2. a sublattice rotation (XOR with the even-site mask) turns it into a magnon pattern,
3. patterns whose orbit is incompatible with the momentum are skipped,
4. the orbit representative receives the next index if it is not yet present.

A translation by one site maps the rotated sector with ``n`` spins up onto the one
with ``size - n`` spins up, so the magnetization is taken without sign and both
signs share one basis. Enumerating one of them reaches every orbit.

---------------------------------------------------
File        : heisenberg_project/hilbert/basis.py
Description : Basis construction for translation and magnetization sectors.
Date        : 2026-10-17
---------------------------------------------------
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Dict, Iterator, TYPE_CHECKING

import numpy as np

from .binary import get_periodicity, get_state_info
from .enumeration import iterate_configurations

if TYPE_CHECKING:
    from ..models.system import SystemConfig

logger = logging.getLogger(__name__)

####################################################################################################
#! Errors
####################################################################################################

class BasisError(ValueError):
    """Base class for invalid sector requests."""

class InvalidSizeError(BasisError):
    """Requested chain length is odd."""

class InvalidMagnetizationError(BasisError):
    """Requested magnetization sector lies outside ``0..size//2``."""

####################################################################################################
#! Sublattice rotation
####################################################################################################

def sublattice_mask(size: int) -> int:
    """Mask with bits set at every even site."""
    return sum(1 << k for k in range(0, size, 2))

def sublattice_rotation(state: int, mask: int) -> int:
    """Reverse the bits selected by ``mask`` (spin <-> magnon language)."""
    return state ^ mask

####################################################################################################
#! Basis
####################################################################################################

class Basis(Mapping):
    """
    Ordered, read-only mapping ``representative state -> index`` (zero based).

    Iteration follows the insertion order, which is the order in which the
    representatives were first met during the enumeration. Each key is the smallest
    member of its translation orbit and belongs to the momentum sector.

    Example
    -------
        >>> basis = make_basis(SystemConfig(size=4, momentum=0, magnetization=0))
        >>> list(basis.items())
        [(3, 0), (0, 1), (15, 2)]
    """

    def __init__(self, mapping: Dict[int, int], size: int, momentum: int, magnetization: int):
        self._mapping       = dict(mapping)
        self.size           = size
        self.momentum       = momentum
        self.magnetization  = magnetization
        self._states        = np.fromiter(self._mapping.keys(), dtype=np.int64, count=len(self._mapping))

    # ------------------------------------------------------------------

    def __getitem__(self, state: int) -> int:
        return self._mapping[state]

    def __iter__(self) -> Iterator[int]:
        return iter(self._mapping)

    def __len__(self) -> int:
        return len(self._mapping)

    def __repr__(self) -> str:
        return (f"Basis(size={self.size}, momentum={self.momentum}, "
                f"magnetization={self.magnetization}, dim={len(self)})")

    # ------------------------------------------------------------------

    @property
    def dim(self) -> int:
        return len(self._mapping)

    @property
    def states(self) -> np.ndarray:
        """Representatives ordered by their index."""
        return self._states.copy()

    @property
    def periodicities(self) -> np.ndarray:
        """Orbit length of every representative, ordered by index."""
        return np.array([get_periodicity(int(s), self.size) for s in self._states], dtype=np.int64)

    def magnon_configuration(self, index: int) -> int:
        """Representative (magnon language) stored at ``index``."""
        return int(self._states[index])

    def spin_configuration(self, index: int) -> int:
        """Representative at ``index`` rotated back to spin language."""
        return sublattice_rotation(self.magnon_configuration(index), sublattice_mask(self.size))

####################################################################################################
#! Construction
####################################################################################################

def make_basis(system: "SystemConfig") -> Basis:
    """
    Return the basis of the sector given by ``system.magnetization`` and ``system.momentum``.

    Parameters
    ----------
    system : SystemConfig
        Input parameters; only ``size``, ``momentum`` and ``magnetization`` are used.

    Returns
    -------
    Basis
        Mapping from representative state to its position in the basis.

    Raises
    ------
    InvalidSizeError
        If ``system.size`` is odd.
    InvalidMagnetizationError
        If ``system.magnetization`` is outside ``0..system.size//2``.
    """
    size = system.size
    if size % 2 != 0:
        raise InvalidSizeError(f"Requested size {size} is odd! Only even sizes are supported.")
    if system.magnetization < 0 or 2 * system.magnetization > size:
        raise InvalidMagnetizationError(
            f"Wrong magnetization sector {system.magnetization}! "
            f"Possible sectors are denoted by integers from 0 to {size // 2}.")

    # spin up == 1, spin down == 0
    n_up    = size // 2 - system.magnetization
    mask    = sublattice_mask(size)
    mapping : Dict[int, int] = {}

    for state in iterate_configurations(size, n_up):
        # after the rotation 1 stands for a magnon, 0 for an empty site
        magnon_state = sublattice_rotation(state, mask)
        belongs, representative, _, _ = get_state_info(magnon_state, size, system.momentum)
        if belongs and representative not in mapping:
            mapping[representative] = len(mapping)

    basis = Basis(mapping, size, system.momentum, system.magnetization)
    if basis.dim == 0:
        logger.warning("Empty basis for %r", basis)
    else:
        logger.debug("Built %r", basis)
    return basis

# ----------------------------------------------------------------

__all__ = [
    "BasisError",
    "InvalidSizeError",
    "InvalidMagnetizationError",
    "Basis",
    "sublattice_mask",
    "sublattice_rotation",
    "make_basis",
]
