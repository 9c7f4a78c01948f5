"""
Bit-level translations, sector enumeration and the symmetry-reduced basis.
"""

from .binary import bitmov, get_periodicity, get_representative, get_state_info, has_momentum
from .enumeration import NO_NEXT_STATE, get_first_state, get_next_state, iterate_configurations
from .basis import (
    Basis,
    BasisError,
    InvalidMagnetizationError,
    InvalidSizeError,
    make_basis,
    sublattice_mask,
    sublattice_rotation,
)

__all__ = [
    "bitmov",
    "get_periodicity",
    "get_representative",
    "get_state_info",
    "has_momentum",
    "NO_NEXT_STATE",
    "get_first_state",
    "get_next_state",
    "iterate_configurations",
    "Basis",
    "BasisError",
    "InvalidMagnetizationError",
    "InvalidSizeError",
    "make_basis",
    "sublattice_mask",
    "sublattice_rotation",
]
