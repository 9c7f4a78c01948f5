"""
Operator action on basis states and sparse matrix assembly.
"""

from .hamiltonian import LinearCombination, act, hamiltonian
from .matrix_builder import build_triplets, make_model

__all__ = [
    "LinearCombination",
    "act",
    "hamiltonian",
    "build_triplets",
    "make_model",
]
