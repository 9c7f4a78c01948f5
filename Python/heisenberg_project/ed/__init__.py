"""
Exact-diagonalization drivers for the assembled model matrices.
"""

from .lanczos_solver import (
    ConvergenceInfo,
    Factorization,
    LanczosSolver,
    SolverConfig,
    SolverError,
    factorize,
)

__all__ = [
    "ConvergenceInfo",
    "Factorization",
    "LanczosSolver",
    "SolverConfig",
    "SolverError",
    "factorize",
]
