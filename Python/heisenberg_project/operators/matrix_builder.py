"""
Sparse matrix assembly in a symmetry-reduced basis.

Every basis state contributes ``size + 1`` triplets (row, column, value). Several
bonds can reach the same representative, so duplicate positions are summed when
the COO triplets are converted to CSR; exact zeros are dropped afterwards.

--------------------------------------------------------------------------------------------
file        : heisenberg_project/operators/matrix_builder.py
description : Triplet buffers and CSR assembly of operator matrices
date        : 2026-10-17
--------------------------------------------------------------------------------------------
"""

from    __future__ import annotations
import  logging
from    typing import Optional, Tuple, TYPE_CHECKING

import  numpy as np
import  scipy.sparse as sp

from    .hamiltonian import Operator, act, hamiltonian

if TYPE_CHECKING:
    from ..hilbert.basis import Basis
    from ..models.system import SystemConfig

logger = logging.getLogger(__name__)

# ------------------------------------------------------------------------------------------
#! Triplets
# ------------------------------------------------------------------------------------------

def build_triplets(
        basis       : "Basis",
        system      : "SystemConfig",
        operator    : Optional[Operator] = None,
    ) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """
    Collect the raw (row, column, value) buffers of ``operator`` in ``basis``.

    Parameters
    ----------
    basis : Basis
        Basis of the sector.
    system : SystemConfig
        Model parameters.
    operator : Operator, optional
        Operator callable, defaults to `hamiltonian`.

    Returns
    -------
    rows, cols, values : np.ndarray
        Buffers of length ``len(basis) * (system.size + 1)``; row ``k`` of the
        buffers holds slot ``k % (size + 1)`` of state ``k // (size + 1)``.
    """
    operator    = operator or hamiltonian
    width       = system.size + 1
    n_entries   = width * len(basis)
    rows        = np.empty(n_entries, dtype=np.int64)
    cols        = np.empty(n_entries, dtype=np.int64)
    values      = np.empty(n_entries, dtype=np.complex128)

    for state, index in basis.items():
        combination         = act(operator, state, basis, system)
        start               = index * width
        rows[start:start + width]   = index
        cols[start:start + width]   = [basis[int(target)] for target in combination.states]
        values[start:start + width] = combination.coefficients
    return rows, cols, values

# ------------------------------------------------------------------------------------------
#! Matrix
# ------------------------------------------------------------------------------------------

def make_model(
        basis       : "Basis",
        system      : "SystemConfig",
        operator    : Optional[Operator] = None,
    ) -> sp.csr_matrix:
    """
    Return the sparse matrix of ``operator`` (the Hamiltonian by default) in ``basis``.

    The matrix is square of dimension ``len(basis)``, complex, with duplicates summed
    and explicit zeros removed. An empty basis gives a well-formed 0x0 matrix.
    """
    dim                 = len(basis)
    rows, cols, values  = build_triplets(basis, system, operator)
    model               = sp.coo_matrix((values, (rows, cols)), shape=(dim, dim), dtype=np.complex128).tocsr()
    model.eliminate_zeros()
    logger.debug("Assembled model: dim=%d, nnz=%d", dim, model.nnz)
    return model

# ----------------------------------------------------------------

__all__ = [
    "build_triplets",
    "make_model",
]
