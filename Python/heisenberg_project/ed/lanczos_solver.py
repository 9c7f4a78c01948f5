"""
Sparse Lanczos driver for the Hermitian model matrices.

Small problems are diagonalized densely, larger ones with ARPACK through
``scipy.sparse.linalg.eigsh``. An empty model yields the "no result" sentinel
``Factorization(None, None, None)``.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterator, Optional

import numpy as np
import scipy.sparse as sp
import scipy.sparse.linalg as spla

logger = logging.getLogger(__name__)

#! which -> ARPACK keyword
_WHICH = {
    "SR"    : "SA",
    "LR"    : "LA",
}


class SolverError(RuntimeError):
    """Raised when the eigensolver fails."""


@dataclass(frozen=True)
class SolverConfig:
    howmany         : int   = 1
    which           : str   = "SR"
    tol             : float = 1e-10
    max_iter        : Optional[int] = None
    dense_threshold : int   = 64


@dataclass
class ConvergenceInfo:
    converged       : int
    residual_norms  : np.ndarray = field(default_factory=lambda: np.empty(0))
    method          : str = ""


@dataclass
class Factorization:
    """
    Eigenvalues, eigenvectors (columns, basis-index coordinates) and convergence info.

    Unpacks as ``values, vectors, info``; all three are ``None`` for an empty model.
    """

    values          : Optional[np.ndarray]
    vectors         : Optional[np.ndarray]
    info            : Optional[ConvergenceInfo]

    def __iter__(self) -> Iterator:
        return iter((self.values, self.vectors, self.info))

    @property
    def empty(self) -> bool:
        return self.values is None


def _residual_norms(model, values: np.ndarray, vectors: np.ndarray) -> np.ndarray:
    return np.linalg.norm(model @ vectors - vectors * values[np.newaxis, :], axis=0)


def factorize(model, howmany: int = 1, which: str = "SR", config: Optional[SolverConfig] = None) -> Factorization:
    """
    Compute the extremal eigenvalues of ``model`` and their eigenvectors.

    Parameters
    ----------
    model : sparse or dense matrix
        Square Hermitian matrix.
    howmany : int
        Number of eigenpairs, default 1.
    which : str
        ``"SR"`` for the smallest real part (default) or ``"LR"`` for the largest.
    config : SolverConfig, optional
        Tolerances and the dense/sparse switch; its ``howmany`` and ``which`` are
        overridden by the explicit arguments.

    Returns
    -------
    Factorization
        Sorted ascending for ``"SR"``, descending for ``"LR"``.
    """
    config = config or SolverConfig()
    if which not in _WHICH:
        raise ValueError(f"Unsupported 'which': {which!r}, expected one of {sorted(_WHICH)}")
    if howmany < 1:
        raise ValueError(f"'howmany' must be positive, got {howmany}")

    dim = model.shape[0]
    if dim == 0:
        logger.warning("Empty model, nothing to diagonalize")
        return Factorization(None, None, None)

    howmany = min(howmany, dim)
    if dim <= config.dense_threshold or howmany >= dim - 1:
        method          = "numpy.eigh"
        dense           = model.toarray() if sp.issparse(model) else np.asarray(model)
        values, vectors = np.linalg.eigh(dense)
        if which == "LR":
            values, vectors = values[::-1], vectors[:, ::-1]
        values, vectors = values[:howmany], vectors[:, :howmany]
    else:
        method = "scipy.eigsh"
        try:
            values, vectors = spla.eigsh(
                model,
                k       = howmany,
                which   = _WHICH[which],
                tol     = config.tol,
                maxiter = config.max_iter,
            )
        except spla.ArpackError as e:
            raise SolverError(f"Diagonalization failed with method '{method}': {e}") from e
        order           = np.argsort(values)
        if which == "LR":
            order = order[::-1]
        values, vectors = values[order], vectors[:, order]

    residuals = _residual_norms(model, values, vectors)
    tolerance = max(config.tol, 1e-8) * max(1.0, float(np.max(np.abs(values))))
    info      = ConvergenceInfo(
        converged       = int(np.sum(residuals <= tolerance)),
        residual_norms  = residuals,
        method          = method,
    )
    logger.info("Diagonalized dim=%d with %s: E0=%.12f, converged=%d/%d",
                dim, method, values[0], info.converged, howmany)
    return Factorization(values, vectors, info)


class LanczosSolver:
    """
    Stateful wrapper keeping the solver settings next to the model.

    Example
    -------
        >>> solver = LanczosSolver(model, SolverConfig(howmany=3))
        >>> values, vectors, info = solver.run()
    """

    def __init__(self, model, config: Optional[SolverConfig] = None):
        self.model  = model
        self.config = config or SolverConfig()

    def run(self) -> Factorization:
        return factorize(self.model, howmany=self.config.howmany, which=self.config.which, config=self.config)
