"""
Symmetry-reduced exact diagonalization of the one-dimensional Heisenberg chain.

The package builds the basis of a (magnetization, momentum) sector, assembles the
sparse Hamiltonian in that basis and hands it to a Lanczos solver:

    from heisenberg_project import SystemConfig, make_basis, make_model, factorize

    system  = SystemConfig(size=8, momentum=0, magnetization=0)
    basis   = make_basis(system)
    values, vectors, info = factorize(make_model(basis, system))

----------------------------------------------------------
Date            : 2026-10-17
Description     : Heisenberg chain exact diagonalization in momentum sectors.
----------------------------------------------------------
"""

__version__         = "0.1.0"
__description__     = "Symmetry-reduced exact diagonalization of the Heisenberg chain"

__all__ = [
    "SystemConfig",
    "load_system",
    "Basis",
    "make_basis",
    "hamiltonian",
    "make_model",
    "factorize",
    "run",
    "get_logger",
    "configure_logging",
    "__version__",
]

_LAZY_EXPORTS = {
    "SystemConfig"      : ".models",
    "load_system"       : ".models",
    "Basis"             : ".hilbert",
    "make_basis"        : ".hilbert",
    "hamiltonian"       : ".operators",
    "make_model"        : ".operators",
    "factorize"         : ".ed",
    "run"               : ".workflows",
    "get_logger"        : ".hes_globals",
    "configure_logging" : ".hes_globals",
}


def __getattr__(name):
    if name in _LAZY_EXPORTS:
        import importlib

        module = importlib.import_module(_LAZY_EXPORTS[name], __name__)
        return getattr(module, name)
    raise AttributeError(name)
