"""
Main workflow for the Heisenberg chain diagonalization.

This script coordinates:
1. Reading the system parameters (JSON file, mapping or command line)
2. Building the basis of the requested (magnetization, momentum) sector
3. Assembling the sparse Hamiltonian
4. Computing the lowest eigenpairs and, optionally, storing them in HDF5
"""
from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Any, List, Mapping, Optional, Tuple, Union

from ..ed import Factorization, SolverConfig, factorize
from ..hes_globals import configure_logging
from ..hilbert import Basis, make_basis
from ..io import HeisenbergResultWriter
from ..models import SystemConfig, load_system
from ..operators import make_model

logger = logging.getLogger(__name__)


def run(
    parameters: Union[SystemConfig, Mapping[str, Any], None] = None,
    path: Union[str, Path, None] = None,
    howmany: int = 1,
    solver_config: Optional[SolverConfig] = None,
) -> Tuple[SystemConfig, Basis, Factorization]:
    """
    Run the diagonalization procedure.

    Parameters
    ----------
    parameters : SystemConfig or mapping, optional
        Parameters; a mapping uses the JSON keys (``"system size"``, ...).
    path : str or Path, optional
        JSON input file, read when ``parameters`` is not given.
    howmany : int
        Number of lowest eigenpairs.

    Returns
    -------
    system, basis, factorization
    """
    if isinstance(parameters, SystemConfig):
        system = parameters.validate()
    elif parameters is not None:
        system = SystemConfig.from_dict(parameters)
    elif path is not None:
        system = load_system(path)
    else:
        raise ValueError("Either 'parameters' or 'path' must be provided.")

    basis           = make_basis(system)
    model           = make_model(basis, system)
    factorization   = factorize(model, howmany=howmany, config=solver_config)
    logger.info("Sector L=%d S=%d K=%d: dim=%d, nnz=%d",
                system.size, system.magnetization, system.momentum, len(basis), model.nnz)
    return system, basis, factorization


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Symmetry-reduced exact diagonalization of the Heisenberg chain"
    )

    # Input file or explicit parameters
    parser.add_argument("--input", type=str, default=None, help="JSON input file")
    parser.add_argument("--size", type=int, default=None, help="Number of sites L")
    parser.add_argument("--momentum", type=int, default=0, help="Momentum sector index")
    parser.add_argument("--magnetization", type=int, default=0, help="Magnetization sector (unsigned)")
    parser.add_argument("--coupling", type=float, default=1.0, help="Coupling constant J")
    parser.add_argument("--anisotropy", type=float, default=1.0, help="Anisotropy Delta")
    parser.add_argument("--interaction", type=float, default=1.0, help="Magnon interaction scale")

    # Solver and output
    parser.add_argument("--howmany", type=int, default=1, help="Number of eigenpairs")
    parser.add_argument("--output", type=str, default=None, help="HDF5 output file")
    parser.add_argument("--label", type=str, default=None, help="Group label inside the HDF5 file")
    parser.add_argument("--log-level", type=str, default="INFO", help="Logging level")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Command-line interface for the workflow."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    if args.input is None and args.size is None:
        parser.error("either --input or --size is required")

    if args.input is not None:
        system = load_system(args.input)
    else:
        system = SystemConfig(
            size=args.size,
            momentum=args.momentum,
            magnetization=args.magnetization,
            coupling=args.coupling,
            anisotropy=args.anisotropy,
            interaction=args.interaction,
        )

    system, basis, factorization = run(system, howmany=args.howmany)

    if factorization.empty:
        print(f"Empty sector (dim=0) for {system}")
    else:
        print(f"dim = {len(basis)}")
        for n, value in enumerate(factorization.values):
            print(f"E[{n}] = {value:.12f}  (residual {factorization.info.residual_norms[n]:.2e})")

    if args.output is not None:
        writer = HeisenbergResultWriter(path=Path(args.output))
        writer.write_result(args.label, system, basis, factorization)
        writer.write_metadata({"parameters": system.to_dict()})
        print(f"Results saved to: {writer.path}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
