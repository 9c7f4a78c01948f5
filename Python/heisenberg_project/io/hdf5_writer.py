"""
Persist diagonalized sectors into an HDF5 file laid out by HeisenbergHDF5Schema.
"""
from __future__ import annotations

import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import TYPE_CHECKING, Dict, Optional

import h5py
import numpy as np

from .hdf5_schema import HeisenbergHDF5Schema

if TYPE_CHECKING:
    from ..ed.lanczos_solver import Factorization
    from ..hilbert.basis import Basis
    from ..models.system import SystemConfig

logger = logging.getLogger(__name__)


def _store(group: h5py.Group, key: str, data) -> None:
    if key in group:
        del group[key]
    # str goes in as variable-length, h5py rejects numpy unicode arrays
    group.create_dataset(key, data=data if isinstance(data, str) else np.asarray(data))


def _store_mapping(group: h5py.Group, payload: Dict) -> None:
    for key, value in payload.items():
        if isinstance(value, dict):
            _store_mapping(group.require_group(key), value)
        else:
            _store(group, key, value)


class HeisenbergResultWriter:
    """Appends sector results to ``path``; existing groups with the same label are overwritten."""

    def __init__(self, path: Optional[Path] = None, schema: Optional[HeisenbergHDF5Schema] = None):
        self.path   = Path(path or "heisenberg_results.h5")
        self.schema = schema or HeisenbergHDF5Schema()
        self.path.parent.mkdir(parents=True, exist_ok=True)

    def write_result(
        self,
        label: Optional[str],
        system: "SystemConfig",
        basis: "Basis",
        factorization: "Factorization",
    ) -> str:
        """
        Store one diagonalized sector under ``/ed/<label>``.

        Written datasets: ``energies``, ``eigenvectors`` (columns in basis order),
        ``residual_norms``, ``basis_states`` and the ``system`` parameters; the
        number of converged pairs and the solver go to attributes. An empty
        factorization only records ``status = "empty"`` and the system.
        """
        sch     = self.schema
        label   = label or sch.sector_label(system.size, system.magnetization, system.momentum)
        with h5py.File(self.path, "a") as h5:
            grp = h5.require_group(sch.ed_dataset(label))
            grp.attrs["timestamp"]  = datetime.now(timezone.utc).isoformat()
            grp.attrs["dim"]        = len(basis)
            _store_mapping(grp.require_group(sch.system), system.summary())
            _store(grp, sch.basis_states, basis.states)

            values, vectors, info = factorization
            if values is None:
                grp.attrs["status"] = "empty"
                for key in sch.spectral_datasets:
                    if key in grp:
                        del grp[key]
            else:
                grp.attrs["status"]     = "ok"
                grp.attrs["converged"]  = info.converged
                grp.attrs["method"]     = info.method
                _store(grp, sch.energies, values)
                _store(grp, sch.eigenvectors, vectors)
                _store(grp, sch.residual_norms, info.residual_norms)
        logger.info("Wrote sector '%s' to %s", label, self.path)
        return str(self.path)

    def write_metadata(self, payload: Dict[str, object]) -> None:
        """Store run-wide information under ``/metadata/global``."""
        with h5py.File(self.path, "a") as h5:
            _store_mapping(h5.require_group(self.schema.metadata_group).require_group("global"), payload)
