"""
Layout of the HDF5 result file.

Every diagonalized sector owns one group ``/ed/L{size}_S{magnetization}_K{momentum}``
(or a user-chosen label) holding the spectrum, the eigenvectors in basis-index
coordinates and the representatives that define those coordinates.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Tuple

_SECTOR_RE = re.compile(r"^L(\d+)_S(\d+)_K(\d+)$")


@dataclass(frozen=True)
class HeisenbergHDF5Schema:
    """Group paths and dataset names of one result file."""

    ed_group        : str = "/ed"
    metadata_group  : str = "/metadata"

    # per-sector datasets
    energies        : str = "energies"
    eigenvectors    : str = "eigenvectors"
    residual_norms  : str = "residual_norms"
    basis_states    : str = "basis_states"
    system          : str = "system"

    @property
    def spectral_datasets(self) -> Tuple[str, str, str]:
        """Datasets that exist only for a non-empty factorization."""
        return (self.energies, self.eigenvectors, self.residual_norms)

    def ed_dataset(self, label: str) -> str:
        return f"{self.ed_group}/{label}"

    @staticmethod
    def sector_label(size: int, magnetization: int, momentum: int) -> str:
        """Default label of a sector, e.g. ``L8_S0_K2``."""
        return f"L{size}_S{magnetization}_K{momentum}"

    @staticmethod
    def parse_sector_label(label: str) -> Tuple[int, int, int]:
        """Inverse of :meth:`sector_label`, returns ``(size, magnetization, momentum)``."""
        match = _SECTOR_RE.match(label)
        if match is None:
            raise ValueError(f"Not a sector label: {label!r}")
        size, magnetization, momentum = (int(g) for g in match.groups())
        return size, magnetization, momentum
