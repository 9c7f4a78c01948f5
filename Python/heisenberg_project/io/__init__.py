"""
I/O utilities for persisting results in a structured HDF5 layout.
"""

from .hdf5_schema import HeisenbergHDF5Schema
from .hdf5_writer import HeisenbergResultWriter

__all__ = ["HeisenbergHDF5Schema", "HeisenbergResultWriter"]
