"""
System parameters of the Heisenberg chain and their JSON loader.

The same parameter set drives the basis construction, the Hamiltonian and the
result writer, so it is kept in one frozen dataclass.
"""
from __future__ import annotations

import json
import logging
import math
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Dict, Mapping, Union

logger = logging.getLogger(__name__)

#! JSON key -> field name
INPUT_KEYS: Dict[str, str] = {
    "system size"           : "size",
    "momentum sector"       : "momentum",
    "magnetization sector"  : "magnetization",
    "coupling constant"     : "coupling",
    "anisotropy"            : "anisotropy",
    "magnon interaction"    : "interaction",
}


class ConfigError(ValueError):
    """Raised when the input parameters cannot describe a chain."""


@dataclass(frozen=True)
class SystemConfig:
    """
    Immutable set of input parameters.

    Attributes
    ----------
    size : int
        Number of lattice sites L.
    momentum : int
        Momentum sector index, k = 2*pi*momentum/size.
    magnetization : int
        Magnetization sector in ``0..size//2``, taken without sign.
    coupling : float
        Coupling constant J; ferromagnet for ``coupling < 0``, antiferromagnet otherwise.
    anisotropy : float
        Anisotropy Delta of the Ising term.
    interaction : float
        Scale of the magnon-magnon interaction; 1.0 gives the pure model.
    """

    size            : int
    momentum        : int   = 0
    magnetization   : int   = 0
    coupling        : float = 1.0
    anisotropy      : float = 1.0
    interaction     : float = 1.0

    @property
    def n_magnons(self) -> int:
        """Number of spins up in the enumerated sector (magnons after rotation)."""
        return self.size // 2 - self.magnetization

    @property
    def momentum_value(self) -> float:
        return 2.0 * math.pi * self.momentum / self.size

    def summary(self) -> Dict[str, Any]:
        return asdict(self)

    def validate(self) -> "SystemConfig":
        """
        Range-check the parameters that the loader is responsible for.

        Parity of ``size`` and the upper bound of ``magnetization`` are checked by
        the basis construction itself.
        """
        if isinstance(self.size, bool) or not isinstance(self.size, int) or self.size <= 0:
            raise ConfigError(f"'size' must be a positive integer, got {self.size!r}")
        for name in ("momentum", "magnetization"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ConfigError(f"'{name}' must be an integer, got {value!r}")
        if not 0 <= self.momentum < self.size:
            raise ConfigError(f"'momentum' must lie in [0, {self.size}), got {self.momentum}")
        if self.magnetization < 0:
            raise ConfigError(f"'magnetization' must be non-negative, got {self.magnetization}")
        for name in ("coupling", "anisotropy", "interaction"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ConfigError(f"'{name}' must be a real number, got {value!r}")
        return self

    # ------------------------------------------------------------------

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "SystemConfig":
        """
        Build a validated config from a mapping.

        Both the JSON keys of `INPUT_KEYS` (``"system size"``, ...) and the field
        names (``"size"``, ...) are accepted.
        """
        kwargs: Dict[str, Any] = {}
        for key, name in INPUT_KEYS.items():
            if key in payload:
                kwargs[name] = payload[key]
            elif name in payload:
                kwargs[name] = payload[name]
            else:
                raise ConfigError(f"Missing input parameter '{key}'")

        for name in ("coupling", "anisotropy", "interaction"):
            if isinstance(kwargs[name], int) and not isinstance(kwargs[name], bool):
                kwargs[name] = float(kwargs[name])
        return cls(**kwargs).validate()

    def to_dict(self) -> Dict[str, Any]:
        """Inverse of `from_dict`, keyed by the JSON names."""
        return {key: getattr(self, name) for key, name in INPUT_KEYS.items()}


def load_system(path: Union[str, Path]) -> SystemConfig:
    """Read a JSON input file and return the validated `SystemConfig`."""
    path = Path(path)
    try:
        with path.open("r", encoding="utf-8") as handle:
            payload = json.load(handle)
    except json.JSONDecodeError as e:
        raise ConfigError(f"Input file '{path}' is not valid JSON: {e}") from e
    if not isinstance(payload, dict):
        raise ConfigError(f"Input file '{path}' must contain a JSON object")
    system = SystemConfig.from_dict(payload)
    logger.debug("Loaded system from %s: %s", path, system)
    return system
