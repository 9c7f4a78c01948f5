"""
Shared fixtures for the heisenberg_project test-suite.
"""
import sys
from pathlib import Path

import numpy as np
import pytest

# Allow running the tests from a plain checkout
_PYTHON_ROOT = Path(__file__).resolve().parents[1]
if str(_PYTHON_ROOT) not in sys.path:
    sys.path.insert(0, str(_PYTHON_ROOT))

from heisenberg_project.models import SystemConfig


@pytest.fixture
def scenario_a() -> SystemConfig:
    """L=4, zero magnetization, zero momentum."""
    return SystemConfig(size=4, momentum=0, magnetization=0, coupling=1.0, anisotropy=1.0, interaction=1.0)


@pytest.fixture
def scenario_b() -> SystemConfig:
    """L=4, zero magnetization, momentum index 1."""
    return SystemConfig(size=4, momentum=1, magnetization=0, coupling=1.0, anisotropy=1.0, interaction=1.0)

