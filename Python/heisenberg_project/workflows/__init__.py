"""
End-to-end drivers: parameters -> basis -> model -> eigenpairs.
"""

from .main_workflow import main, run

__all__ = ["main", "run"]
