"""
Input parameters of the chain.
"""

from .system import ConfigError, SystemConfig, load_system

__all__ = ["ConfigError", "SystemConfig", "load_system"]
