"""
Centralized global singletons for the heisenberg_project package.

Only the package logger lives here. Every module obtains its logger through
`logging.getLogger(__name__)`, so all records propagate to the package logger
returned by `get_logger()`; handlers are attached exactly once per process.

Usage Pattern
-------------
    from heisenberg_project.hes_globals import get_logger, configure_logging

    configure_logging("DEBUG")
    log = get_logger()
    log.info("starting")

!IMPORTANT: Do NOT attach handlers at module import, the first call to
!`configure_logging()` does it.
"""

from __future__ import annotations
from typing import Optional, Union
import logging
import threading

_LOCK               = threading.Lock()

_LOGGER_NAME        = "heisenberg_project"
_LOG_FORMAT         = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
_HANDLER: Optional[logging.Handler] = None

def get_logger() -> logging.Logger:
    """Return the package-level logger."""
    return logging.getLogger(_LOGGER_NAME)

def configure_logging(level: Union[int, str] = logging.INFO) -> logging.Logger:
    """
    Attach a single stream handler to the package logger and set its level.

    Parameters
    ----------
    level : int or str
        Logging level, either numeric or a name such as ``"DEBUG"``.
    """
    global _HANDLER
    logger = get_logger()
    if isinstance(level, str):
        name  = level.upper()
        level = logging.getLevelName(name)
        if not isinstance(level, int):
            raise ValueError(f"Unknown logging level: {name!r}")

    with _LOCK:
        if _HANDLER is None:
            _HANDLER = logging.StreamHandler()
            _HANDLER.setFormatter(logging.Formatter(_LOG_FORMAT))
            logger.addHandler(_HANDLER)
    logger.setLevel(level)
    return logger

# ----------------------------------------------------------------

__all__ = [
    "get_logger",
    "configure_logging",
]

# ----------------------------------------------------------------
#! End of heisenberg_project global singletons
