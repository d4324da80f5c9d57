"""
Logging package for ``family_site``.

Modules call ``get_logger(__name__)`` to share the console and master log
handlers and to gain a module-specific log file.
"""

from .logger import (
    get_logger,
    list_active_loggers,
    reset_logging,
)

__all__ = [
    "get_logger",
    "list_active_loggers",
    "reset_logging",
]
