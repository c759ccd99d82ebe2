"""
Logging package for ``gedcom_reconcile``.

Modules call ``get_logger(__name__)`` to share the console and master-log
handlers and to get a module-specific log file.
"""

from .logger import get_logger

__all__ = ["get_logger"]
