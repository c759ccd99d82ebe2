"""
CLI package for gedcom_reconcile.

Provides the Typer application entrypoint and shared CLI utilities.
"""

from gedcom_reconcile.cli.app import app, main

__all__ = [
    "app",
    "main",
]
