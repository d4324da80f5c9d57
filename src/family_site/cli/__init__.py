
"""
CLI package for family_site.

Provides the Typer application entrypoint and shared CLI utilities.
"""

from family_site.cli.app import app, main

__all__ = [
    "app",
    "main",
]
