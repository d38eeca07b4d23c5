
"""
CLI package for craft_beer.

Provides the Typer application entrypoint and shared CLI utilities.
"""

from craft_beer.cli.app import app, main

__all__ = [
    "app",
    "main",
]
