"""Command-line interface for Fret Log."""

from .main import main

__all__ = ["main"]
