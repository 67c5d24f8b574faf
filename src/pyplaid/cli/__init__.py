"""pyplaid CLI package.

This package provides a command-line interface for exploring the Plaid API:
institution lookup, transaction streaming and sandbox Item management.
"""

from .main import app, main

__all__ = ["app", "main"]
