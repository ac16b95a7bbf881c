"""CLI module for angle tools.

Provides the `dms` command-line interface for parsing, formatting and
classifying angles.
"""

from geo_dms.cli.main import app

__all__ = ["app"]
