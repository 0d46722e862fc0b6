"""
partmerge CLI Package

Command line interface built on Typer and rich.
"""

from partmerge.cli.typer_app import app

__all__ = ["app"]
