"""Command line interface."""

from monobump.cli.app import app, main

__all__ = ["app", "main"]
