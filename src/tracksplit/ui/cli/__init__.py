"""Command line interface package."""

from tracksplit.ui.cli.cli import CommandProcessor, main

__all__ = ["CommandProcessor", "main"]
