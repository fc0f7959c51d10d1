"""Command line argument handling package."""

from tracksplit.ui.cli.args.options import SplitArgs
from tracksplit.ui.cli.args.parser import ArgumentParser

__all__ = ["ArgumentParser", "SplitArgs"]
