"""Display management for CLI interface."""

from tracksplit.ui.cli.display.plan import PlanDisplay
from tracksplit.ui.cli.display.result import ResultDisplay

__all__ = ["PlanDisplay", "ResultDisplay"]
