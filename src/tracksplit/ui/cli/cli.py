"""Command line interface for tracksplit."""

import sys
from typing import final

from tracksplit.application.services import SplitService
from tracksplit.config import Config, ConfigError
from tracksplit.platform.logging import logger
from tracksplit.shared.errors import TrackSplitError
from tracksplit.ui.cli.args import ArgumentParser, SplitArgs
from tracksplit.ui.cli.display import PlanDisplay, ResultDisplay


@final
class CommandProcessor:
    """Command line interface processor."""

    @staticmethod
    def process_command(args_list: list[str] | None = None) -> None:
        """Process command line arguments and run the split.

        Args:
            args_list: List of command line arguments (for testing).
        """
        result_display = ResultDisplay()
        try:
            args: SplitArgs = ArgumentParser.process_args(args_list)
            service = SplitService(Config.load(), tagger_kind=args.tagger)
            results = service.split(args.to_request())

            if args.dry_run:
                PlanDisplay().show_plan(results)
            else:
                result_display.show_results(results, quiet=args.quiet)

        except (TrackSplitError, ConfigError) as e:
            result_display.show_error(str(e))
            sys.exit(1)
        except KeyboardInterrupt:
            logger.info("\nOperation cancelled by user")
            sys.exit(130)
        except Exception as e:
            logger.debug("An unexpected error occurred", exc_info=True)
            result_display.show_error(str(e) or type(e).__name__)
            sys.exit(1)


def main() -> int:
    """Main entry point.

    Returns:
        int: Process exit code (0 on success). Failures exit through
        ``sys.exit(...)`` before this return is reached.
    """
    CommandProcessor.process_command()
    return 0
