"""Command line argument parser."""

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import NoReturn, final

from tracksplit.config import Config
from tracksplit.features.splitting import TaggerKind
from tracksplit.platform.logging import setup_logger
from tracksplit.ui.cli.args.options import SplitArgs

_REQUIRED_FLAGS: tuple[str, ...] = ("filename", "timecodes", "artist", "album")


@final
class ArgumentParser:
    """Command line argument parser."""

    @staticmethod
    def create_parser() -> argparse.ArgumentParser:
        """Create argument parser.

        Both the single-dash (``-filename``) and double-dash (``--filename``)
        spellings are accepted for the core flags.

        Returns:
            argparse.ArgumentParser: Configured argument parser.
        """
        parser = argparse.ArgumentParser(
            prog="tracksplit",
            description=(
                "Split one audio recording into tagged tracks using a list of "
                "'HH:MM:SS Title' timecodes."
            ),
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )

        _ = parser.add_argument(
            "-filename",
            "--filename",
            dest="filename",
            default="",
            help="Path to the audio file",
            metavar="PATH",
        )
        _ = parser.add_argument(
            "-timecodes",
            "--timecodes",
            dest="timecodes",
            default="",
            help="Path to the timecodes file",
            metavar="PATH",
        )
        _ = parser.add_argument(
            "-artist",
            "--artist",
            dest="artist",
            default="",
            help="Album artist",
        )
        _ = parser.add_argument(
            "-album",
            "--album",
            dest="album",
            default="",
            help="Album name",
        )
        _ = parser.add_argument(
            "--output-dir",
            type=str,
            default=None,
            help="Directory under which Artist/Album is created (defaults to the current directory)",
            metavar="DIR",
        )
        _ = parser.add_argument(
            "--tagger",
            type=str,
            default=None,
            metavar="BACKEND",
            help="Tagging backend: eyed3 or mutagen (defaults to the configured value)",
        )
        _ = parser.add_argument(
            "--dry-run",
            action="store_true",
            help="Show the planned tracks without cutting or tagging",
        )
        _ = parser.add_argument(
            "--verbose",
            action="store_true",
            help="Show detailed processing information",
        )
        _ = parser.add_argument(
            "--quiet",
            action="store_true",
            help="Suppress all output except errors",
        )

        return parser

    @staticmethod
    def process_args(args_list: Sequence[str] | None = None) -> SplitArgs:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            SplitArgs: Processed command line arguments.

        Raises:
            SystemExit: With status 1 when a required flag is missing or an
                option value is invalid.
        """
        parser = ArgumentParser.create_parser()
        parsed_args = parser.parse_args(args_list)

        if parsed_args.quiet:
            log_level = logging.ERROR
        elif parsed_args.verbose:
            log_level = logging.DEBUG
        else:
            log_level = logging.INFO

        configuration = Config.load()
        _ = setup_logger(log_file=configuration.log_file, console_level=log_level)

        missing = [flag for flag in _REQUIRED_FLAGS if not getattr(parsed_args, flag)]
        if missing:
            ArgumentParser._fail(
                parser, f"missing required flags: {', '.join('-' + flag for flag in missing)}"
            )

        tagger: TaggerKind | None = None
        if parsed_args.tagger is not None:
            try:
                tagger = TaggerKind.from_user_input(parsed_args.tagger)
            except ValueError as e:
                ArgumentParser._fail(parser, str(e))

        output_root = Path(parsed_args.output_dir) if parsed_args.output_dir else Path()

        return SplitArgs(
            audio_file=Path(parsed_args.filename),
            timecodes_file=Path(parsed_args.timecodes),
            artist=parsed_args.artist,
            album=parsed_args.album,
            output_root=output_root,
            dry_run=parsed_args.dry_run,
            verbose=parsed_args.verbose,
            quiet=parsed_args.quiet,
            tagger=tagger,
        )

    @staticmethod
    def _fail(parser: argparse.ArgumentParser, message: str) -> NoReturn:
        parser.print_usage(sys.stdout)
        print(f"error: {message}")
        sys.exit(1)


__all__ = ["ArgumentParser"]
