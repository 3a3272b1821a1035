"""
Command Line Interface for zip-unpack.

Extracts a ZIP archive into a directory, optionally showing progress.
"""

import argparse
import sys
from typing import List, Optional

from .cli_helpers import exit_with_error, map_exception_to_exit_code
from .common.config import UnpackSettings
from .common.constants import ExitCodes
from .common.logging_config import configure_logging, get_logger
from .core.extractor import default_destination, extract_path
from .core.progress import make_progress


def create_parser() -> argparse.ArgumentParser:
    """Create the main argument parser."""
    parser = argparse.ArgumentParser(
        prog='zip-unpack',
        description='Extract a ZIP archive, keeping its directory structure'
    )
    parser.add_argument('archive', help='Path to the ZIP archive to extract')
    parser.add_argument(
        '-o', '--output', dest='output', default=None,
        help='Destination directory (default: sibling directory named after the archive)'
    )
    parser.add_argument(
        '--progress', action=argparse.BooleanOptionalAction, default=None,
        help='Show a progress bar (default: $ZIP_UNPACK_PROGRESS or off)'
    )
    parser.add_argument(
        '--log-level', dest='log_level', default=None,
        help='Log level (default: $ZIP_UNPACK_LOG_LEVEL or INFO)'
    )
    return parser


def run(args: argparse.Namespace, settings: UnpackSettings) -> None:
    """Run one extraction described by parsed arguments."""
    logger = get_logger(__name__)
    destination = args.output or default_destination(args.archive)
    show_progress = settings.progress if args.progress is None else args.progress
    logger.debug("Extracting %s into %s", args.archive, destination)

    try:
        summary = extract_path(
            args.archive,
            destination,
            progress=make_progress(show_progress),
            chunk_size=settings.chunk_size,
        )
    except Exception as exc:
        exit_code = map_exception_to_exit_code(exc)
        if exit_code is None:
            raise
        exit_with_error(str(exc), exit_code)
        return

    print(f"Extracted {summary.written} entries to {destination}")
    if summary.skipped:
        print(f"Skipped {len(summary.skipped)} unsafe entries")


def main(args: Optional[List[str]] = None) -> None:
    """
    Main entry point for the CLI.

    Args:
        args: Command line arguments (uses sys.argv if None)
    """
    parser = create_parser()

    if args is None:
        args = sys.argv[1:]

    # If no arguments provided, show help
    if not args:
        parser.print_help()
        sys.exit(ExitCodes.USAGE_ERROR)

    parsed_args = parser.parse_args(args)
    settings = UnpackSettings.from_env()
    configure_logging(parsed_args.log_level or settings.log_level)

    run(parsed_args, settings)


if __name__ == '__main__':
    main()
