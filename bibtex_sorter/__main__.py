"""Bibtex Sorter - Command Line Interface.

This module provides a command-line interface for the Bibtex Sorter tool.
"""

import argparse
import logging
import os
import sys
from typing import List, Optional

from dotenv import load_dotenv

from . import __version__
from .bibtex_processor import load_entries, sort_bibtex_file
from .clipboard import copy_to_clipboard
from .exceptions import NoEntriesFoundError
from .index import export_index_csv
from .models import ErrorKind
from .sorter import is_sorted

logger = logging.getLogger(__name__)

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(level: Optional[str] = None, log_file: Optional[str] = None) -> None:
    """Configure root logging for the CLI.

    Args:
        level: Logging level name (default: LOG_LEVEL or INFO)
        log_file: Optional file to copy log records to
    """
    level = (level or os.getenv("LOG_LEVEL", "INFO")).upper()
    invalid_level = None
    if not isinstance(logging.getLevelName(level), int):
        invalid_level, level = level, "INFO"

    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(level=level, format=LOG_FORMAT, handlers=handlers, force=True)

    if invalid_level:
        logger.warning(f"Ignoring invalid LOG_LEVEL value {invalid_level!r}; using INFO")


def parse_args(args: List[str]) -> argparse.Namespace:
    """Parse command line arguments.

    Args:
        args: Command line arguments

    Returns:
        Parsed arguments
    """
    parser = argparse.ArgumentParser(description='Bibtex Sorter - Sort BibTeX entries by citation key')
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    subparsers = parser.add_subparsers(dest='command', help='Command to run')

    # Sort command
    sort_parser = subparsers.add_parser('sort', help='Sort the entries of a BibTeX file')
    sort_parser.add_argument('input', type=str, nargs='?', default='-',
                             help="Input BibTeX file ('-' or omitted reads stdin)")
    output_group = sort_parser.add_mutually_exclusive_group()
    output_group.add_argument('--output', '-o', type=str,
                              help='Output file (default: stdout)')
    output_group.add_argument('--in-place', '-i', action='store_true',
                              help='Rewrite the input file with the sorted entries')
    sort_parser.add_argument('--copy', action='store_true',
                             help='Also copy the sorted text to the clipboard')
    sort_parser.add_argument('--index-csv', type=str,
                             help='Write a CSV index of the sorted keys to this path')

    # Check command
    check_parser = subparsers.add_parser(
        "check",
        help="Check whether a BibTeX file is already sorted"
    )
    check_parser.add_argument(
        "input",
        nargs="?",
        default="-",
        help="Input BibTeX file ('-' or omitted reads stdin)"
    )

    # Dashboard command
    dashboard_parser = subparsers.add_parser(
        "dashboard",
        help="Launch the web page"
    )
    dashboard_parser.add_argument(
        "--port",
        type=int,
        default=None,
        help="Port to run the dashboard on (default: DASHBOARD_PORT or 8050)"
    )
    dashboard_parser.add_argument(
        "--debug",
        action="store_true",
        help="Run in debug mode"
    )

    # If no arguments provided, show help
    if len(args) == 0:
        parser.print_help()
        sys.exit(0)

    return parser.parse_args(args)


def sort_command(args: argparse.Namespace) -> int:
    """Handle the sort command.

    Args:
        args: Parsed command line arguments

    Returns:
        Process exit code
    """
    if args.in_place and args.input == '-':
        logger.error("--in-place needs an input file")
        return 2

    destination = args.input if args.in_place else args.output
    try:
        result = sort_bibtex_file(args.input, destination)
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Cannot process {args.input}: {e}")
        return 2

    if result.error == ErrorKind.EMPTY_INPUT:
        logger.info("Input is empty; nothing to sort")
        return 0
    if not result.ok:
        logger.error(result.message)
        return 1

    if not destination:
        sys.stdout.write(result.rendered_text + "\n")

    if args.index_csv:
        try:
            export_index_csv(result.entries, args.index_csv)
        except OSError as e:
            logger.error(f"Cannot write key index {args.index_csv}: {e}")
            return 2
        logger.info(f"Key index saved to {args.index_csv}")

    if args.copy:
        copied = copy_to_clipboard(result.rendered_text)
        if copied.success:
            logger.info("Sorted text copied to clipboard")

    return 0


def check_command(args: argparse.Namespace) -> int:
    """Handle the check command.

    Args:
        args: Parsed command line arguments

    Returns:
        0 if the file is sorted, 1 if not or if it holds no entries, 2 if unreadable
    """
    try:
        entries = load_entries(args.input)
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Cannot read {args.input}: {e}")
        return 2
    except NoEntriesFoundError as e:
        logger.error(str(e))
        return 1

    if not entries:
        print(f"✓ {args.input}: No entries to sort")
        return 0

    if is_sorted(entries):
        print(f"✓ {args.input}: Already sorted ({len(entries)} entries)")
        return 0

    print(f"✗ {args.input}: Not sorted ({len(entries)} entries)")
    return 1


def dashboard_command(args: argparse.Namespace) -> int:
    """Handle the dashboard command.

    Args:
        args: Parsed command line arguments
    """
    from .dashboard import run_dashboard

    run_dashboard(debug=args.debug, port=args.port)
    return 0


def main() -> None:
    """Main entry point for the Bibtex Sorter CLI."""
    # Load environment variables
    load_dotenv()

    # Parse command line arguments
    args = parse_args(sys.argv[1:])

    # Configure logging
    setup_logging(log_file=os.getenv("BIBTEX_SORTER_LOG_FILE"))

    # Execute the appropriate command
    if args.command == "sort":
        exit_code = sort_command(args)
    elif args.command == "check":
        exit_code = check_command(args)
    elif args.command == "dashboard":
        exit_code = dashboard_command(args)
    else:
        logger.error(f"Unknown command: {args.command}")
        exit_code = 1

    sys.exit(exit_code)

if __name__ == "__main__":
    main()
