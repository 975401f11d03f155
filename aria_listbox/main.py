"""Main entry point for the listbox demo."""

import sys
import logging
import argparse
from typing import Optional

from aria_listbox.interface import Interface
from aria_listbox.config import LOG_DATE_FORMAT, LOG_FILE, LOG_FORMAT


def setup_logging(verbose: bool = False, log_file: Optional[str] = None) -> None:
    """Configure logging for the application.

    Args:
        verbose: If True, enable debug logging
        log_file: Write logs to this file instead of stderr
    """
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        filename=log_file,
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT
    )


def main() -> None:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description='Accessible listbox demo - two listboxes in the terminal'
    )
    parser.add_argument(
        '--log-file',
        type=str,
        default=LOG_FILE,
        help='Write logs to this file (default: $ARIA_LISTBOX_LOG_FILE)'
    )
    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Enable verbose logging'
    )

    args = parser.parse_args()

    setup_logging(args.verbose, args.log_file)

    try:
        Interface().run()
    except KeyboardInterrupt:
        print("\nExiting...")
        sys.exit(0)
    except Exception as e:
        logging.error(f"Fatal error: {e}", exc_info=True)
        sys.exit(1)


if __name__ == '__main__':
    main()
