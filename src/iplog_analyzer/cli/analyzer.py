#!/usr/bin/env python3
"""
iplog-analyzer - access log hit count reports

Reads an access log, keeps entries inside a date range that match optional
address filters, and writes "<address>: <count>" lines to a report file.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from iplog_analyzer import __version__
from iplog_analyzer.core.config import get_config
from iplog_analyzer.core.exceptions import (
    ConfigurationError,
    EmptyReportError,
    LogReadError,
    ReportWriteError,
)
from iplog_analyzer.service import AnalysisRequest, LogAnalyzerService

logger = logging.getLogger(__name__)

REQUIRED_OPTIONS = ("file_log", "file_output", "time_start", "time_end")


class Colors:
    """ANSI color codes for terminal output."""

    GREEN = "\033[92m"
    YELLOW = "\033[93m"
    RED = "\033[91m"
    RESET = "\033[0m"


def colorize(text: str, color: str) -> str:
    """Colorize text if stdout is a TTY."""
    if sys.stdout.isatty():
        return f"{color}{text}{Colors.RESET}"
    return text


def setup_logging(log_level: str):
    """
    Setup logging configuration.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
    """
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for iplog-analyzer."""
    parser = argparse.ArgumentParser(
        prog="iplog-analyzer",
        allow_abbrev=False,
        description="Count hits per address in an access log",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Log lines look like:
  192.168.1.10: 01.01.2023 10:00:00

Examples:
  iplog-analyzer --file-log access.log --file-output report.txt \\
      --time-start 01.01.2023 --time-end 31.01.2023
  iplog-analyzer --file-log access.log --file-output report.txt \\
      --time-start 01.01.2023 --time-end 31.01.2023 \\
      --address-start 192.168.0.0 --address-mask 255.255.255.0

Environment variables:
  IPLOG_LOG_LEVEL                    # Logging level (default: WARNING)
  IPLOG_LOG_ENCODING                 # Input log encoding (default: utf-8-sig)
  IPLOG_REPORT_ENCODING              # Report encoding (default: utf-8)
        """
    )

    # Every value is optional to argparse: main() checks the required ones so
    # a missing flag or a flag without a value prints usage instead of exiting
    # with an argparse error
    parser.add_argument("--file-log", nargs="?", help="Path to the access log (required)")
    parser.add_argument("--file-output", nargs="?", help="Path of the report to write (required)")
    parser.add_argument(
        "--time-start",
        nargs="?",
        help="Inclusive start date, dd.MM.yyyy (required)"
    )
    parser.add_argument(
        "--time-end",
        nargs="?",
        help="Inclusive end date, dd.MM.yyyy, compared at 00:00:00 (required)"
    )
    parser.add_argument(
        "--address-start",
        nargs="?",
        help="Lower address bound, compared octet by octet"
    )
    parser.add_argument(
        "--address-mask",
        nargs="?",
        help="Address mask; each address octet must only use bits set in the mask"
    )
    parser.add_argument(
        "--log-level",
        nargs="?",
        type=str,
        default=None,
        help="Log level (default: from config)"
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}"
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for iplog-analyzer."""
    parser = create_parser()
    # Unrecognised tokens are ignored
    args, unknown = parser.parse_known_args(argv)

    if any(not getattr(args, name) for name in REQUIRED_OPTIONS):
        print("The log file path, output file path, start date and end date are required.")
        parser.print_usage(sys.stdout)
        return 0

    try:
        config = get_config()
        setup_logging(args.log_level or config.log_level)
    except (ValueError, AttributeError) as e:
        print(colorize(f"✗ Invalid configuration: {e}", Colors.RED), file=sys.stderr)
        return 1

    if unknown:
        logger.warning(f"Ignoring unrecognised arguments: {' '.join(unknown)}")

    request = AnalysisRequest(
        log_file=Path(args.file_log),
        output_file=Path(args.file_output),
        time_start=args.time_start,
        time_end=args.time_end,
        address_start=args.address_start,
        address_mask=args.address_mask,
    )

    try:
        result = LogAnalyzerService(settings=config).run(request)
    except ConfigurationError as e:
        print(colorize(f"✗ Invalid parameters: {e}", Colors.RED))
        return 1
    except LogReadError as e:
        print(colorize(f"✗ Error reading the log file: {e.cause}", Colors.RED))
        return 1
    except EmptyReportError as e:
        print(colorize(f"✗ Nothing to write: {e}", Colors.YELLOW))
        return 1
    except ReportWriteError as e:
        print(colorize(f"✗ Error writing the report: {e.cause}", Colors.RED))
        return 1

    print(colorize(
        f"✓ Wrote {result.distinct_addresses} addresses "
        f"({result.accepted_entries} entries) to {result.output_file}",
        Colors.GREEN,
    ))
    return 0


if __name__ == "__main__":
    sys.exit(main())
