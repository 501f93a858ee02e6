"""
Report emitter: writes address hit counts to a text file.
"""

import logging
from pathlib import Path
from typing import Dict, Optional

from iplog_analyzer.core.config import get_config
from iplog_analyzer.core.exceptions import EmptyReportError, ReportWriteError

from .aggregator import to_rows

logger = logging.getLogger(__name__)


class ReportEmitter:
    """
    Writes one "<address>: <count>" line per address.

    An empty mapping is a failure: nothing is written and EmptyReportError
    is raised, so a run with no matches never leaves an empty report behind.
    """

    def __init__(self, encoding: Optional[str] = None):
        """
        Initialize the emitter.

        Args:
            encoding: Report text encoding (default: from config)
        """
        self.encoding = encoding or get_config().report_encoding

    def format_counts(self, counts: Dict[str, int]) -> str:
        """Render the mapping as report text, newline-terminated, in mapping order."""
        return "".join(f"{row.render()}\n" for row in to_rows(counts))

    def write(self, counts: Dict[str, int], output_path: Path) -> Path:
        """
        Write the report.

        Args:
            counts: Address to count mapping in report order
            output_path: Destination file

        Returns:
            The path written

        Raises:
            EmptyReportError: If counts is empty
            ReportWriteError: If the file cannot be written
        """
        if not counts:
            raise EmptyReportError()

        output_path = Path(output_path)
        content = self.format_counts(counts)
        try:
            with open(output_path, "w", encoding=self.encoding, newline="\n") as f:
                f.write(content)
        except (OSError, UnicodeError) as e:
            logger.error(f"Failed to write report to {output_path}: {e}")
            raise ReportWriteError(output_path, e) from e

        logger.info(f"Wrote {len(counts)} addresses to {output_path}")
        return output_path
