"""
Log analysis service.

Runs one batch pass: read the log, parse, filter, count, write the report.
"""

import logging
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Tuple

from pydantic import BaseModel, Field

from iplog_analyzer.access_logs.models import AddressFilter, ReportRow
from iplog_analyzer.access_logs.parser import AccessLogParser
from iplog_analyzer.core.config import AnalyzerSettings, get_config
from iplog_analyzer.core.exceptions import LogReadError
from iplog_analyzer.filters.predicates import (
    EntryPredicate,
    build_date_range,
    build_predicate,
)
from iplog_analyzer.filters.stage import filter_entries
from iplog_analyzer.report.aggregator import count_addresses, to_rows
from iplog_analyzer.report.emitter import ReportEmitter

logger = logging.getLogger(__name__)


class AnalysisRequest(BaseModel):
    """Everything one run needs, as supplied on the command line."""

    log_file: Path = Field(..., description="Input access log")
    output_file: Path = Field(..., description="Report destination")
    time_start: str = Field(..., description="Inclusive start date, dd.MM.yyyy")
    time_end: str = Field(..., description="Inclusive end date, dd.MM.yyyy")
    address_start: Optional[str] = Field(None, description="Per-octet lower address bound")
    address_mask: Optional[str] = Field(None, description="Per-octet address mask")

    @property
    def address_filter(self) -> AddressFilter:
        return AddressFilter(
            address_start=self.address_start,
            address_mask=self.address_mask,
        )


class AnalysisResult(BaseModel):
    """Summary of a finished run."""

    output_file: Optional[Path] = None
    rows: List[ReportRow] = Field(default_factory=list)
    lines_read: int = 0
    lines_rejected: int = 0

    @property
    def accepted_entries(self) -> int:
        return sum(row.count for row in self.rows)

    @property
    def distinct_addresses(self) -> int:
        return len(self.rows)


class LogAnalyzerService:
    """
    End-to-end access log analysis.

    Usage:
        service = LogAnalyzerService()
        result = service.run(AnalysisRequest(
            log_file=Path("access.log"),
            output_file=Path("report.txt"),
            time_start="01.01.2023",
            time_end="03.01.2023",
        ))
    """

    def __init__(
        self,
        settings: Optional[AnalyzerSettings] = None,
        emitter: Optional[ReportEmitter] = None,
    ):
        """
        Initialize the service.

        Args:
            settings: Configuration (default: global config)
            emitter: Report emitter (default: one using the configured encoding)
        """
        self.settings = settings or get_config()
        self.emitter = emitter or ReportEmitter(encoding=self.settings.report_encoding)

    def read_log(self, log_file: Path) -> List[str]:
        """
        Read the whole log into memory.

        Raises:
            LogReadError: If the file cannot be opened or decoded
        """
        try:
            # Universal newlines turn \r\n and \r into \n; nothing else breaks a line
            with open(log_file, "r", encoding=self.settings.log_encoding) as f:
                lines = f.read().split("\n")
        except (OSError, UnicodeError) as e:
            logger.error(f"Failed to read log file {log_file}: {e}")
            raise LogReadError(log_file, e) from e

        if lines and lines[-1] == "":
            lines.pop()

        logger.info(f"Read {len(lines)} lines from {log_file}")
        return lines

    def build_filter(self, request: AnalysisRequest) -> EntryPredicate:
        """
        Build the entry predicate for a request.

        Raises:
            ConfigurationError: If a date bound is malformed
        """
        date_range = build_date_range(request.time_start, request.time_end)
        return build_predicate(date_range, request.address_filter)

    def analyze_lines(
        self, lines: Iterable[str], request: AnalysisRequest
    ) -> Tuple[Dict[str, int], AccessLogParser]:
        """
        Run parse, filter and count over already-read lines.

        Returns:
            (counts, parser) where counts is in first-seen order and the
            parser carries the line statistics
        """
        return self._count(lines, self.build_filter(request))

    def _count(
        self, lines: Iterable[str], predicate: EntryPredicate
    ) -> Tuple[Dict[str, int], AccessLogParser]:
        parser = AccessLogParser()
        accepted = filter_entries(parser.parse_lines(lines), predicate)
        counts = count_addresses(accepted)

        logger.info(
            f"Parsed {parser.lines_seen - parser.lines_rejected} of {parser.lines_seen} lines, "
            f"accepted {sum(counts.values())} entries from {len(counts)} addresses"
        )
        return counts, parser

    def run(self, request: AnalysisRequest) -> AnalysisResult:
        """
        Execute a full run and write the report.

        Raises:
            ConfigurationError: Malformed date bound, address bound or mask
            LogReadError: Log unreadable
            EmptyReportError: No entry passed the filters
            ReportWriteError: Report unwritable
        """
        # Date bounds are checked before the filesystem is touched
        predicate = self.build_filter(request)

        lines = self.read_log(request.log_file)
        counts, parser = self._count(lines, predicate)
        output_file = self.emitter.write(counts, request.output_file)

        return AnalysisResult(
            output_file=output_file,
            rows=to_rows(counts),
            lines_read=parser.lines_seen,
            lines_rejected=parser.lines_rejected,
        )
