"""
Access log line parser.
"""

import logging
import re
from datetime import datetime
from typing import Iterable, Iterator, Optional

from pydantic import ValidationError

from .models import ENTRY_SEPARATOR, TIMESTAMP_FORMAT, LogEntry

logger = logging.getLogger(__name__)

# strptime alone accepts single-digit and non-ASCII digits, so the shape is checked first
_TIMESTAMP_SHAPE = re.compile(r"[0-9]{2}\.[0-9]{2}\.[0-9]{4} [0-9]{2}:[0-9]{2}:[0-9]{2}")


class AccessLogParser:
    """
    Parses "<address>: <dd.MM.yyyy HH:mm:ss>" lines into LogEntry objects.

    Lines that do not have that exact shape are skipped, never raised.
    """

    def __init__(self):
        self.lines_seen = 0
        self.lines_rejected = 0

    def parse_line(self, line: str) -> Optional[LogEntry]:
        """
        Parse a single raw log line.

        Args:
            line: Raw line, with or without its line terminator

        Returns:
            Parsed LogEntry or None if the line is malformed
        """
        self.lines_seen += 1
        line = line.rstrip("\r\n")

        address, separator, timestamp_token = line.partition(ENTRY_SEPARATOR)
        if not separator or not address or not timestamp_token:
            return self._reject(line, "missing separator")

        timestamp = self.parse_timestamp(timestamp_token)
        if timestamp is None:
            return self._reject(line, "bad timestamp")

        try:
            return LogEntry(address=address, timestamp=timestamp)
        except ValidationError:
            return self._reject(line, "bad address")

    def parse_lines(self, lines: Iterable[str]) -> Iterator[LogEntry]:
        """Yield an entry for every well-formed line, in input order."""
        for line in lines:
            entry = self.parse_line(line)
            if entry is not None:
                yield entry

    @staticmethod
    def parse_timestamp(token: str) -> Optional[datetime]:
        """Parse a dd.MM.yyyy HH:mm:ss token, or return None."""
        if not _TIMESTAMP_SHAPE.fullmatch(token):
            return None
        try:
            return datetime.strptime(token, TIMESTAMP_FORMAT)
        except ValueError:
            return None

    def _reject(self, line: str, reason: str) -> None:
        self.lines_rejected += 1
        logger.debug(f"Skipping log line ({reason}): {line!r}")
        return None
