"""
Per-address hit counting.
"""

import logging
from typing import Dict, Iterable, List

from iplog_analyzer.access_logs.models import LogEntry, ReportRow

logger = logging.getLogger(__name__)


def count_addresses(entries: Iterable[LogEntry]) -> Dict[str, int]:
    """
    Count accepted entries per address.

    The returned dict iterates in first-seen order of each address, which
    is also the report order.

    Args:
        entries: Accepted entries, consumed once

    Returns:
        Mapping of address to number of entries
    """
    counts: Dict[str, int] = {}
    for entry in entries:
        if entry.address in counts:
            counts[entry.address] += 1
        else:
            counts[entry.address] = 1

    logger.debug(f"Counted {sum(counts.values())} entries from {len(counts)} addresses")
    return counts


def to_rows(counts: Dict[str, int]) -> List[ReportRow]:
    """Convert an address count mapping into report rows, keeping its order."""
    return [ReportRow(address=address, count=count) for address, count in counts.items()]
