"""
Predicate building for access log entries.

A run is described by a date range and optional address filters. They are
turned into a single callable that accepts or rejects a LogEntry.

Address comparisons work octet by octet, not on the address as a 32-bit
number:

- the start bound accepts an address when every octet is >= the bound's
  octet at the same position, so 10.0.0.9 is rejected by 9.0.0.10;
- the mask accepts an address when ANDing each octet with the mask octet
  leaves it unchanged, so 255.255.255.0 rejects 192.168.1.10.
"""

import logging
import re
from datetime import datetime
from typing import Callable, List, Optional

from iplog_analyzer.access_logs.models import (
    DATE_FORMAT,
    AddressFilter,
    DateRange,
    LogEntry,
    parse_octets,
)
from iplog_analyzer.core.exceptions import AddressFormatError, ConfigurationError

logger = logging.getLogger(__name__)

EntryPredicate = Callable[[LogEntry], bool]

_DATE_SHAPE = re.compile(r"[0-9]{2}\.[0-9]{2}\.[0-9]{4}")


def parse_date_bound(value: str, name: str) -> datetime:
    """
    Parse a dd.MM.yyyy date into midnight of that day.

    Args:
        value: Date string supplied by the user
        name: Flag or setting the value came from, used in the error

    Returns:
        The date as a datetime at 00:00:00

    Raises:
        ConfigurationError: If the value is not an exact dd.MM.yyyy date
    """
    if value is None or not _DATE_SHAPE.fullmatch(value):
        raise ConfigurationError(
            f"Invalid date for {name}: {value!r}. Use the format dd.MM.yyyy"
        )
    try:
        return datetime.strptime(value, DATE_FORMAT)
    except ValueError:
        raise ConfigurationError(
            f"Invalid date for {name}: {value!r}. Use the format dd.MM.yyyy"
        )


def build_date_range(time_start: str, time_end: str) -> DateRange:
    """Parse both scan boundaries. Either failing aborts the run."""
    date_range = DateRange(
        start=parse_date_bound(time_start, "--time-start"),
        end=parse_date_bound(time_end, "--time-end"),
    )
    if date_range.start > date_range.end:
        logger.warning(
            f"Start date {time_start} is after end date {time_end}; no entry can match"
        )
    return date_range


def check_time_range(entry: LogEntry, date_range: DateRange) -> bool:
    """True when start <= entry.timestamp <= end, both bounds at midnight."""
    return date_range.contains(entry.timestamp)


def _octet_value(octet: str, address: str) -> int:
    try:
        return int(octet)
    except ValueError:
        raise AddressFormatError(f"Octet {octet!r} in {address!r} is not a number")


def check_address_start(address: str, address_start: str) -> bool:
    """
    Compare an address with a lower bound octet by octet.

    Only the positions present in both addresses are compared, so a short
    bound such as "10.1" constrains the first two octets only.

    Raises:
        AddressFormatError: If a compared octet is not a number
    """
    address_parts = address.split(".")
    start_parts = address_start.split(".")

    for octet, start_octet in zip(address_parts, start_parts):
        if _octet_value(octet, address) < _octet_value(start_octet, address_start):
            return False
    return True


def _mask_octets(address_mask: str) -> List[int]:
    try:
        return parse_octets(address_mask)
    except ValueError as e:
        raise AddressFormatError(f"Invalid address mask: {e}")


def check_mask(address: str, address_mask: str) -> bool:
    """
    Check that every octet of the address only uses bits set in the mask.

    Raises:
        AddressFormatError: If the address or mask is not a valid dotted quad
    """
    mask_octets = _mask_octets(address_mask)
    try:
        address_octets = parse_octets(address)
    except ValueError as e:
        raise AddressFormatError(f"Invalid address: {e}")

    for octet, mask_octet in zip(address_octets, mask_octets):
        if octet & mask_octet != octet:
            return False
    return True


def build_predicate(
    date_range: DateRange,
    address_filter: Optional[AddressFilter] = None,
) -> EntryPredicate:
    """
    Combine the active filters into one predicate.

    The time check always applies. The start bound and the mask apply only
    when given. Checks run in that order and stop at the first failure.

    Args:
        date_range: Inclusive scan window
        address_filter: Optional address bound and mask

    Returns:
        Callable returning True for entries that pass every active filter
    """
    address_filter = address_filter or AddressFilter()
    address_start = address_filter.address_start
    address_mask = address_filter.address_mask

    logger.debug(
        f"Filters: time {date_range.start} .. {date_range.end}, "
        f"start={address_start or '-'}, mask={address_mask or '-'}"
    )

    def predicate(entry: LogEntry) -> bool:
        if not check_time_range(entry, date_range):
            return False
        if address_start and not check_address_start(entry.address, address_start):
            return False
        if address_mask and not check_mask(entry.address, address_mask):
            return False
        return True

    return predicate
