"""
Entry filtering: predicate building and the lazy filter stage.
"""

from iplog_analyzer.filters.predicates import (
    build_date_range,
    build_predicate,
    check_address_start,
    check_mask,
    check_time_range,
    parse_date_bound,
)
from iplog_analyzer.filters.stage import filter_entries

__all__ = [
    "build_date_range",
    "build_predicate",
    "check_address_start",
    "check_mask",
    "check_time_range",
    "parse_date_bound",
    "filter_entries",
]
