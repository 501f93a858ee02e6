"""
Filter stage: applies a predicate across parsed entries.
"""

from typing import Iterable, Iterator

from iplog_analyzer.access_logs.models import LogEntry

from .predicates import EntryPredicate


def filter_entries(
    entries: Iterable[LogEntry], predicate: EntryPredicate
) -> Iterator[LogEntry]:
    """
    Lazily yield the entries accepted by the predicate.

    Source order is kept and nothing is evaluated until the result is
    iterated.
    """
    for entry in entries:
        if predicate(entry):
            yield entry
