"""
Tests for aggregation and report emission.
"""

import pytest
from datetime import datetime

from iplog_analyzer.access_logs.models import LogEntry
from iplog_analyzer.core.exceptions import EmptyReportError, ReportWriteError
from iplog_analyzer.report.aggregator import count_addresses, to_rows
from iplog_analyzer.report.emitter import ReportEmitter


def entries_for(*addresses):
    return [LogEntry(address=a, timestamp=datetime(2023, 1, 1)) for a in addresses]


class TestAggregator:
    """Test per-address counting."""

    def test_counts_each_address(self):
        counts = count_addresses(entries_for("10.0.0.1", "10.0.0.2", "10.0.0.1"))
        assert counts == {"10.0.0.1": 2, "10.0.0.2": 1}

    def test_first_seen_order(self):
        counts = count_addresses(
            entries_for("10.0.0.9", "10.0.0.1", "10.0.0.1", "10.0.0.1", "10.0.0.5", "10.0.0.9")
        )
        # Not sorted by address or by count
        assert list(counts) == ["10.0.0.9", "10.0.0.1", "10.0.0.5"]

    def test_sum_matches_accepted_entries(self):
        entries = entries_for("10.0.0.1", "10.0.0.2", "10.0.0.1", "10.0.0.3")
        assert sum(count_addresses(entries).values()) == len(entries)

    def test_consumes_a_generator(self):
        counts = count_addresses(e for e in entries_for("10.0.0.1", "10.0.0.1"))
        assert counts == {"10.0.0.1": 2}

    def test_empty_input(self):
        assert count_addresses([]) == {}

    def test_to_rows_keeps_order(self):
        rows = to_rows({"10.0.0.2": 1, "10.0.0.1": 4})
        assert [(r.address, r.count) for r in rows] == [("10.0.0.2", 1), ("10.0.0.1", 4)]


class TestReportEmitter:
    """Test report writing."""

    def test_format(self):
        text = ReportEmitter(encoding="utf-8").format_counts({"10.0.0.1": 2, "10.0.0.2": 1})
        assert text == "10.0.0.1: 2\n10.0.0.2: 1\n"

    def test_writes_file(self, tmp_path):
        output = tmp_path / "report.txt"
        written = ReportEmitter(encoding="utf-8").write({"10.0.0.1": 2}, output)
        assert written == output
        assert output.read_bytes() == b"10.0.0.1: 2\n"

    def test_empty_mapping_writes_nothing(self, tmp_path):
        output = tmp_path / "report.txt"
        with pytest.raises(EmptyReportError):
            ReportEmitter(encoding="utf-8").write({}, output)
        assert not output.exists()

    def test_empty_mapping_leaves_existing_file(self, tmp_path):
        output = tmp_path / "report.txt"
        output.write_text("previous\n")
        with pytest.raises(EmptyReportError):
            ReportEmitter(encoding="utf-8").write({}, output)
        assert output.read_text() == "previous\n"

    def test_unwritable_destination(self, tmp_path):
        output = tmp_path / "missing-dir" / "report.txt"
        with pytest.raises(ReportWriteError) as exc_info:
            ReportEmitter(encoding="utf-8").write({"10.0.0.1": 1}, output)
        assert isinstance(exc_info.value.cause, OSError)

    def test_uses_configured_encoding(self, monkeypatch):
        monkeypatch.setenv("IPLOG_REPORT_ENCODING", "latin-1")
        assert ReportEmitter().encoding == "latin-1"
