"""
IP Log Analyzer - offline hit-count reports for network-access logs

This package reads a plain-text access log, keeps the entries that fall
inside a date range and match optional address filters, and writes a
per-address hit count report.

Main modules:
- access_logs: log line parsing and data models
- filters: predicate building and the lazy filter stage
- report: aggregation and report emission
- service: the end-to-end analysis pipeline
- cli: command-line entry point
"""

__version__ = "0.1.0"
__author__ = "IP Log Analyzer Team"

from typing import Dict, Any

# Defaults shared by the CLI and the settings model
DEFAULT_CONFIG: Dict[str, Any] = {
    "log_level": "WARNING",
    "log_encoding": "utf-8-sig",
    "report_encoding": "utf-8",
}


__all__ = ["__version__", "__author__", "DEFAULT_CONFIG"]
