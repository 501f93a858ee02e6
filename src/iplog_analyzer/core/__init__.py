"""
Core module for IP Log Analyzer.

Contains configuration and the error taxonomy shared across all modules.
"""

from iplog_analyzer.core.config import AnalyzerSettings, get_config, reload_config
from iplog_analyzer.core.exceptions import (
    AddressFormatError,
    ConfigurationError,
    EmptyReportError,
    LogAnalyzerError,
    LogReadError,
    ReportWriteError,
)

__all__ = [
    "AnalyzerSettings",
    "get_config",
    "reload_config",
    "AddressFormatError",
    "ConfigurationError",
    "EmptyReportError",
    "LogAnalyzerError",
    "LogReadError",
    "ReportWriteError",
]
