"""
Command-line interface for IP Log Analyzer.
"""

__all__ = ["analyzer"]
