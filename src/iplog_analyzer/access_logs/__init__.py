"""
Access log ingestion.

Parses "<address>: <timestamp>" lines into immutable entries.
"""

__all__ = ["models", "parser"]
