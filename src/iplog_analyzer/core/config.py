"""
Configuration management for IP Log Analyzer.

Uses Pydantic Settings for environment variable validation and type safety.
"""

import codecs
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

from iplog_analyzer import DEFAULT_CONFIG


class AnalyzerSettings(BaseSettings):
    """Main application configuration."""

    log_level: str = Field(
        default=DEFAULT_CONFIG["log_level"],
        description="Logging level (DEBUG, INFO, WARNING, ERROR)"
    )
    log_encoding: str = Field(
        default=DEFAULT_CONFIG["log_encoding"],
        description="Text encoding of the input access log"
    )
    report_encoding: str = Field(
        default=DEFAULT_CONFIG["report_encoding"],
        description="Text encoding of the written report"
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        v = v.upper()
        if v not in valid_levels:
            raise ValueError(f"Log level must be one of: {valid_levels}")
        return v

    @field_validator("log_encoding", "report_encoding")
    @classmethod
    def validate_encoding(cls, v: str) -> str:
        """Validate that Python knows the encoding."""
        try:
            codecs.lookup(v)
        except LookupError:
            raise ValueError(f"Unknown text encoding: {v}")
        return v

    class Config:
        env_prefix = "IPLOG_"
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False
        extra = "ignore"


# Global config instance
_config: Optional[AnalyzerSettings] = None


def get_config() -> AnalyzerSettings:
    """
    Get the global configuration instance.

    Lazily loads configuration on first access.

    Returns:
        AnalyzerSettings: The global configuration instance
    """
    global _config
    if _config is None:
        _config = AnalyzerSettings()
    return _config


def reload_config() -> AnalyzerSettings:
    """
    Reload configuration from environment variables.

    Useful for testing or when environment changes.

    Returns:
        AnalyzerSettings: The reloaded configuration instance
    """
    global _config
    _config = None
    return get_config()
