"""
Error taxonomy for a log analysis run.

Every error here is terminal for the run. Malformed log lines are not
errors: the parser skips them.
"""


class LogAnalyzerError(Exception):
    """Base class for all analysis failures."""
    pass


class ConfigurationError(LogAnalyzerError):
    """Raised when a run is configured with unusable values."""
    pass


class AddressFormatError(ConfigurationError):
    """Raised when an address bound or mask cannot be read as octets."""
    pass


class LogReadError(LogAnalyzerError):
    """Raised when the input log cannot be read."""

    def __init__(self, path, cause: Exception):
        self.path = path
        self.cause = cause
        super().__init__(f"Cannot read log file {path}: {cause}")


class ReportWriteError(LogAnalyzerError):
    """Raised when the report cannot be written."""

    def __init__(self, path, cause: Exception):
        self.path = path
        self.cause = cause
        super().__init__(f"Cannot write report to {path}: {cause}")


class EmptyReportError(LogAnalyzerError):
    """Raised when no address passed the filters, so there is nothing to write."""

    def __init__(self, message: str = "No addresses fell within the requested range"):
        super().__init__(message)
