"""
Defines custom exceptions for the application to allow for more specific error handling.
"""


class WcurlError(Exception):
    """Base exception for all application-specific errors."""


class UsageError(WcurlError):
    """Raised when the command line is malformed or names no URL."""


class ProbeError(WcurlError):
    """Raised when the installed curl version cannot be determined."""


class ExecutionError(WcurlError):
    """
    Raised when curl cannot be started or exits with a non-zero status.

    `returncode` is None when the process never started.
    """

    def __init__(self, message: str, returncode: int | None = None):
        super().__init__(message)
        self.returncode = returncode


class ConfigurationError(WcurlError):
    """Raised for issues related to settings file loading or validation."""
