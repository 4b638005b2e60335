"""
Custom exceptions for mbcuesheet.
"""


class CuesheetError(Exception):
    """Base exception for mbcuesheet."""
    pass


class MetadataError(CuesheetError):
    """Exception raised when release metadata is missing required fields."""
    pass


class ConfigurationError(CuesheetError):
    """Exception raised when configuration is invalid."""
    pass


class APIError(CuesheetError):
    """Exception raised when API calls fail."""

    def __init__(self, message: str, status_code: int = None):
        super().__init__(message)
        self.status_code = status_code


class NetworkError(CuesheetError, ConnectionError):
    """Exception raised when network operations fail."""
    pass
