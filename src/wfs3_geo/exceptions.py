"""
Exception hierarchy for the WFS 3.0 response encoders.

Codes follow the OWS exception report vocabulary so the surrounding
service can turn them into exception documents without a lookup table.
"""

from typing import Optional


class ServiceException(Exception):
    """Base error for everything raised by wfs3_geo."""

    code = "NoApplicableCode"

    def __init__(self, message: str, locator: Optional[str] = None):
        super().__init__(message)
        self.locator = locator


class UnsupportedFormat(ServiceException, ValueError):
    """Raised when an output format identifier matches no known format."""

    code = "InvalidParameterValue"

    def __init__(self, format_id: str):
        super().__init__(f"Unknown format requested {format_id}", locator="f")
        self.format_id = format_id


class EncodeError(ServiceException):
    """Raised when serialization or the output stream fails."""


__all__ = [
    "ServiceException",
    "UnsupportedFormat",
    "EncodeError",
]
