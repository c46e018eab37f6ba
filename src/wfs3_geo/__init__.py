"""WFS 3.0 document encoding for JSON, YAML and XML responses."""

from .encoding import OutputFormat, ResponseEncoder, encode, resolve_format
from .exceptions import EncodeError, ServiceException, UnsupportedFormat
from .request import BaseRequest

__all__ = [
    "OutputFormat",
    "ResponseEncoder",
    "encode",
    "resolve_format",
    "BaseRequest",
    "ServiceException",
    "UnsupportedFormat",
    "EncodeError",
]
