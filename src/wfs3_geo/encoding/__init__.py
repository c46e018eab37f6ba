"""WFS 3.0 response encoding: format selection and serialization."""

from .formats import (
    JSON_MIME,
    WFS_NAMESPACE,
    XML_MIME,
    YAML_MIME,
    EncodeConfig,
    OutputFormat,
    attachment_file_name,
    can_handle_format,
    mime_type,
    resolve_format,
)
from .response import ResponseEncoder, encode
from .xml import ATOM_NAMESPACE, XmlProperty, XmlRoot

__all__ = [
    "JSON_MIME",
    "YAML_MIME",
    "XML_MIME",
    "WFS_NAMESPACE",
    "ATOM_NAMESPACE",
    "EncodeConfig",
    "OutputFormat",
    "resolve_format",
    "can_handle_format",
    "mime_type",
    "attachment_file_name",
    "encode",
    "ResponseEncoder",
    "XmlProperty",
    "XmlRoot",
]
