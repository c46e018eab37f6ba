"""
Output formats supported by the WFS 3.0 document encoders.

Each format owns its MIME type, file extension and the engine
configuration used to encode it:

- JSON: null fields omitted
- YAML: null fields omitted, enums rendered with their display string
- XML:  elements and attributes without a namespace get the WFS 3.0 one
"""

import logging
from enum import Enum
from typing import Optional

from pydantic import BaseModel

from wfs3_geo.exceptions import UnsupportedFormat

logger = logging.getLogger(__name__)

JSON_MIME = "application/json"
YAML_MIME = "application/x-yaml"
XML_MIME = "text/xml"

WFS_NAMESPACE = "http://www.opengis.net/wfs/3.0"


class EncodeConfig(BaseModel):
    """Immutable per-format engine configuration."""

    model_config = {"frozen": True}

    omit_nulls: bool = False
    enums_as_display: bool = False
    default_namespace: Optional[str] = None  # XML only


class OutputFormat(Enum):
    JSON = (JSON_MIME, "json", EncodeConfig(omit_nulls=True))
    YAML = (
        YAML_MIME,
        "yaml",
        EncodeConfig(omit_nulls=True, enums_as_display=True),
    )
    XML = (XML_MIME, "xml", EncodeConfig(default_namespace=WFS_NAMESPACE))

    def __init__(self, mime_type: str, extension: str, config: EncodeConfig):
        self.mime_type = mime_type
        self.extension = extension
        self.config = config


def resolve_format(format_id: Optional[str]) -> OutputFormat:
    """
    Map a requested format identifier to an OutputFormat.

    The identifier is compared case-insensitively with the MIME types.
    A missing identifier means JSON.
    """
    if format_id is None:
        return OutputFormat.JSON
    for fmt in OutputFormat:
        if fmt.mime_type.lower() == format_id.lower():
            logger.debug("Resolved format %r to %s", format_id, fmt.name)
            return fmt
    logger.warning("Rejected output format %r", format_id)
    raise UnsupportedFormat(format_id)


def can_handle_format(format_id: Optional[str]) -> bool:
    """True if resolve_format() would succeed for this identifier."""
    if format_id is None:
        return True
    lowered = format_id.lower()
    return any(fmt.mime_type.lower() == lowered for fmt in OutputFormat)


def mime_type(fmt: OutputFormat) -> str:
    return fmt.mime_type


def attachment_file_name(base_name: str, fmt: OutputFormat) -> str:
    """Append the format's file extension to a base file name."""
    return f"{base_name}.{fmt.extension}"
