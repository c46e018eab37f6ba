"""
Content-negotiated response encoding.

ResponseEncoder picks JSON, YAML or XML from the request's output
format, reports the matching content type and attachment name, and
writes the encoded document to the caller's stream.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, BinaryIO, Optional

import yaml

from wfs3_geo.config import EncoderSettings, get_settings
from wfs3_geo.exceptions import EncodeError
from wfs3_geo.request import BaseRequest

from .engine import SerializationEngine
from .formats import (
    OutputFormat,
    attachment_file_name,
    can_handle_format,
    resolve_format,
)

logger = logging.getLogger(__name__)


def encode(
    value: Any,
    fmt: OutputFormat,
    sink: BinaryIO,
    settings: Optional[EncoderSettings] = None,
):
    """
    Encode a value in the given format and write it to sink.

    The sink is neither flushed nor closed. Stream failures and values
    the engine cannot serialize are raised as EncodeError.
    """
    engine = SerializationEngine(fmt.config, settings or get_settings())
    logger.debug("Encoding %s as %s", type(value).__name__, fmt.name)
    try:
        if fmt is OutputFormat.YAML:
            engine.write_yaml(value, sink)
        elif fmt is OutputFormat.XML:
            engine.write_xml(value, sink)
        else:
            engine.write_json(value, sink)
    except (
        OSError,
        TypeError,
        ValueError,
        RecursionError,
        yaml.YAMLError,
    ) as e:
        raise EncodeError(
            f"Failed to encode {type(value).__name__} as {fmt.name}: {e}"
        ) from e


class ResponseEncoder(ABC):
    """
    Base class for WFS 3.0 document responses encoded as JSON/YAML/XML.

    Subclasses set target_type and supply the attachment base name
    through file_name().
    """

    target_type: type = object

    def __init__(self, settings: Optional[EncoderSettings] = None):
        self.settings = settings

    def get_format(self, request: BaseRequest) -> Optional[str]:
        return request.output_format

    def can_handle(self, request: BaseRequest, value: Any = None) -> bool:
        """Whether this encoder supports the request (and value, if given)."""
        if value is not None and not isinstance(value, self.target_type):
            return False
        return can_handle_format(self.get_format(request))

    def resolve(self, request: BaseRequest) -> OutputFormat:
        return resolve_format(self.get_format(request))

    def get_mime_type(self, value: Any, request: BaseRequest) -> str:
        return self.resolve(request).mime_type

    def write(self, value: Any, output: BinaryIO, request: BaseRequest):
        encode(value, self.resolve(request), output, self.settings)

    def attachment_file_name(self, value: Any, request: BaseRequest) -> str:
        return attachment_file_name(
            self.file_name(value, request), self.resolve(request)
        )

    @abstractmethod
    def file_name(self, value: Any, request: BaseRequest) -> str:
        """Just the name of the file to be returned (no extension)."""
