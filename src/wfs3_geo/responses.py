"""
Response encoders for the WFS 3.0 metadata documents.

Each one handles a single document type and names the attachment
after the resource it describes.
"""

from wfs3_geo.encoding import ResponseEncoder
from wfs3_geo.models import (
    CollectionDocument,
    CollectionsDocument,
    ConformanceDocument,
    LandingPageDocument,
)


class LandingPageResponse(ResponseEncoder):
    target_type = LandingPageDocument

    def file_name(self, value, request) -> str:
        return "landingPage"


class ConformanceResponse(ResponseEncoder):
    target_type = ConformanceDocument

    def file_name(self, value, request) -> str:
        return "conformance"


class CollectionsResponse(ResponseEncoder):
    target_type = CollectionsDocument

    def file_name(self, value, request) -> str:
        return "collections"


class CollectionResponse(ResponseEncoder):
    """Single collection; the attachment is named after the collection."""

    target_type = CollectionDocument

    def file_name(self, value, request) -> str:
        return value.name


RESPONSE_ENCODERS = [
    LandingPageResponse,
    ConformanceResponse,
    CollectionsResponse,
    CollectionResponse,
]


def find_encoder(value, request) -> ResponseEncoder:
    """Return the first encoder able to write value for this request."""
    for encoder_class in RESPONSE_ENCODERS:
        encoder = encoder_class()
        if encoder.can_handle(request, value):
            return encoder
    raise LookupError(
        f"No response encoder for {type(value).__name__} "
        f"in format {request.output_format}"
    )
