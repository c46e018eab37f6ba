"""
FastAPI adapter for the response encoders.

Routes call encoded_response() with an encoder, the document and the
parsed request; format and encoding failures become HTTP errors.
"""

import logging
import re
from io import BytesIO
from urllib.parse import quote

from fastapi import HTTPException, Response

from wfs3_geo.encoding import ResponseEncoder
from wfs3_geo.exceptions import EncodeError, UnsupportedFormat
from wfs3_geo.request import BaseRequest

logger = logging.getLogger(__name__)

_UNSAFE_FILENAME_CHARS = re.compile(r'[^\x20-\x7e]|["\\]')


def content_disposition(filename: str) -> str:
    """Inline disposition with an ASCII fallback and an RFC 5987 UTF-8 name."""
    fallback = _UNSAFE_FILENAME_CHARS.sub("_", filename)
    return (
        f'inline; filename="{fallback}"; '
        f"filename*=UTF-8''{quote(filename, safe='')}"
    )


def encoded_response(
    encoder: ResponseEncoder, value, request: BaseRequest
) -> Response:
    """Encode value and wrap it in a Response with type and filename headers."""
    try:
        media_type = encoder.get_mime_type(value, request)
        filename = encoder.attachment_file_name(value, request)
        buffer = BytesIO()
        encoder.write(value, buffer, request)
    except UnsupportedFormat as e:
        raise HTTPException(status_code=400, detail=str(e)) from e
    except EncodeError as e:
        logger.error("Encoding %s failed: %s", type(value).__name__, e)
        raise HTTPException(status_code=500, detail=str(e)) from e

    return Response(
        content=buffer.getvalue(),
        media_type=media_type,
        headers={"Content-Disposition": content_disposition(filename)},
    )
