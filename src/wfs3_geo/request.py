"""
Request context shared by the WFS 3.0 operations.

Only the output format is read by the response encoders; the
operation-specific parameters live on the subclasses.
"""

from typing import Optional

from pydantic import BaseModel, Field


class BaseRequest(BaseModel):
    """Parameters common to every WFS 3.0 request."""

    model_config = {"populate_by_name": True}

    output_format: Optional[str] = Field(default=None, alias="f")


class CollectionRequest(BaseRequest):
    """Request targeting a single feature collection."""

    collection_id: str
