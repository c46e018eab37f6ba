"""
Shared test fixtures.

Pins default encoder settings and builds sample WFS 3.0 documents
with links, nulls and enums for the encoder tests.
"""

import pytest

from wfs3_geo.config import EncoderSettings, reset_settings, set_settings
from wfs3_geo.models import (
    CollectionDocument,
    CollectionsDocument,
    ConformanceDocument,
    LandingPageDocument,
    Link,
)


@pytest.fixture(autouse=True)
def default_settings():
    """Use default settings regardless of any config file on disk."""
    set_settings(EncoderSettings())
    yield
    reset_settings()


@pytest.fixture
def landing_page():
    """Landing page with a null description and a partially filled link."""
    return LandingPageDocument(
        title="Parcels WFS",
        description=None,
        links=[
            Link(href="http://localhost/wfs3/", rel="self", type="application/json"),
            Link(href="http://localhost/wfs3/collections", rel="data"),
        ],
    )


@pytest.fixture
def conformance():
    return ConformanceDocument()


@pytest.fixture
def parcels_collection():
    return CollectionDocument(
        name="parcels",
        title="Land parcels",
        extent=[-120.0, 25.0, -70.0, 50.0],
        links=[
            Link(
                href="http://localhost/wfs3/collections/parcels/items",
                rel="item",
                type="application/geo+json",
            )
        ],
    )


@pytest.fixture
def collections(parcels_collection):
    return CollectionsDocument(
        links=[Link(href="http://localhost/wfs3/collections", rel="self")],
        collections=[
            parcels_collection,
            CollectionDocument(name="sensor_points"),
        ],
    )
