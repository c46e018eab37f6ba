"""
WFS 3.0 metadata documents returned by the service.

These are the values handed to the response encoders. Field
annotations carry the XML binding; JSON and YAML use the field
(or serialization alias) names.
"""

from enum import Enum
from typing import Annotated, Optional

from pydantic import BaseModel, Field

from wfs3_geo.encoding.xml import ATOM_NAMESPACE, XmlProperty, XmlRoot

CORE = "http://www.opengis.net/spec/wfs-1/3.0/req/core"
OAS30 = "http://www.opengis.net/spec/wfs-1/3.0/req/oas30"
GEOJSON = "http://www.opengis.net/spec/wfs-1/3.0/req/geojson"

CRS84 = "http://www.opengis.net/def/crs/OGC/1.3/CRS84"


class ItemType(Enum):
    """Kind of items served by a collection."""

    FEATURE = "feature"

    def __str__(self):
        return self.value


class Link(BaseModel):
    """Atom-style link; every property is written as an XML attribute."""

    __xml_root__ = XmlRoot("link", ATOM_NAMESPACE)

    href: Annotated[str, XmlProperty(attribute=True)]
    rel: Annotated[Optional[str], XmlProperty(attribute=True)] = None
    type: Annotated[Optional[str], XmlProperty(attribute=True)] = None
    title: Annotated[Optional[str], XmlProperty(attribute=True)] = None


LinkList = Annotated[
    list[Link], XmlProperty(namespace=ATOM_NAMESPACE, item_name="link")
]


class LandingPageDocument(BaseModel):
    __xml_root__ = XmlRoot("LandingPage")

    title: Optional[str] = None
    description: Optional[str] = None
    links: LinkList = []


class ConformanceDocument(BaseModel):
    __xml_root__ = XmlRoot("ConformsTo")

    conforms_to: Annotated[list[str], XmlProperty(item_name="link")] = Field(
        default_factory=lambda: [CORE, OAS30, GEOJSON],
        serialization_alias="conformsTo",
    )


class CollectionDocument(BaseModel):
    """Description of a single feature collection."""

    __xml_root__ = XmlRoot("Collection")

    name: str
    title: Optional[str] = None
    description: Optional[str] = None
    extent: Optional[list[float]] = None  # [xmin, ymin, xmax, ymax]
    crs: list[str] = Field(default_factory=lambda: [CRS84])
    item_type: ItemType = Field(
        default=ItemType.FEATURE, serialization_alias="itemType"
    )
    links: LinkList = []


class CollectionsDocument(BaseModel):
    __xml_root__ = XmlRoot("Collections")

    links: LinkList = []
    collections: Annotated[
        list[CollectionDocument], XmlProperty(item_name="Collection")
    ] = []
