"""
XML binding markers and namespace resolution.

Fields are bound to XML through ``typing.Annotated`` metadata:

    href: Annotated[str, XmlProperty(attribute=True)]
    links: Annotated[list[Link], XmlProperty(item_name="link")]

and classes through an ``__xml_root__`` attribute:

    __xml_root__ = XmlRoot("Collections")

The namespace of every element and attribute is resolved one at a
time by resolve_namespace(), so the configured default only fills in
where nothing explicit was declared.
"""

import re
from dataclasses import dataclass
from typing import Optional
from xml.etree import ElementTree

from .formats import WFS_NAMESPACE

ATOM_NAMESPACE = "http://www.w3.org/2005/Atom"

# Prefixes used when serializing; without them ElementTree writes ns0, ns1...
ElementTree.register_namespace("wfs", WFS_NAMESPACE)
ElementTree.register_namespace("atom", ATOM_NAMESPACE)

# XML NCName: letter or underscore, then letters, digits, "_", "-" or "."
_NCNAME = re.compile(r"^[^\W\d][\w.\-]*\Z")


@dataclass(frozen=True)
class XmlProperty:
    """How a single field is written to XML."""

    local_name: Optional[str] = None
    namespace: Optional[str] = None
    attribute: bool = False
    item_name: Optional[str] = None  # element name for sequence items


@dataclass(frozen=True)
class XmlRoot:
    """Root element name (and namespace) of a class."""

    local_name: Optional[str] = None
    namespace: Optional[str] = None


def resolve_namespace(
    declared: Optional[str], default: Optional[str]
) -> Optional[str]:
    """Return the declared namespace, or the default when none is set."""
    if declared:
        return declared
    return default or None


def qualified_name(local_name: str, namespace: Optional[str]) -> str:
    """Build an ElementTree ``{uri}local`` name, rejecting invalid names."""
    if not _NCNAME.match(local_name):
        raise ValueError(f"Invalid XML name {local_name!r}")
    if namespace:
        return f"{{{namespace}}}{local_name}"
    return local_name


def find_xml_property(metadata) -> Optional[XmlProperty]:
    """Pick the XmlProperty marker out of Annotated/Field metadata."""
    for item in metadata or ():
        if isinstance(item, XmlProperty):
            return item
    return None


def find_xml_root(cls) -> XmlRoot:
    root = getattr(cls, "__xml_root__", None)
    if isinstance(root, XmlRoot):
        return root
    return XmlRoot()
