"""
Generic object graph -> JSON / YAML / XML engine.

Walks pydantic models, dataclasses, mappings, sequences, enums and
scalars. What gets written is controlled by an EncodeConfig:

- omit_nulls drops None-valued fields and mapping entries
- enums_as_display writes str(member) instead of member.name
- default_namespace fills in the XML namespace of every element and
  attribute that does not declare one
"""

import codecs
import dataclasses
import json
from collections.abc import Mapping
from contextlib import contextmanager
from datetime import date, datetime, time
from enum import Enum
from typing import (
    Annotated,
    Any,
    BinaryIO,
    Iterator,
    get_args,
    get_origin,
    get_type_hints,
)
from uuid import UUID
from xml.etree import ElementTree

import yaml
from pydantic import BaseModel

from wfs3_geo.config import EncoderSettings

from .formats import EncodeConfig
from .xml import (
    XmlProperty,
    find_xml_property,
    find_xml_root,
    qualified_name,
    resolve_namespace,
)

_SEQUENCE_TYPES = (list, tuple, set, frozenset)


def display_string(member: Enum) -> str:
    """Display form of an enum member: its own __str__, a str value, or its name."""
    if type(member).__str__ is not Enum.__str__:
        return str(member)
    if isinstance(member.value, str):
        return member.value
    return member.name


def is_structured(value: Any) -> bool:
    """True for values that serialize as a set of named properties."""
    return isinstance(value, BaseModel) or (
        dataclasses.is_dataclass(value) and not isinstance(value, type)
    )


def iter_properties(obj: Any) -> Iterator[tuple[str, Any, XmlProperty | None]]:
    """Yield (name, value, xml binding) for each field of a structured value."""
    if isinstance(obj, BaseModel):
        for name, field in type(obj).model_fields.items():
            key = field.serialization_alias or field.alias or name
            yield key, getattr(obj, name), find_xml_property(field.metadata)
        return

    hints = get_type_hints(type(obj), include_extras=True)
    for field in dataclasses.fields(obj):
        hint = hints.get(field.name)
        metadata = get_args(hint)[1:] if get_origin(hint) is Annotated else ()
        yield field.name, getattr(obj, field.name), find_xml_property(metadata)


class SerializationEngine:
    """Encodes one value with one configuration. Holds no state between calls."""

    def __init__(self, config: EncodeConfig, settings: EncoderSettings):
        self.config = config
        self.settings = settings

    # -- scalars ---------------------------------------------------------

    def scalar(self, value: Any) -> Any:
        """Convert a leaf value to a JSON/YAML-native scalar."""
        if isinstance(value, Enum):
            if self.config.enums_as_display:
                return display_string(value)
            return value.name
        if value is None or isinstance(value, (bool, int, float, str)):
            return value
        if isinstance(value, (datetime, date, time)):
            return value.isoformat()
        if isinstance(value, UUID):
            return str(value)
        raise TypeError(f"Cannot serialize value of type {type(value).__name__}")

    def text(self, value: Any) -> str:
        """Convert a leaf value to XML text."""
        value = self.scalar(value)
        if value is None:
            return ""
        if isinstance(value, bool):
            return "true" if value else "false"
        return str(value)

    @contextmanager
    def _visiting(self, value: Any, active: set):
        key = id(value)
        if key in active:
            raise ValueError(
                f"Cyclic reference to {type(value).__name__} in value graph"
            )
        active.add(key)
        try:
            yield
        finally:
            active.discard(key)

    # -- JSON / YAML -----------------------------------------------------

    def to_tree(self, value: Any, active: set | None = None) -> Any:
        """Convert a value graph to plain dicts, lists and scalars."""
        if active is None:
            active = set()

        if is_structured(value):
            with self._visiting(value, active):
                tree = {}
                for name, child, _ in iter_properties(value):
                    if child is None and self.config.omit_nulls:
                        continue
                    tree[name] = self.to_tree(child, active)
                return tree

        if isinstance(value, Mapping):
            with self._visiting(value, active):
                return {
                    str(key): self.to_tree(child, active)
                    for key, child in value.items()
                    if not (child is None and self.config.omit_nulls)
                }

        if isinstance(value, _SEQUENCE_TYPES):
            with self._visiting(value, active):
                return [self.to_tree(item, active) for item in value]

        return self.scalar(value)

    def write_json(self, value: Any, sink: BinaryIO):
        tree = self.to_tree(value)
        writer = codecs.getwriter("utf-8")(sink)
        json.dump(tree, writer, indent=self.settings.indent, ensure_ascii=False)

    def write_yaml(self, value: Any, sink: BinaryIO):
        tree = self.to_tree(value)
        yaml.safe_dump(
            tree,
            sink,
            encoding="utf-8",
            allow_unicode=True,
            sort_keys=False,
            default_flow_style=False,
        )

    # -- XML -------------------------------------------------------------

    def to_element(self, value: Any) -> ElementTree.Element:
        """Build the XML document tree for a value."""
        root = find_xml_root(type(value))
        local_name = root.local_name or type(value).__name__
        namespace = resolve_namespace(
            root.namespace, self.config.default_namespace
        )
        element = ElementTree.Element(qualified_name(local_name, namespace))
        self._fill(element, value, set())
        return element

    def _fill(self, element: ElementTree.Element, value: Any, active: set):
        default_ns = self.config.default_namespace

        if is_structured(value):
            with self._visiting(value, active):
                for name, child, prop in iter_properties(value):
                    if child is None and self.config.omit_nulls:
                        continue
                    prop = prop or XmlProperty()
                    local_name = prop.local_name or name
                    namespace = resolve_namespace(prop.namespace, default_ns)
                    if prop.attribute:
                        if child is not None:
                            element.set(
                                qualified_name(local_name, namespace),
                                self.text(child),
                            )
                        continue
                    self._append(element, local_name, namespace, child, prop, active)
            return

        if isinstance(value, Mapping):
            with self._visiting(value, active):
                for key, child in value.items():
                    if child is None and self.config.omit_nulls:
                        continue
                    namespace = resolve_namespace(None, default_ns)
                    self._append(element, str(key), namespace, child, None, active)
            return

        if isinstance(value, _SEQUENCE_TYPES):
            with self._visiting(value, active):
                namespace = resolve_namespace(None, default_ns)
                for item in value:
                    self._append(element, "item", namespace, item, None, active)
            return

        element.text = self.text(value)

    def _append(
        self,
        parent: ElementTree.Element,
        local_name: str,
        namespace: str | None,
        value: Any,
        prop: XmlProperty | None,
        active: set,
    ):
        # Sequences are wrapped: <links><link/><link/></links>
        if isinstance(value, _SEQUENCE_TYPES):
            wrapper = ElementTree.SubElement(
                parent, qualified_name(local_name, namespace)
            )
            item_name = (prop.item_name if prop else None) or local_name
            with self._visiting(value, active):
                for item in value:
                    self._append(wrapper, item_name, namespace, item, None, active)
            return

        child = ElementTree.SubElement(parent, qualified_name(local_name, namespace))
        if value is not None:
            self._fill(child, value, active)

    def write_xml(self, value: Any, sink: BinaryIO):
        tree = ElementTree.ElementTree(self.to_element(value))
        if self.settings.indent is not None:
            ElementTree.indent(tree, space=" " * self.settings.indent)
        tree.write(
            sink,
            encoding="utf-8",
            xml_declaration=self.settings.xml_declaration,
        )
