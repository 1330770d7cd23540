"""Attribute/property name resolution for the html and svg schemas.

``find(schema, name)`` maps an attribute name (``class``, ``viewbox``,
``xlink:href``) or a property name (``className``) to its canonical
property info. Lookups ignore case.
"""

import re

from .constants import (
    ARIA_PROPERTIES,
    HTML_ATTRIBUTE_OVERRIDES,
    HTML_PROPERTIES,
    SVG_ATTRIBUTE_OVERRIDES,
    SVG_CASE_SENSITIVE_ATTRIBUTES,
    SVG_DASHED_ATTRIBUTES,
    SVG_PROPERTIES,
    XLINK_PROPERTIES,
    XML_PROPERTIES,
    XMLNS_ATTRIBUTES,
)

_DASH_LETTER = re.compile(r"-([a-z])")
_VALID_DATA = re.compile(r"^[Dd][Aa][Tt][Aa][-\w.:]+$")


class Info:
    __slots__ = ("attribute", "property", "space")

    def __init__(self, property, attribute, space=None):
        self.property = property
        self.attribute = attribute
        self.space = space

    def __eq__(self, other):
        if not isinstance(other, Info):
            return NotImplemented
        return self.property == other.property and self.attribute == other.attribute and self.space == other.space

    __hash__ = None  # Unhashable since we define __eq__

    def __repr__(self):
        return f"Info({self.property!r}, attribute={self.attribute!r}, space={self.space!r})"


class Schema:
    """A named set of properties with a case-insensitive lookup table."""

    __slots__ = ("normal", "property", "space")

    def __init__(self, space, infos):
        self.space = space
        self.property = {}
        self.normal = {}
        for info in infos:
            self.property[info.property] = info
            self.normal[info.property.lower()] = info.property
            self.normal[info.attribute.lower()] = info.property

    def __repr__(self):
        return f"Schema({self.space}, properties={len(self.property)})"


def _camelcase(value):
    return _DASH_LETTER.sub(lambda match: match.group(1).upper(), value)


def _shared_infos(space):
    """xml, xlink, xmlns and aria properties exist in every schema."""
    infos = []
    for prop in XLINK_PROPERTIES:
        infos.append(Info(prop, "xlink:" + prop[5:].lower(), space))
    for prop in XML_PROPERTIES:
        infos.append(Info(prop, "xml:" + prop[3:].lower(), space))
    for prop, attribute in XMLNS_ATTRIBUTES.items():
        infos.append(Info(prop, attribute, space))
    for prop in ARIA_PROPERTIES:
        attribute = prop if prop == "role" else "aria-" + prop[4:].lower()
        infos.append(Info(prop, attribute, space))
    return infos


def _html_infos():
    infos = _shared_infos("html")
    for prop in HTML_PROPERTIES:
        infos.append(Info(prop, prop.lower(), "html"))
    for prop, attribute in HTML_ATTRIBUTE_OVERRIDES.items():
        infos.append(Info(prop, attribute, "html"))
    return infos


def _svg_infos():
    infos = _shared_infos("svg")
    for prop in SVG_PROPERTIES:
        infos.append(Info(prop, prop.lower() if prop == "tabIndex" else prop, "svg"))
    for attribute in SVG_CASE_SENSITIVE_ATTRIBUTES.values():
        infos.append(Info(attribute, attribute, "svg"))
    for attribute in SVG_DASHED_ATTRIBUTES:
        infos.append(Info(_camelcase(attribute), attribute, "svg"))
    for prop, attribute in SVG_ATTRIBUTE_OVERRIDES.items():
        infos.append(Info(prop, attribute, "svg"))
    return infos


HTML = Schema("html", _html_infos())
SVG = Schema("svg", _svg_infos())

SCHEMAS = {"html": HTML, "svg": SVG}


def find(schema, value):
    """Resolve ``value`` (attribute or property name) in ``schema``."""
    normal = value.lower()
    if normal in schema.normal:
        return schema.property[schema.normal[normal]]

    if len(normal) > 4 and normal.startswith("data") and _VALID_DATA.match(value):
        if value[4] == "-":
            rest = _camelcase(value[5:])
            return Info("data" + rest[:1].upper() + rest[1:], value, schema.space)
        # Property form (dataFooBar): derive the attribute
        attribute = "data" + re.sub(r"[A-Z]", lambda match: "-" + match.group(0).lower(), value[4:])
        if not attribute.startswith("data-"):
            attribute = "data-" + attribute[4:]
        return Info(value, attribute, schema.space)

    return Info(value, value)
