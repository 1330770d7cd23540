"""Element construction helpers.

``h`` builds html elements and ``s`` builds svg elements. Both normalize the
tag and attribute names for their schema and accept strings or nodes as
children.
"""

from .constants import SVG_CASE_SENSITIVE_ATTRIBUTES, SVG_CASE_SENSITIVE_ELEMENTS
from .node import Element, Node, Root, Text


def _normalize_attributes(attributes, adjust):
    # Later duplicates overwrite earlier ones after normalization
    result = {}
    if not attributes:
        return result
    for key, value in attributes.items():
        result[adjust(key)] = "" if value is None else str(value)
    return result


def _normalize_children(children):
    result = []
    if not children:
        return result
    for child in children:
        if isinstance(child, str):
            result.append(Text(child))
        elif isinstance(child, Node):
            result.append(child)
        else:
            msg = f"Expected node, nodes, or string, got {type(child).__name__}"
            raise TypeError(msg)
    return result


def _build(tag_name, attributes, children):
    if not tag_name:
        msg = "Empty tag_name passed to element builder"
        raise ValueError(msg)
    element = Element(tag_name, attributes, children)
    if tag_name == "template":
        # Template children live in a separate document fragment
        element.content = Root(element.children)
        element.children = []
    return element


def _adjust_html_attribute(name):
    return name.lower()


def _adjust_svg_attribute(name):
    lowered = name.lower()
    return SVG_CASE_SENSITIVE_ATTRIBUTES.get(lowered, lowered)


def h(tag_name, attributes=None, children=None):
    """Create an html element."""
    return _build(
        tag_name.lower() if tag_name else tag_name,
        _normalize_attributes(attributes, _adjust_html_attribute),
        _normalize_children(children),
    )


def s(tag_name, attributes=None, children=None):
    """Create an svg element. Tag and attribute names keep their svg casing."""
    if tag_name:
        lowered = tag_name.lower()
        tag_name = SVG_CASE_SENSITIVE_ELEMENTS.get(lowered, lowered)
    return _build(
        tag_name,
        _normalize_attributes(attributes, _adjust_svg_attribute),
        _normalize_children(children),
    )
