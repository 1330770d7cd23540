"""Parse tree model consumed by the converter.

Streaming parsers produce (or are adapted to produce) these nodes. Every node
has a ``kind`` tag, optional ``children`` and an optional ``location``. Only
``kind`` is required: the converter reads every other field defensively, so
objects from other parsers work as long as they expose the same names.
"""

from .constants import (
    HTML_NAMESPACE,
    KIND_COMMENT,
    KIND_DOCTYPE,
    KIND_DOCUMENT,
    KIND_ELEMENT,
    KIND_FRAGMENT,
    KIND_TEXT,
)


class Location:
    """Start/end line, column and offset of a node in the source text.

    Lines and columns are 1-based; 0 or None marks an unknown value.
    """

    __slots__ = ("end_col", "end_line", "end_offset", "start_col", "start_line", "start_offset")

    def __init__(
        self,
        start_line=None,
        start_col=None,
        start_offset=None,
        end_line=None,
        end_col=None,
        end_offset=None,
    ):
        self.start_line = start_line
        self.start_col = start_col
        self.start_offset = start_offset
        self.end_line = end_line
        self.end_col = end_col
        self.end_offset = end_offset

    def __repr__(self):
        return (
            f"Location({self.start_line}:{self.start_col}-{self.end_line}:{self.end_col}, "
            f"offsets={self.start_offset}-{self.end_offset})"
        )


class ElementLocation(Location):
    """Location of an element plus its opening tag, closing tag and attributes."""

    __slots__ = ("attrs", "end_tag", "start_tag")

    def __init__(self, *args, start_tag=None, end_tag=None, attrs=None, **kwargs):
        super().__init__(*args, **kwargs)
        self.start_tag = start_tag
        self.end_tag = end_tag
        # Attribute name -> Location
        self.attrs = attrs if attrs is not None else {}


class Attribute:
    __slots__ = ("name", "namespace", "prefix", "value")

    def __init__(self, name, value="", prefix=None, namespace=None):
        self.name = name
        self.value = value
        self.prefix = prefix
        self.namespace = namespace

    def __repr__(self):
        qualified = f"{self.prefix}:{self.name}" if self.prefix else self.name
        return f"Attribute({qualified}={self.value!r})"


class ParseNode:
    """Base parse node. ``kind`` selects the handler used for conversion."""

    __slots__ = ("children", "kind", "location")

    def __init__(self, kind, children=None, location=None):
        self.kind = kind
        self.children = children
        self.location = location

    def __repr__(self):
        count = len(self.children) if self.children else 0
        return f"ParseNode({self.kind}, children={count})"


class Document(ParseNode):
    __slots__ = ("mode",)

    def __init__(self, children=None, mode="no-quirks", location=None):
        super().__init__(KIND_DOCUMENT, children, location)
        self.mode = mode


class DocumentFragment(ParseNode):
    __slots__ = ()

    def __init__(self, children=None, location=None):
        super().__init__(KIND_FRAGMENT, children, location)


class Text(ParseNode):
    __slots__ = ("data",)

    def __init__(self, data, location=None):
        super().__init__(KIND_TEXT, None, location)
        self.data = data

    def __repr__(self):
        return f"Text({self.data[:30]!r})"


class Comment(ParseNode):
    __slots__ = ("data",)

    def __init__(self, data, location=None):
        super().__init__(KIND_COMMENT, None, location)
        self.data = data

    def __repr__(self):
        return f"Comment({self.data[:30]!r})"


class Doctype(ParseNode):
    __slots__ = ("name", "public_id", "system_id")

    def __init__(self, name=None, public_id=None, system_id=None, location=None):
        super().__init__(KIND_DOCTYPE, None, location)
        self.name = name
        self.public_id = public_id
        self.system_id = system_id


class Element(ParseNode):
    """An element. ``content`` is only set on ``template`` elements."""

    __slots__ = ("attributes", "content", "namespace", "tag_name")

    def __init__(
        self,
        tag_name,
        attributes=None,
        children=None,
        namespace=HTML_NAMESPACE,
        content=None,
        location=None,
    ):
        super().__init__(KIND_ELEMENT, children, location)
        self.tag_name = tag_name
        self.attributes = attributes
        self.namespace = namespace
        self.content = content

    def __repr__(self):
        count = len(self.children) if self.children else 0
        return f"Element(<{self.tag_name}>, children={count})"
