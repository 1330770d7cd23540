"""Document tree nodes produced by the converter."""


def _position_dict(position):
    return position.to_dict() if position is not None else None


class Node:
    """Base class for document tree nodes.

    - type: one of 'root', 'element', 'text', 'comment', 'cdata', 'doctype'
    - position: Position in the source text, or None
    """

    __slots__ = ("position",)

    type = None

    def __init__(self):
        self.position = None

    def _fields(self):
        """This node's own fields, without children or template content."""
        result = {"type": self.type}
        if self.position is not None:
            result["position"] = _position_dict(self.position)
        return result

    def to_dict(self):
        """Return the subtree as nested dicts and lists.

        Walks with an explicit stack so deep trees stay within the
        interpreter's recursion limit.
        """
        result = self._fields()
        stack = [(self, result)]
        while stack:
            node, data = stack.pop()
            children = getattr(node, "children", None)
            if children is not None:
                converted = []
                for child in children:
                    child_data = child._fields()
                    converted.append(child_data)
                    stack.append((child, child_data))
                data["children"] = converted
            content = getattr(node, "content", None)
            if content is not None:
                content_data = content._fields()
                data["content"] = content_data
                stack.append((content, content_data))
        return result


class Parent(Node):
    __slots__ = ("children",)

    def __init__(self, children=None):
        super().__init__()
        self.children = list(children) if children else []


class Root(Parent):
    __slots__ = ("quirks_mode",)

    type = "root"

    def __init__(self, children=None, quirks_mode=False):
        super().__init__(children)
        self.quirks_mode = bool(quirks_mode)

    def __repr__(self):
        return f"Root(children={len(self.children)}, quirks_mode={self.quirks_mode})"

    def _fields(self):
        result = super()._fields()
        result["quirks_mode"] = self.quirks_mode
        return result


class Element(Parent):
    """An element.

    - tag_name: schema-normalized tag name ('div', 'clipPath', ...)
    - attributes: dict of attribute name to string value, in declaration order
    - content: Root holding template contents (template elements only)
    - positions: ElementPositions in verbose mode, else None
    """

    __slots__ = ("attributes", "content", "positions", "tag_name")

    type = "element"

    def __init__(self, tag_name, attributes=None, children=None, content=None):
        super().__init__(children)
        self.tag_name = tag_name
        self.attributes = attributes if attributes is not None else {}
        self.content = content
        self.positions = None

    def __repr__(self):
        return f"Element(<{self.tag_name}>, children={len(self.children)})"

    def _fields(self):
        result = super()._fields()
        result["tag_name"] = self.tag_name
        result["attributes"] = dict(self.attributes)
        if self.positions is not None:
            result["positions"] = self.positions.to_dict()
        return result


class Literal(Node):
    """A node carrying a string value."""

    __slots__ = ("value",)

    def __init__(self, value):
        super().__init__()
        self.value = value

    def __repr__(self):
        return f"{self.__class__.__name__}({self.value[:30]!r})"

    def _fields(self):
        result = super()._fields()
        result["value"] = self.value
        return result


class Text(Literal):
    __slots__ = ()

    type = "text"


class Comment(Literal):
    __slots__ = ()

    type = "comment"


class CData(Literal):
    __slots__ = ()

    type = "cdata"


class Doctype(Node):
    __slots__ = ()

    type = "doctype"

    def __repr__(self):
        return "Doctype()"
