"""Positional information for document tree nodes."""

from __future__ import annotations

import re
from bisect import bisect_right
from typing import TYPE_CHECKING

from .schema import find

if TYPE_CHECKING:
    from .context import Context
    from .node import Node

_LINE_ENDING = re.compile(r"\r\n|\n|\r")


class Point:
    """A place in the source text. ``line`` and ``column`` are 1-based."""

    __slots__ = ("column", "line", "offset")

    def __init__(self, line: int, column: int, offset: int | None = None) -> None:
        self.line = line
        self.column = column
        self.offset = offset

    def __eq__(self, other):
        if not isinstance(other, Point):
            return NotImplemented
        return self.line == other.line and self.column == other.column and self.offset == other.offset

    __hash__ = None  # Unhashable since we define __eq__

    def __repr__(self):
        return f"Point(line={self.line}, column={self.column}, offset={self.offset})"

    def to_dict(self) -> dict:
        return {"line": self.line, "column": self.column, "offset": self.offset}


class Position:
    """A start/end range. Either endpoint may be None, never both."""

    __slots__ = ("end", "start")

    def __init__(self, start: Point | None, end: Point | None) -> None:
        self.start = start
        self.end = end

    def __eq__(self, other):
        if not isinstance(other, Position):
            return NotImplemented
        return self.start == other.start and self.end == other.end

    __hash__ = None  # Unhashable since we define __eq__

    def __repr__(self):
        return f"Position(start={self.start!r}, end={self.end!r})"

    def to_dict(self) -> dict:
        return {
            "start": self.start.to_dict() if self.start is not None else None,
            "end": self.end.to_dict() if self.end is not None else None,
        }


class ElementPositions:
    """Opening tag, closing tag and per-property positions of an element."""

    __slots__ = ("closing", "opening", "properties")

    def __init__(
        self,
        opening: Position | None,
        closing: Position | None,
        properties: dict[str, Position | None] | None = None,
    ) -> None:
        self.opening = opening
        self.closing = closing
        self.properties = properties if properties is not None else {}

    def __repr__(self):
        return f"ElementPositions(opening={self.opening!r}, closing={self.closing!r}, properties={len(self.properties)})"

    def to_dict(self) -> dict:
        return {
            "opening": self.opening.to_dict() if self.opening is not None else None,
            "closing": self.closing.to_dict() if self.closing is not None else None,
            "properties": {
                key: value.to_dict() if value is not None else None for key, value in self.properties.items()
            },
        }


class LocationIndex:
    """Converts between offsets and line/column points for one text.

    Built once per text; lookups are binary searches over line-end offsets.
    """

    __slots__ = ("_ends", "length")

    def __init__(self, text: str) -> None:
        self.length = len(text)
        # Offset where each line after the first starts, plus a sentinel one
        # past the end so the final offset (len(text)) still resolves.
        self._ends = [match.end() for match in _LINE_ENDING.finditer(text)]
        self._ends.append(self.length + 1)

    def to_point(self, offset: int) -> Point | None:
        if offset is None or offset < 0 or offset > self.length:
            return None
        line = bisect_right(self._ends, offset)
        line_start = self._ends[line - 1] if line > 0 else 0
        return Point(line + 1, offset - line_start + 1, offset)

    def to_offset(self, point: Point) -> int | None:
        line = point.line
        column = point.column
        if not line or not column or line < 1 or column < 1 or line > len(self._ends):
            return None
        line_start = self._ends[line - 2] if line > 1 else 0
        offset = line_start + column - 1
        # Column must stay on its own line (the line end itself is allowed)
        if offset >= self._ends[line - 1]:
            return None
        return offset


def point(line, column, offset=None):
    """Build a Point, or None when line or column is unknown (0 or missing)."""
    if line and column:
        return Point(line, column, offset)
    return None


def position_from_location(location) -> Position | None:
    """Convert a parser location into a Position.

    Returns None when neither endpoint is valid.
    """
    if location is None:
        return None
    start = point(
        getattr(location, "start_line", None),
        getattr(location, "start_col", None),
        getattr(location, "start_offset", None),
    )
    end = point(
        getattr(location, "end_line", None),
        getattr(location, "end_col", None),
        getattr(location, "end_offset", None),
    )
    if start is None and end is None:
        return None
    return Position(start, end)


def create_location(ctx: Context, node: Node, location) -> Position | None:
    """Compute the position of a converted node from its parser location.

    For elements this also repairs the end of unclosed elements and, in
    verbose mode, records tag and attribute positions on the node.
    """
    result = position_from_location(location)

    if node.type == "element":
        end_tag = getattr(location, "end_tag", None)
        tail = node.children[-1] if node.children else None

        # Parsers report unreliable ends for unclosed elements with children;
        # the last child's end is the better estimate.
        if result is not None and end_tag is None and tail is not None:
            if tail.position is not None and tail.position.end is not None:
                end = tail.position.end
                result.end = Point(end.line, end.column, end.offset)

        if ctx.verbose:
            properties = {}
            attrs = getattr(location, "attrs", None) or {}
            for name, attr_location in attrs.items():
                properties[find(ctx.schema, name).property] = position_from_location(attr_location)

            node.positions = ElementPositions(
                opening=position_from_location(getattr(location, "start_tag", None)),
                closing=position_from_location(end_tag) if end_tag is not None else None,
                properties=properties,
            )

    return result
