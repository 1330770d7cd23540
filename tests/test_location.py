"""Tests for points, positions and the line/column index."""

import unittest

from turbohast import HTML, Context, SourceFile
from turbohast.location import LocationIndex, Point, Position, create_location, point, position_from_location
from turbohast.node import Element, Text
from turbohast.source import ElementLocation, Location


class TestPoint(unittest.TestCase):
    def test_point_requires_line_and_column(self):
        assert point(1, 1, 0) == Point(1, 1, 0)
        assert point(0, 1, 0) is None
        assert point(1, 0, 0) is None
        assert point(None, None, None) is None

    def test_point_equality_and_repr(self):
        assert Point(2, 3, 7) == Point(2, 3, 7)
        assert Point(2, 3, 7) != Point(2, 4, 8)
        assert repr(Point(2, 3, 7)) == "Point(line=2, column=3, offset=7)"


class TestPositionFromLocation(unittest.TestCase):
    def test_full_location(self):
        position = position_from_location(Location(1, 1, 0, 1, 6, 5))
        assert position == Position(Point(1, 1, 0), Point(1, 6, 5))

    def test_all_zero_location_is_absent(self):
        assert position_from_location(Location(0, 0, 0, 0, 0, 0)) is None

    def test_missing_fields_are_absent(self):
        assert position_from_location(Location()) is None
        assert position_from_location(None) is None

    def test_invalid_end_is_null_inside_position(self):
        position = position_from_location(Location(1, 1, 0, 0, 0, 0))
        assert position is not None
        assert position.start == Point(1, 1, 0)
        assert position.end is None

    def test_invalid_start_is_null_inside_position(self):
        position = position_from_location(Location(0, 0, None, 2, 1, 9))
        assert position.start is None
        assert position.end == Point(2, 1, 9)

    def test_to_dict(self):
        position = Position(Point(1, 1, 0), None)
        assert position.to_dict() == {"start": {"line": 1, "column": 1, "offset": 0}, "end": None}


class TestLocationIndex(unittest.TestCase):
    def test_single_line(self):
        index = LocationIndex("abc")
        assert index.to_point(0) == Point(1, 1, 0)
        assert index.to_point(3) == Point(1, 4, 3)

    def test_multiple_line_endings(self):
        index = LocationIndex("a\nb\r\nc\rd")
        assert index.to_point(2) == Point(2, 1, 2)
        assert index.to_point(5) == Point(3, 1, 5)
        assert index.to_point(7) == Point(4, 1, 7)
        # The newline character belongs to the line it ends
        assert index.to_point(1) == Point(1, 2, 1)

    def test_empty_text(self):
        index = LocationIndex("")
        assert index.to_point(0) == Point(1, 1, 0)
        assert index.to_point(1) is None

    def test_out_of_range(self):
        index = LocationIndex("abc")
        assert index.to_point(-1) is None
        assert index.to_point(4) is None

    def test_to_offset(self):
        index = LocationIndex("ab\ncd")
        assert index.to_offset(Point(1, 1)) == 0
        assert index.to_offset(Point(2, 2)) == 4
        assert index.to_offset(Point(2, 3)) == 5
        assert index.to_offset(Point(1, 5)) is None
        assert index.to_offset(Point(3, 1)) is None
        assert index.to_offset(Point(0, 1)) is None


class TestCreateLocation(unittest.TestCase):
    def setUp(self):
        self.ctx = Context(HTML, SourceFile("<p>hi"), verbose=False)

    def test_non_element_position(self):
        node = Text("hi")
        assert create_location(self.ctx, node, Location(1, 4, 3, 1, 6, 5)) == Position(Point(1, 4, 3), Point(1, 6, 5))

    def test_unclosed_element_takes_last_child_end(self):
        child = Text("hi")
        child.position = Position(Point(1, 4, 3), Point(1, 6, 5))
        node = Element("p", {}, [child])
        location = ElementLocation(1, 1, 0, 1, 4, 3, start_tag=Location(1, 1, 0, 1, 4, 3))
        position = create_location(self.ctx, node, location)
        assert position.start == Point(1, 1, 0)
        assert position.end == Point(1, 6, 5)
        # The end is a copy, not the child's own point
        assert position.end is not child.position.end

    def test_closed_element_keeps_its_end(self):
        child = Text("hi")
        child.position = Position(Point(1, 4, 3), Point(1, 6, 5))
        node = Element("p", {}, [child])
        location = ElementLocation(
            1, 1, 0, 1, 10, 9, start_tag=Location(1, 1, 0, 1, 4, 3), end_tag=Location(1, 6, 5, 1, 10, 9)
        )
        assert create_location(self.ctx, node, location).end == Point(1, 10, 9)

    def test_unclosed_element_without_child_position(self):
        node = Element("p", {}, [Text("hi")])
        location = ElementLocation(1, 1, 0, 1, 4, 3)
        assert create_location(self.ctx, node, location).end == Point(1, 4, 3)

    def test_verbose_records_tag_and_attribute_positions(self):
        ctx = Context(HTML, SourceFile('<p class="x"></p>'), verbose=True)
        node = Element("p", {"class": "x"}, [])
        location = ElementLocation(
            1,
            1,
            0,
            1,
            18,
            17,
            start_tag=Location(1, 1, 0, 1, 14, 13),
            end_tag=Location(1, 14, 13, 1, 18, 17),
            attrs={"class": Location(1, 4, 3, 1, 13, 12)},
        )
        create_location(ctx, node, location)
        assert node.positions.opening == Position(Point(1, 1, 0), Point(1, 14, 13))
        assert node.positions.closing == Position(Point(1, 14, 13), Point(1, 18, 17))
        assert node.positions.properties == {"className": Position(Point(1, 4, 3), Point(1, 13, 12))}

    def test_verbose_without_closing_tag(self):
        ctx = Context(HTML, SourceFile("<br>"), verbose=True)
        node = Element("br", {}, [])
        location = ElementLocation(1, 1, 0, 1, 5, 4, start_tag=Location(1, 1, 0, 1, 5, 4))
        create_location(ctx, node, location)
        assert node.positions.closing is None
        assert node.positions.properties == {}


if __name__ == "__main__":
    unittest.main()
