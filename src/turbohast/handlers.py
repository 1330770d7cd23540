import logging

from turbohast.builder import h, s
from turbohast.constants import (
    CDATA_CLOSE,
    CDATA_OPEN,
    KIND_COMMENT,
    KIND_DOCTYPE,
    KIND_DOCUMENT,
    KIND_ELEMENT,
    KIND_FRAGMENT,
    KIND_TEXT,
    QUIRKS_MODES,
)
from turbohast.location import Position, position_from_location
from turbohast.node import CData, Comment, Doctype, Root, Text

logger = logging.getLogger(__name__)


class NodeHandler:
    """Base class for converting one kind of parse node."""

    kinds = ()

    def __init__(self, converter):
        self.converter = converter

    def debug(self, message):
        # Skip string formatting unless debug logging is on
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("%s: %s", self.__class__.__name__, message)

    def content_of(self, node):
        """Return an extra subtree to convert before this node, if any."""
        return None

    def handle(self, node, children, ctx, content=None):
        raise NotImplementedError


class RootHandler(NodeHandler):
    """Documents and fragments become roots."""

    kinds = (KIND_DOCUMENT, KIND_FRAGMENT)

    def handle(self, node, children, ctx, content=None):
        result = Root(children, quirks_mode=getattr(node, "mode", None) in QUIRKS_MODES)

        if ctx.file is not None and self.converter.located:
            index = self.converter.location_index()
            result.position = Position(index.to_point(0), index.to_point(index.length))

        return result


class TextHandler(NodeHandler):
    kinds = (KIND_TEXT,)

    def handle(self, node, children, ctx, content=None):
        return Text(node.data)


class CommentHandler(NodeHandler):
    """Comments, with parser-mangled CDATA sections turned back into CDATA."""

    kinds = (KIND_COMMENT,)

    def handle(self, node, children, ctx, content=None):
        data = node.data
        if data.startswith(CDATA_OPEN) and data.endswith(CDATA_CLOSE):
            self.debug("comment reclassified as cdata")
            return CData(data[len(CDATA_OPEN) : -len(CDATA_CLOSE)])
        return Comment(data)


class DoctypeHandler(NodeHandler):
    kinds = (KIND_DOCTYPE,)

    def handle(self, node, children, ctx, content=None):
        return Doctype()


class ElementHandler(NodeHandler):
    kinds = (KIND_ELEMENT,)

    def content_of(self, node):
        content = getattr(node, "content", None)
        if content is not None and (getattr(node, "tag_name", None) or "").lower() == "template":
            return content
        return None

    def handle(self, node, children, ctx, content=None):
        attributes = {}
        for attribute in getattr(node, "attributes", None) or []:
            name = attribute.name
            if attribute.prefix:
                name = attribute.prefix + ":" + name
            attributes[name] = attribute.value

        build = s if ctx.schema.space == "svg" else h
        result = build(node.tag_name, attributes, children or [])

        if result.tag_name == "template" and content is not None:
            location = getattr(node, "location", None)
            start_tag = position_from_location(getattr(location, "start_tag", None))
            end_tag = position_from_location(getattr(location, "end_tag", None))

            # Content spans the text between the tags, excluding both tags
            if start_tag is not None and end_tag is not None and ctx.file is not None:
                if start_tag.end is not None or end_tag.start is not None:
                    content.position = Position(start_tag.end, end_tag.start)

            result.content = content

        return result


HANDLER_CLASSES = (RootHandler, TextHandler, CommentHandler, DoctypeHandler, ElementHandler)
