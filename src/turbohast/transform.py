"""Parse tree to document tree conversion.

The traversal is iterative: each source node gets a frame on an explicit
stack, children (and template content) are converted first, then the node's
handler runs with the converted children. Deep documents are limited by
memory, not by the interpreter's recursion limit.
"""

import logging

from turbohast.constants import KIND_ELEMENT, SVG_NAMESPACE
from turbohast.context import Context, TransformOpts
from turbohast.errors import UnsupportedNodeKind
from turbohast.handlers import HANDLER_CLASSES
from turbohast.location import LocationIndex, create_location
from turbohast.schema import HTML, SVG

logger = logging.getLogger(__name__)


class _Frame:
    __slots__ = ("content", "ctx", "handler", "index", "node", "results", "sources")

    def __init__(self, node, ctx, handler, sources, content):
        self.node = node
        self.ctx = ctx
        self.handler = handler
        # Pending source subtrees: children, then template content if any
        self.sources = sources
        self.content = content
        self.index = 0
        self.results = []


class Converter:
    """Converts parse trees into document trees.

    One converter may be reused; per-conversion state is reset by convert().
    """

    __slots__ = ("_index", "handlers", "located", "opts")

    def __init__(self, opts=None):
        self.opts = TransformOpts.coerce(opts)
        self.handlers = {}
        for handler_class in HANDLER_CLASSES:
            handler = handler_class(self)
            for kind in handler_class.kinds:
                self.handlers[kind] = handler
        # Whether any node received a position during the current conversion
        self.located = False
        self._index = None

    def location_index(self):
        """Line/column index of the attached file, built once per conversion."""
        if self._index is None:
            self._index = LocationIndex(str(self.opts.file))
        return self._index

    def convert(self, tree):
        self.located = False
        self._index = None
        ctx = Context.from_opts(self.opts)
        logger.debug("Converting %r (space=%s)", tree, ctx.schema.space)

        stack = [self._enter(tree, ctx)]
        result = None
        while stack:
            frame = stack[-1]
            if frame.index < len(frame.sources):
                source = frame.sources[frame.index]
                frame.index += 1
                stack.append(self._enter(source, frame.ctx))
                continue

            stack.pop()
            converted = self._finish(frame)
            if stack:
                stack[-1].results.append(converted)
            else:
                result = converted

        logger.debug("Converted %r", result)
        return result

    def _enter(self, node, ctx):
        kind = getattr(node, "kind", None)
        handler = self.handlers.get(kind)
        if handler is None:
            self._report_unsupported(node, ctx)
            raise UnsupportedNodeKind(node)

        if kind == KIND_ELEMENT:
            ctx = ctx.with_schema(SVG if getattr(node, "namespace", None) == SVG_NAMESPACE else HTML)

        sources = list(getattr(node, "children", None) or ())
        content = handler.content_of(node)
        if content is not None:
            sources.append(content)
        return _Frame(node, ctx, handler, sources, content)

    def _finish(self, frame):
        results = frame.results
        content = results.pop() if frame.content is not None else None
        result = frame.handler.handle(frame.node, results, frame.ctx, content)

        location = getattr(frame.node, "location", None)
        if location is not None and frame.ctx.file is not None:
            position = create_location(frame.ctx, result, location)
            if position is not None:
                self.located = True
                result.position = position

        return result

    def _report_unsupported(self, node, ctx):
        kind = getattr(node, "kind", None)
        logger.debug("Unsupported node kind %r: %r", kind, node)
        if ctx.file is None:
            return
        location = getattr(node, "location", None)
        ctx.file.message(
            f"Unsupported node kind: {kind!r}",
            line=getattr(location, "start_line", None),
            column=getattr(location, "start_col", None),
            rule_id="unsupported-node-kind",
            fatal=True,
        )


def from_parse_tree(tree, options=None):
    """Convert a parse tree into a document tree.

    ``options`` is a TransformOpts, a dict of its arguments, a bare
    SourceFile, or None.
    """
    return Converter(options).convert(tree)
