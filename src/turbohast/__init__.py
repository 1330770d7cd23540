from .builder import h, s
from .context import Context, TransformOpts
from .errors import UnsupportedNodeKind
from .file import Message, SourceFile
from .location import ElementPositions, LocationIndex, Point, Position
from .schema import HTML, SVG, find
from .transform import Converter, from_parse_tree

__all__ = [
    "HTML",
    "SVG",
    "Context",
    "Converter",
    "ElementPositions",
    "LocationIndex",
    "Message",
    "Point",
    "Position",
    "SourceFile",
    "TransformOpts",
    "UnsupportedNodeKind",
    "find",
    "from_parse_tree",
    "h",
    "s",
]
