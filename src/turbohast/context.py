from .file import SourceFile
from .schema import HTML, SCHEMAS, SVG


class TransformOpts:
    """Conversion options.

    - space: 'html' or 'svg', the schema of the tree root
    - file: SourceFile with the original text; enables positions
    - verbose: record tag and attribute positions on elements (needs file)
    """

    __slots__ = ("file", "space", "verbose")

    def __init__(self, space="html", file=None, verbose=False):
        if space not in SCHEMAS:
            msg = f"Unknown space {space!r}, expected 'html' or 'svg'"
            raise ValueError(msg)
        self.space = space
        self.file = file
        self.verbose = bool(verbose)

    @classmethod
    def coerce(cls, options):
        """Accept None, a TransformOpts, a dict of options, or a bare SourceFile."""
        if options is None:
            return cls()
        if isinstance(options, SourceFile):
            return cls(file=options)
        if isinstance(options, dict):
            return cls(**options)
        if not isinstance(options, cls):
            msg = f"Expected TransformOpts, SourceFile, dict or None, got {type(options).__name__}"
            raise TypeError(msg)
        return options

    def __repr__(self):
        return f"TransformOpts(space={self.space!r}, file={self.file!r}, verbose={self.verbose})"


class Context:
    """Immutable state threaded down the traversal.

    Entering an element derives a new context instead of mutating this one,
    so a subtree never sees a sibling's schema.
    """

    __slots__ = ("file", "schema", "verbose")

    def __init__(self, schema=HTML, file=None, verbose=False):
        object.__setattr__(self, "schema", schema)
        object.__setattr__(self, "file", file)
        object.__setattr__(self, "verbose", verbose)

    def __setattr__(self, name, value):
        msg = f"Context is immutable; use with_schema() to derive a new one (tried to set {name!r})"
        raise AttributeError(msg)

    @classmethod
    def from_opts(cls, opts):
        return cls(SVG if opts.space == "svg" else HTML, opts.file, opts.verbose)

    def with_schema(self, schema):
        if schema is self.schema:
            return self
        return Context(schema, self.file, self.verbose)

    def __repr__(self):
        return f"Context({self.schema.space}, file={self.file is not None}, verbose={self.verbose})"
