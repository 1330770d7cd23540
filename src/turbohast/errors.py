class UnsupportedNodeKind(Exception):
    """Raised when a parse node has a kind the converter has no handler for."""

    def __init__(self, node):
        self.node = node
        self.kind = getattr(node, "kind", None)
        super().__init__(f"Unsupported node kind: {self.kind!r}")
