"""Source text container with message collection."""


class Message:
    """A diagnostic attached to a source file, with optional location."""

    __slots__ = ("column", "fatal", "line", "reason", "rule_id")

    def __init__(self, reason, line=None, column=None, rule_id=None, fatal=False):
        self.reason = reason
        self.line = line
        self.column = column
        self.rule_id = rule_id
        self.fatal = bool(fatal)

    def __repr__(self):
        if self.line is not None and self.column is not None:
            return f"Message({self.reason!r}, line={self.line}, column={self.column})"
        return f"Message({self.reason!r})"

    def __str__(self):
        text = self.reason
        if self.rule_id:
            text = f"{self.reason} ({self.rule_id})"
        if self.line is not None and self.column is not None:
            return f"({self.line},{self.column}): {text}"
        return text

    def __eq__(self, other):
        if not isinstance(other, Message):
            return NotImplemented
        return (
            self.reason == other.reason
            and self.line == other.line
            and self.column == other.column
            and self.rule_id == other.rule_id
            and self.fatal == other.fatal
        )

    __hash__ = None  # Unhashable since we define __eq__


class SourceFile:
    """The original markup text a parse tree was built from.

    Attaching a file to a conversion enables positional information.
    """

    __slots__ = ("messages", "path", "value")

    def __init__(self, value="", path=None):
        self.value = value if value is not None else ""
        self.path = path
        self.messages = []

    def __str__(self):
        return self.value

    def __len__(self):
        return len(self.value)

    def __repr__(self):
        name = self.path or "<memory>"
        return f"SourceFile({name}, length={len(self.value)}, messages={len(self.messages)})"

    def message(self, reason, line=None, column=None, rule_id=None, fatal=False):
        """Record a message about this file and return it."""
        msg = Message(reason, line=line, column=column, rule_id=rule_id, fatal=fatal)
        self.messages.append(msg)
        return msg
