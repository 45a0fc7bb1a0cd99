# textgraph/exceptions.py
"""
    Errors raised by graph parsing and mutation.

    Every error is a ``GraphError`` (itself a ``ValueError``), so callers
    can catch the whole family or a single kind.
"""
from typing import Optional


class GraphError(ValueError):
    """
    Base class for all textgraph errors.

    Attributes:
        line:   Offending text line, when the error came from parsing.
        lineno: 1-based line number, set by ``Graph.deserialize``.
    """

    def __init__(self, message: str, line: Optional[str] = None,
                 lineno: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.line = line
        self.lineno = lineno

    def __str__(self) -> str:
        if self.lineno is not None:
            return f"line {self.lineno}: {self.message}"
        return self.message


class MalformedLineError(GraphError):
    """Raised when a line does not split into exactly two tokens."""
    pass


class InvalidIdentifierError(GraphError):
    """Raised when an identifier is not a valid unsigned 32-bit integer."""
    pass


class InvalidValueError(GraphError):
    """Raised when a value token cannot be decoded by the codec."""
    pass


class DuplicateIdentifierError(GraphError):
    """Raised when a node id is already present in the graph."""
    pass


class DanglingEdgeEndpointError(GraphError):
    """Raised when an edge references a node id that is not in the graph."""
    pass
