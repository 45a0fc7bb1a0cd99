"""
    Edge model - a directed arc between two node identifiers.
"""
from typing import Any, Dict, Tuple

from .node import FIELD_SEPARATOR, check_identifier, parse_identifier, split_line


class Edge:
    """
        Directed edge from ``begin`` to ``end``.
        Edges carry no payload; two edges are equal if their pairs are.
    """

    __slots__ = ('_begin', '_end')

    def __init__(self, begin: int, end: int):
        self._begin = check_identifier(begin)
        self._end = check_identifier(end)

    @property
    def begin(self) -> int:
        return self._begin

    @property
    def end(self) -> int:
        return self._end

    @property
    def key(self) -> Tuple[int, int]:
        """The ``(begin, end)`` pair identifying this edge in a graph."""
        return self._begin, self._end

    def touches(self, node_id: int) -> bool:
        """Check if either endpoint is ``node_id``"""
        return self._begin == node_id or self._end == node_id

    def encode(self) -> str:
        return f"{self._begin}{FIELD_SEPARATOR}{self._end}"

    @classmethod
    def decode(cls, line: str) -> 'Edge':
        """
        Parse an edge line ``"<begin> <end>"``.

        Raises:
            MalformedLineError:     line is not exactly two tokens
            InvalidIdentifierError: either token is not a u32
        """
        begin_token, end_token = split_line(line)
        return cls(parse_identifier(begin_token, line), parse_identifier(end_token, line))

    def to_dict(self) -> Dict[str, Any]:
        return {'source': self._begin, 'target': self._end}

    def __repr__(self) -> str:
        return f"Edge({self._begin} -> {self._end})"

    def __eq__(self, other) -> bool:
        if not isinstance(other, Edge):
            return False
        return self.key == other.key

    def __hash__(self) -> int:
        return hash(self.key)
