"""
    Node model - an identified value in the graph.
"""
from typing import Any, Dict, Generic, Optional, Tuple, TypeVar

from ..codecs import U32_MAX, ValueCodec, parse_u32
from ..exceptions import InvalidIdentifierError, InvalidValueError, MalformedLineError

T = TypeVar('T')

# Node and edge lines are two tokens split on a single space
FIELD_SEPARATOR = ' '


def check_identifier(node_id: Any) -> int:
    """
    Validate an identifier given programmatically.

    Identifiers are unsigned 32-bit integers. ``bool`` is rejected even
    though it subclasses ``int``.

    Raises:
        InvalidIdentifierError: if ``node_id`` is not an int in u32 range.
    """
    if isinstance(node_id, bool) or not isinstance(node_id, int):
        raise InvalidIdentifierError(f"identifier must be an int, got {node_id!r}")
    if not 0 <= node_id <= U32_MAX:
        raise InvalidIdentifierError(f"identifier {node_id} out of range 0..{U32_MAX}")
    return node_id


def parse_identifier(token: str, line: Optional[str] = None) -> int:
    """Parse an identifier token from a text line."""
    node_id = parse_u32(token)
    if node_id is None:
        raise InvalidIdentifierError(f"wrong id {token!r} in {line!r}", line=line)
    return node_id


def split_line(line: str) -> Tuple[str, str]:
    """
    Split a node or edge line into its two tokens.

    Raises:
        MalformedLineError: if the line does not hold exactly two fields.
    """
    tokens = line.split(FIELD_SEPARATOR)
    if len(tokens) != 2:
        raise MalformedLineError(f"parsing error of {line!r}", line=line)
    return tokens[0], tokens[1]


class Node(Generic[T]):
    """
    A payload value paired with an identifier unique within its graph.

    Nodes are read-only: the graph owns them and hands out references.
    """

    __slots__ = ('_node_id', '_value')

    def __init__(self, node_id: int, value: T):
        """
        Initialize a node.

        Args:
            node_id: Unsigned 32-bit identifier
            value:   Payload, encodable by the graph's codec
        """
        self._node_id = check_identifier(node_id)
        self._value = value

    @property
    def node_id(self) -> int:
        return self._node_id

    @property
    def value(self) -> T:
        return self._value

    def encode(self, codec: ValueCodec[T]) -> str:
        """Render the node as ``"<id> <value-token>"``."""
        return f"{self._node_id}{FIELD_SEPARATOR}{codec.encode(self._value)}"

    @classmethod
    def decode(cls, line: str, codec: ValueCodec[T]) -> 'Node[T]':
        """
        Parse a node line.

        Raises:
            MalformedLineError:     line is not exactly two tokens
            InvalidIdentifierError: first token is not a u32
            InvalidValueError:      codec rejects the second token
        """
        id_token, value_token = split_line(line)
        node_id = parse_identifier(id_token, line)
        try:
            value = codec.decode(value_token)
        except ValueError as e:
            raise InvalidValueError(f"can't parse val in {line!r}: {e}", line=line) from e
        return cls(node_id, value)

    def to_dict(self, codec: Optional[ValueCodec[T]] = None) -> Dict[str, Any]:
        """
        Convert node to dictionary.
        With a codec the value is given as its text token.
        """
        return {
            'id': self._node_id,
            'value': codec.encode(self._value) if codec else self._value,
        }

    def __repr__(self) -> str:
        return f"Node({self._node_id}, {self._value!r})"

    def __eq__(self, other) -> bool:
        if not isinstance(other, Node):
            return False
        return self._node_id == other._node_id and self._value == other._value

    def __hash__(self) -> int:
        return hash(self._node_id)
