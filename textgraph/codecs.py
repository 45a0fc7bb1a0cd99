"""
    Value codecs - single-token text encoding for node payloads.

    A node payload can be any type for which a ``ValueCodec`` exists.
    The codec turns a value into one text token and parses it back;
    ``decode`` raises ``InvalidValueError`` on malformed input.

    Encoded tokens must not contain spaces or newlines if the graph is
    to be read back (the text format has no escaping). Encoding does
    not check this.
"""
import re
from abc import ABC, abstractmethod
from enum import Enum
from typing import Generic, Optional, TypeVar

from .exceptions import InvalidValueError

T = TypeVar('T')

U32_MAX = 0xFFFFFFFF

_UINT_PATTERN = re.compile(r'\+?[0-9]+')
_INT_PATTERN = re.compile(r'[+-]?[0-9]+')
_WHITESPACE = re.compile(r'\s')


def parse_u32(token: str) -> Optional[int]:
    """Parse a decimal unsigned 32-bit integer, or return None."""
    if not _UINT_PATTERN.fullmatch(token):
        return None
    number = int(token)
    if number > U32_MAX:
        return None
    return number


class ValueType(Enum):
    UINT = "uint"
    INT = "int"
    FLOAT = "float"
    BOOL = "bool"
    STR = "str"


class ValueCodec(ABC, Generic[T]):
    """
    Encodes payload values to a single text token and back.

    Concrete subclasses must implement:
        - encode(value)  -> token
        - decode(token)  -> value, raising InvalidValueError on failure
    """

    value_type: ValueType

    @abstractmethod
    def encode(self, value: T) -> str:
        ...

    @abstractmethod
    def decode(self, token: str) -> T:
        ...

    def _reject(self, token: str) -> InvalidValueError:
        return InvalidValueError(
            f"cannot parse {self.value_type.value} value from {token!r}"
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"

    def __eq__(self, other) -> bool:
        return type(self) is type(other)

    def __hash__(self) -> int:
        return hash(type(self))


class UIntCodec(ValueCodec[int]):
    """Unsigned 32-bit integers."""

    value_type = ValueType.UINT

    def encode(self, value: int) -> str:
        return str(value)

    def decode(self, token: str) -> int:
        number = parse_u32(token)
        if number is None:
            raise self._reject(token)
        return number


class IntCodec(ValueCodec[int]):
    """Signed integers of any size."""

    value_type = ValueType.INT

    def encode(self, value: int) -> str:
        return str(value)

    def decode(self, token: str) -> int:
        if not _INT_PATTERN.fullmatch(token):
            raise self._reject(token)
        return int(token)


class FloatCodec(ValueCodec[float]):
    """Floats, including ``inf`` and ``nan``."""

    value_type = ValueType.FLOAT

    def encode(self, value: float) -> str:
        return repr(float(value))

    def decode(self, token: str) -> float:
        # float() also strips whitespace and accepts underscores
        if not token or '_' in token or _WHITESPACE.search(token):
            raise self._reject(token)
        try:
            return float(token)
        except ValueError:
            raise self._reject(token)


class BoolCodec(ValueCodec[bool]):
    """Booleans spelled ``true`` / ``false``."""

    value_type = ValueType.BOOL

    def encode(self, value: bool) -> str:
        return "true" if value else "false"

    def decode(self, token: str) -> bool:
        if token == "true":
            return True
        if token == "false":
            return False
        raise self._reject(token)


class StrCodec(ValueCodec[str]):
    """Plain strings; a token must be non-empty and free of whitespace."""

    value_type = ValueType.STR

    def encode(self, value: str) -> str:
        return str(value)

    def decode(self, token: str) -> str:
        if not token or _WHITESPACE.search(token):
            raise self._reject(token)
        return token


_CODECS = {
    ValueType.UINT: UIntCodec,
    ValueType.INT: IntCodec,
    ValueType.FLOAT: FloatCodec,
    ValueType.BOOL: BoolCodec,
    ValueType.STR: StrCodec,
}


def get_codec(value_type) -> ValueCodec:
    """
    Return a codec instance for a ``ValueType`` or its string name.

    Raises:
        ValueError: if the name is not a known value type.
    """
    return _CODECS[ValueType(value_type)]()
