"""
textgraph: directed graph container with a line-oriented text format.
"""
from .codecs import (
    ValueType,
    ValueCodec,
    UIntCodec,
    IntCodec,
    FloatCodec,
    BoolCodec,
    StrCodec,
    get_codec,
)
from .exceptions import (
    GraphError,
    MalformedLineError,
    InvalidIdentifierError,
    InvalidValueError,
    DuplicateIdentifierError,
    DanglingEdgeEndpointError,
)
from .models.node import Node
from .models.edge import Edge
from .models.graph import Graph

__version__ = '1.0.0'

__all__ = [
    'ValueType',
    'ValueCodec',
    'UIntCodec',
    'IntCodec',
    'FloatCodec',
    'BoolCodec',
    'StrCodec',
    'get_codec',
    'GraphError',
    'MalformedLineError',
    'InvalidIdentifierError',
    'InvalidValueError',
    'DuplicateIdentifierError',
    'DanglingEdgeEndpointError',
    'Node',
    'Edge',
    'Graph',
]
