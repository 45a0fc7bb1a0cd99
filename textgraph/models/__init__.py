from .node import Node
from .edge import Edge
from .graph import Graph

__all__ = ['Node', 'Edge', 'Graph']
