"""
    Graph model - directed graph container with a line-oriented text format.

    Text format:

        <id> <value>      one line per node, insertion order
        #                 separator
        <begin> <end>     one line per edge, insertion order

    Structural invariants, enforced by every mutator:
        1. node ids are unique
        2. every edge endpoint is a node in the graph
        3. no two edges share the same (begin, end) pair
"""
import logging
from typing import Any, Callable, Dict, Generic, Iterator, List, Optional, Set, Tuple, TypeVar

from ..codecs import StrCodec, ValueCodec
from ..exceptions import DanglingEdgeEndpointError, DuplicateIdentifierError, GraphError
from .edge import Edge
from .node import Node, check_identifier

logger = logging.getLogger(__name__)

T = TypeVar('T')

SECTION_SEPARATOR = "#"


def _split_lines(text: str) -> List[str]:
    """Split on newlines, dropping a trailing '\\r' and the empty tail after a final newline."""
    lines = text.split('\n')
    if lines[-1] == '':
        lines.pop()
    return [line[:-1] if line.endswith('\r') else line for line in lines]


class Graph(Generic[T]):
    """
        Directed graph of ``Node[T]`` joined by ``Edge`` arcs.

        Nodes and edges keep insertion order. Mutators change the graph in
        place and return it, so calls can be chained:

            Graph(UIntCodec()).add_node(1, 10).add_node(2, 20).add_edge(1, 2)

        A failed mutation raises and leaves the graph unchanged.
    """

    def __init__(self, codec: Optional[ValueCodec[T]] = None):
        """
        Initialize an empty graph.
        Args:
            codec: Value codec for node payloads (defaults to ``StrCodec``)
        """
        self.codec: ValueCodec[T] = codec or StrCodec()
        self._nodes: Dict[int, Node[T]] = {}  # node_id -> Node
        self._edges: Dict[Tuple[int, int], Edge] = {}  # (begin, end) -> Edge
        self._adjacency_list: Dict[int, List[Edge]] = {}  # node_id -> outgoing Edges

    # ── Mutation ─────────────────────────────────────────────────

    def add_node(self, node_id: int, value: T) -> 'Graph[T]':
        """
        Add a node.

        Raises:
            InvalidIdentifierError:   ``node_id`` is not a u32
            DuplicateIdentifierError: ``node_id`` is already in the graph
        """
        return self.add_node_from(Node(node_id, value))

    def add_node_from(self, node: Node[T]) -> 'Graph[T]':
        """Add an existing ``Node``, e.g. one returned by ``Node.decode``."""
        if node.node_id in self._nodes:
            raise DuplicateIdentifierError(f"duplicate node with id {node.node_id}")

        self._nodes[node.node_id] = node
        self._adjacency_list[node.node_id] = []
        return self

    def remove_node(self, node_id: int) -> 'Graph[T]':
        """Remove a node and every edge touching it. Missing ids are ignored."""
        check_identifier(node_id)
        if node_id not in self._nodes:
            return self

        for key in [key for key, edge in self._edges.items() if edge.touches(node_id)]:
            self._discard_edge(key)

        del self._nodes[node_id]
        del self._adjacency_list[node_id]
        return self

    def add_edge(self, begin: int, end: int) -> 'Graph[T]':
        """
        Add a directed edge. Adding an existing pair again does nothing.

        Raises:
            InvalidIdentifierError:    either id is not a u32
            DanglingEdgeEndpointError: either endpoint is not in the graph
        """
        return self.add_edge_from(Edge(begin, end))

    def add_edge_from(self, edge: Edge) -> 'Graph[T]':
        """Add an existing ``Edge``, e.g. one returned by ``Edge.decode``."""
        missing = [i for i in (edge.begin, edge.end) if i not in self._nodes]
        if missing:
            raise DanglingEdgeEndpointError(
                f"adding edge between non-existent nodes ({edge.begin}->{edge.end}), "
                f"missing: {', '.join(str(i) for i in dict.fromkeys(missing))}"
            )

        if edge.key in self._edges:
            return self

        self._edges[edge.key] = edge
        self._adjacency_list[edge.begin].append(edge)
        return self

    def remove_edge(self, begin: int, end: int) -> 'Graph[T]':
        """Remove the edge matching both ``begin`` and ``end``, if any."""
        check_identifier(begin)
        check_identifier(end)
        self._discard_edge((begin, end))
        return self

    def _discard_edge(self, key: Tuple[int, int]) -> None:
        edge = self._edges.pop(key, None)
        if edge is None:
            return
        outgoing = self._adjacency_list.get(edge.begin)
        if outgoing is not None:
            self._adjacency_list[edge.begin] = [e for e in outgoing if e.key != key]

    # ── Queries ──────────────────────────────────────────────────

    def get_node(self, node_id: int) -> Optional[Node[T]]:
        check_identifier(node_id)
        return self._nodes.get(node_id)

    def get_all_nodes(self) -> List[Node[T]]:
        return list(self._nodes.values())

    def get_all_edges(self) -> List[Edge]:
        return list(self._edges.values())

    def has_edge(self, begin: int, end: int) -> bool:
        check_identifier(begin)
        check_identifier(end)
        return (begin, end) in self._edges

    def get_connected(self, node: Node[T]) -> List[Node[T]]:
        """
        Get the direct successors of a node, in edge-insertion order.
        Edges whose target is not in the graph are skipped.
        """
        result = []
        for edge in self._adjacency_list.get(node.node_id, []):
            target = self._nodes.get(edge.end)
            if target is not None:
                result.append(target)
        return result

    def get_number_of_nodes(self) -> int:
        return len(self._nodes)

    def get_number_of_edges(self) -> int:
        return len(self._edges)

    # ── Traversal ────────────────────────────────────────────────

    def walk(self, root: Node[T]) -> Iterator[Node[T]]:
        """
        Yield nodes reachable from ``root`` in depth-first pre-order.

        Each node is yielded once; one visited set covers the whole walk,
        so cycles and converging paths are cut. ``root`` itself is always
        yielded, even if its id is not in the graph.
        """
        visited: Set[int] = set()
        stack: List[Node[T]] = [root]

        while stack:
            node = stack.pop()
            if node.node_id in visited:
                continue
            visited.add(node.node_id)
            yield node
            # Reversed so the first successor is popped first
            stack.extend(reversed(self.get_connected(node)))

    def traverse_from(self, root: Node[T], visit: Callable[[Node[T]], Any]) -> None:
        """Call ``visit`` once for every node reachable from ``root``."""
        for node in self.walk(root):
            visit(node)

    # ── Text format ──────────────────────────────────────────────

    def serialize(self) -> str:
        """Render the graph in the line format; every line ends with a newline."""
        lines = [node.encode(self.codec) for node in self._nodes.values()]
        lines.append(SECTION_SEPARATOR)
        lines.extend(edge.encode() for edge in self._edges.values())
        return ''.join(line + '\n' for line in lines)

    @classmethod
    def deserialize(cls, text: str, codec: Optional[ValueCodec[T]] = None) -> 'Graph[T]':
        """
        Build a graph from the line format.

        Lines before the first ``#`` are nodes, lines after it are edges.
        Without a ``#`` line every line is read as a node and the graph has
        no edges. Further ``#`` lines are skipped.

        Raises:
            GraphError: any parse or insertion error, with ``lineno`` set
        """
        graph = cls(codec)
        reading_nodes = True

        for lineno, line in enumerate(_split_lines(text), start=1):
            if line == SECTION_SEPARATOR:
                reading_nodes = False
                continue
            try:
                if reading_nodes:
                    graph.add_node_from(Node.decode(line, graph.codec))
                else:
                    graph.add_edge_from(Edge.decode(line))
            except GraphError as e:
                e.lineno = lineno
                if e.line is None:
                    e.line = line
                raise

        if reading_nodes and graph._nodes:
            logger.debug("No '%s' separator found; graph has no edges", SECTION_SEPARATOR)
        logger.debug("Deserialized %r", graph)
        return graph

    # ── Misc ─────────────────────────────────────────────────────

    def __contains__(self, node_id) -> bool:
        # True and 1.0 hash like 1; only real identifiers can match
        if isinstance(node_id, bool) or not isinstance(node_id, int):
            return False
        return node_id in self._nodes

    def __repr__(self) -> str:
        return f"Graph(nodes={len(self._nodes)}, edges={len(self._edges)})"

    def to_dict(self) -> Dict[str, Any]:
        return {
            'nodes': [node.to_dict() for node in self._nodes.values()],
            'edges': [edge.to_dict() for edge in self._edges.values()],
        }
