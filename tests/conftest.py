# tests/conftest.py
"""
Shared test fixtures.
Small graphs built programmatically and from text, with and without cycles.
"""
import pytest

from textgraph.codecs import StrCodec, UIntCodec
from textgraph.models.graph import Graph


# Three-node chain used throughout:  1 -> 2 -> 3
CHAIN_TEXT = "1 10\n2 20\n3 30\n#\n1 2\n2 3\n"

# ── Social network stub: 8 people, directed "follows" edges ─────
_PEOPLE = [
    (1, "alice"),
    (2, "bob"),
    (3, "carol"),
    (4, "david"),
    (5, "eve"),
    (6, "frank"),
    (7, "grace"),
    (8, "hank"),
]

_FOLLOWS = [
    (1, 2),
    (1, 3),
    (2, 4),
    (3, 4),   # converges on david
    (4, 5),
    (5, 1),   # cycle: eve follows alice
    (6, 7),   # separate component
    (7, 6),
    (5, 5),   # self-loop
]


def _build_social() -> Graph:
    g = Graph(StrCodec())
    for node_id, name in _PEOPLE:
        g.add_node(node_id, name)
    for begin, end in _FOLLOWS:
        g.add_edge(begin, end)
    return g


# ── Pytest fixtures ──────────────────────────────────────────────

@pytest.fixture
def empty_graph() -> Graph:
    """An empty graph with unsigned-integer payloads."""
    return Graph(UIntCodec())


@pytest.fixture
def chain_text() -> str:
    return CHAIN_TEXT


@pytest.fixture
def chain_graph() -> Graph:
    """1:10 -> 2:20 -> 3:30, built from text."""
    return Graph.deserialize(CHAIN_TEXT, UIntCodec())


@pytest.fixture
def social_graph() -> Graph:
    """8 nodes, 9 edges: a cycle, a converging path, a self-loop, an island."""
    return _build_social()


@pytest.fixture
def graph_file(tmp_path):
    """Write text to a temporary graph file and return its path."""
    def _write(text: str, name: str = "graph.tgf"):
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path
    return _write
