"""Console viewer: load a graph file and print each node with its successors."""
import json
import logging
from pathlib import Path
from typing import Optional

import click

from . import __version__
from .codecs import ValueType, get_codec
from .config import ViewerConfig
from .exceptions import GraphError
from .models.graph import Graph

logger = logging.getLogger(__name__)


def load_graph(path: Path, config: ViewerConfig) -> Graph:
    """Read ``path`` as text and deserialize it with the configured codec."""
    text = path.read_text(encoding=config.encoding)
    graph = Graph.deserialize(text, get_codec(config.value_type))
    logger.info("Loaded %r from '%s'", graph, path)
    return graph


def format_node_line(graph: Graph, node) -> str:
    """``node id: 1, neighbors: [ 2 3 ], val: 10``"""
    neighbors = ''.join(f" {n.node_id}" for n in graph.get_connected(node))
    return f"node id: {node.node_id}, neighbors: [{neighbors} ], val: {graph.codec.encode(node.value)}"


def graph_summary(graph: Graph) -> dict:
    """Graph dictionary with each node's successor ids attached."""
    data = graph.to_dict()
    for node, node_data in zip(graph.get_all_nodes(), data['nodes']):
        node_data['neighbors'] = [n.node_id for n in graph.get_connected(node)]
    return data


@click.command()
@click.version_option(version=__version__, prog_name="textgraph")
@click.argument("path", required=False, type=click.Path(path_type=Path))
@click.option(
    "-t", "--value-type",
    type=click.Choice([t.value for t in ValueType]),
    default=None,
    help="Payload type of node values (default: uint).",
)
@click.option("--json", "json_output", is_flag=True, help="Print the graph as JSON.")
@click.option("-v", "--verbose", is_flag=True, help="Debug logging to stderr.")
def main(path: Optional[Path], value_type: Optional[str], json_output: bool, verbose: bool) -> None:
    """Print every node of the graph file PATH with its direct successors.

    PATH defaults to $TEXTGRAPH_FILE, or to the bundled sample graph.
    """
    config = ViewerConfig.from_env()
    logging.basicConfig(level=logging.DEBUG if verbose else config.log_level)

    if value_type is not None:
        config.value_type = ValueType(value_type)
    path = path or config.default_path

    try:
        graph = load_graph(path, config)
    except OSError as exc:
        raise click.ClickException(f"cannot read '{path}': {exc.strerror or exc}")
    except UnicodeDecodeError as exc:
        raise click.ClickException(
            f"cannot read '{path}': not valid {config.encoding} text (byte {exc.start}: {exc.reason})"
        )
    except GraphError as exc:
        raise click.ClickException(f"'{path}': {exc}")

    if json_output:
        try:
            click.echo(json.dumps(graph_summary(graph), indent=2, default=str, allow_nan=False))
        except ValueError:
            raise click.ClickException("graph holds nan or infinite values, which JSON cannot represent")
        return

    for node in graph.get_all_nodes():
        click.echo(format_node_line(graph, node))
