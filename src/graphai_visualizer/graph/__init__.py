"""GraphAI graph model and its Mermaid rendering."""

from .mermaid import MermaidFragment, build_fragment, code_to_mermaid, graph_to_mermaid, load_graph_data
from .schema import DataSource, GraphDescription, NodeDescription, NodeKind, classify_node
from .sources import inputs_to_data_sources, parse_node_name

__all__ = [
    "DataSource",
    "GraphDescription",
    "MermaidFragment",
    "NodeDescription",
    "NodeKind",
    "build_fragment",
    "classify_node",
    "code_to_mermaid",
    "graph_to_mermaid",
    "inputs_to_data_sources",
    "load_graph_data",
    "parse_node_name",
]
