"""GraphAI Visualizer: GraphAI workflow graphs rendered as Mermaid flowcharts."""

from .graph import code_to_mermaid, graph_to_mermaid
from .objects import Position, looks_like_graph, parse_graphai_object, parse_object_with_references

__all__ = [
    "Position",
    "code_to_mermaid",
    "graph_to_mermaid",
    "looks_like_graph",
    "parse_graphai_object",
    "parse_object_with_references",
]
