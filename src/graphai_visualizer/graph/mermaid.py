"""Render a GraphAI graph document as a Mermaid flowchart."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any

from ruamel.yaml import YAML

from .paths import child_scope, indent_for, qualify
from .schema import GraphDescription, NodeDescription, NodeKind
from .sources import inputs_to_data_sources

SUPPORTED_LANGUAGES = ("yaml", "json")
FLOWCHART_HEADER = "flowchart TD"

STATIC_NODE_CLASS = "staticNode"
COMPUTED_NODE_CLASS = "computedNode"
NESTED_GRAPH_CLASS = "nestedGraph"


@dataclass(frozen=True)
class MermaidFragment:
    """Lines and class memberships produced for one node map (and its sub-graphs)."""

    lines: tuple[str, ...] = ()
    static_ids: tuple[str, ...] = ()
    computed_ids: tuple[str, ...] = ()
    nested_ids: tuple[str, ...] = ()

    def __add__(self, other: MermaidFragment) -> MermaidFragment:
        return MermaidFragment(
            lines=self.lines + other.lines,
            static_ids=self.static_ids + other.static_ids,
            computed_ids=self.computed_ids + other.computed_ids,
            nested_ids=self.nested_ids + other.nested_ids,
        )

    def class_lines(self) -> list[str]:
        groups = [
            (self.static_ids, STATIC_NODE_CLASS),
            (self.computed_ids, COMPUTED_NODE_CLASS),
            (self.nested_ids, NESTED_GRAPH_CLASS),
        ]
        return [f"class {','.join(ids)} {name}" for ids, name in groups if ids]


def agent_label(agent: Any) -> str:
    return f'<span class="agent-name">{"" if agent is None else agent}</span>'


def load_graph_data(code: str, file_language_id: str) -> GraphDescription:
    """Parse YAML (1.2) or JSON text into a GraphDescription. Parser errors propagate."""
    if file_language_id == "yaml":
        raw = YAML(typ="safe", pure=True).load(code)
    else:
        raw = json.loads(code)
    return GraphDescription.model_validate(raw)


def dependency_edges(dependencies: Any, target_id: str, scope_path: str) -> list[str]:
    """One edge line per node reference found in ``dependencies``."""
    sources = inputs_to_data_sources(dependencies)
    if not isinstance(sources, list):
        sources = [sources]

    indent = indent_for(scope_path)
    lines = []
    for source in sources:
        if not source.node_id:
            continue
        source_id = qualify(scope_path, source.node_id)
        if source.prop_ids:
            lines.append(f"{indent}{source_id} -- {'.'.join(source.prop_ids)} --> {target_id}")
        else:
            lines.append(f"{indent}{source_id} --> {target_id}")
    return lines


def _edges_for(node: NodeDescription, qualified_id: str, scope_path: str) -> tuple[str, ...]:
    dependencies = node.dependencies
    if dependencies is None:
        return ()
    return tuple(dependency_edges(dependencies, qualified_id, scope_path))


def _nested_graph_fragment(node_id: str, node: NodeDescription, scope_path: str) -> MermaidFragment:
    qualified_id = qualify(scope_path, node_id)
    indent = indent_for(scope_path)

    inner = MermaidFragment()
    if node.nested_graph is not None:
        inner = build_fragment(node.nested_graph, child_scope(qualified_id))

    opening = f"{indent}subgraph {qualified_id}[{node_id}: {agent_label(node.agent)}]"
    block = MermaidFragment(
        lines=_edges_for(node, qualified_id, scope_path) + (opening,),
        nested_ids=(qualified_id,),
    )
    return block + inner + MermaidFragment(lines=(f"{indent}end",))


def _computed_fragment(node_id: str, node: NodeDescription, scope_path: str) -> MermaidFragment:
    qualified_id = qualify(scope_path, node_id)
    declaration = f"{indent_for(scope_path)}{qualified_id}({node_id}<br/>{agent_label(node.agent)})"
    return MermaidFragment(
        lines=(declaration,) + _edges_for(node, qualified_id, scope_path),
        computed_ids=(qualified_id,),
    )


def _static_fragment(node_id: str, node: NodeDescription, scope_path: str) -> MermaidFragment:
    qualified_id = qualify(scope_path, node_id)
    declaration = f"{indent_for(scope_path)}{qualified_id}({node_id})"
    return MermaidFragment(
        lines=(declaration,) + _edges_for(node, qualified_id, scope_path),
        static_ids=(qualified_id,),
    )


_FRAGMENT_BUILDERS = {
    NodeKind.NESTED_GRAPH: _nested_graph_fragment,
    NodeKind.COMPUTED: _computed_fragment,
    NodeKind.STATIC: _static_fragment,
}


def build_fragment(graph: GraphDescription, scope_path: str = "") -> MermaidFragment:
    """Fold every node of ``graph`` (depth-first into sub-graphs) into a single fragment."""
    fragment = MermaidFragment()
    for node_id, node in graph.nodes.items():
        fragment = fragment + _FRAGMENT_BUILDERS[node.kind](node_id, node, scope_path)
    return fragment


def graph_to_mermaid(graph: GraphDescription) -> str:
    fragment = build_fragment(graph)
    return "\n".join([FLOWCHART_HEADER, *fragment.lines, *fragment.class_lines()])


def code_to_mermaid(code: str, file_language_id: str) -> str:
    """Translate a YAML or JSON GraphAI document into Mermaid flowchart text.

    Returns an empty string for any other ``file_language_id``.
    """
    if file_language_id not in SUPPORTED_LANGUAGES:
        return ""
    return graph_to_mermaid(load_graph_data(code, file_language_id))
