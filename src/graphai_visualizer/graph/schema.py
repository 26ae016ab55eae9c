"""Pydantic models describing a GraphAI graph document."""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, model_validator


class NodeKind(str, Enum):
    """How a node is drawn; decided once, when the node is parsed."""

    STATIC = "static"
    COMPUTED = "computed"
    NESTED_GRAPH = "nested_graph"


def classify_node(raw: Any) -> NodeKind:
    """Classify a raw node mapping: ``graph`` first, then ``agent``, else static."""
    if not isinstance(raw, dict):
        return NodeKind.STATIC
    if "graph" in raw:
        return NodeKind.NESTED_GRAPH
    if "agent" in raw:
        return NodeKind.COMPUTED
    return NodeKind.STATIC


class DataSource(BaseModel):
    """A single dependency extracted from an ``inputs``/``update``/``graph`` expression.

    Only sources carrying a ``node_id`` are references to another node's
    output; everything else is a literal kept in ``value``.
    """

    node_id: str | None = None
    prop_ids: list[str] | None = None
    value: Any = None


class NodeDescription(BaseModel):
    """A single entry of a graph's ``nodes`` map."""

    model_config = ConfigDict(extra="allow")

    kind: NodeKind
    agent: Any = None
    inputs: Any = None
    update: Any = None
    graph: GraphDescription | str | None = None

    @model_validator(mode="before")
    @classmethod
    def _classify(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return {"kind": NodeKind.STATIC}
        data = dict(data)
        data["kind"] = classify_node(data)
        # Only an embedded map or a reference string is meaningful here
        if "graph" in data and not isinstance(data["graph"], (dict, str)):
            data["graph"] = None
        return data

    def declares(self, field: str) -> bool:
        """True if the source document spelled out ``field`` for this node."""
        return field in self.model_fields_set

    @property
    def nested_graph(self) -> GraphDescription | None:
        return self.graph if isinstance(self.graph, GraphDescription) else None

    @property
    def dependencies(self) -> Any:
        """The dependency expression feeding this node, or None."""
        if self.kind is NodeKind.NESTED_GRAPH:
            if isinstance(self.graph, str):
                return self.graph
            return self.inputs if self.declares("inputs") else None
        if self.kind is NodeKind.COMPUTED:
            return self.inputs if self.declares("inputs") else None
        if self.declares("update"):
            return {"update": self.update}
        return None


class GraphDescription(BaseModel):
    """A complete GraphAI graph. Top-level metadata (version, loop, ...) is kept but unused."""

    model_config = ConfigDict(extra="allow")

    nodes: dict[str, NodeDescription] = {}

    @model_validator(mode="before")
    @classmethod
    def _normalize_nodes(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return {"nodes": {}}
        nodes = data.get("nodes")
        if not isinstance(nodes, dict):
            nodes = {}
        return {
            **data,
            "nodes": {
                str(node_id): node if isinstance(node, dict) else {}
                for node_id, node in nodes.items()
            },
        }


NodeDescription.model_rebuild()
