"""API models for the GraphAI Visualizer service."""

from typing import Any, Literal, Optional

from pydantic import BaseModel, Field

from .objects.source import Position


class MermaidRequest(BaseModel):
    """A YAML or JSON GraphAI document to render."""

    code: str = Field(..., description="Full text of the document")
    language: str = Field(
        ..., description="Document language id; only 'yaml' and 'json' produce a diagram"
    )


class MermaidResponse(BaseModel):
    mermaid: str = Field(..., description="Mermaid flowchart text (empty for unsupported languages)")


class ObjectRequest(BaseModel):
    """A TypeScript document and the cursor position inside it."""

    source: str = Field(..., description="Full text of the TypeScript document")
    position: Position = Field(..., description="Zero-based cursor position")


class ObjectValueResponse(BaseModel):
    value: Any = Field(..., description="The object literal at the cursor, with references resolved")


class GraphObjectResponse(BaseModel):
    graph: str = Field(..., description="The GraphAI graph at the cursor, as JSON text")
    mermaid: str = Field(..., description="Mermaid flowchart text for the graph")


class AgentLinksRequest(BaseModel):
    text: str
    language: str
    action: Optional[Literal["docs", "source"]] = Field(
        None, description="Link target; defaults to the configured agent click action"
    )


class AgentHoverRequest(BaseModel):
    text: str
    language: str
    position: Position


class AgentHoverResponse(BaseModel):
    contents: str = Field(..., description="Markdown hover contents")


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    service: str = "GraphAI Visualizer"
