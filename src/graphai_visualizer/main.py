from dotenv import load_dotenv
from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from ruamel.yaml.error import YAMLError

from .agents import AgentIndex, AgentLink, agent_hover, fetch_agent_index, find_agent_links
from .config import get_settings
from .graph import code_to_mermaid
from .logging import logger
from .models import (
    AgentHoverRequest,
    AgentHoverResponse,
    AgentLinksRequest,
    GraphObjectResponse,
    HealthResponse,
    MermaidRequest,
    MermaidResponse,
    ObjectRequest,
    ObjectValueResponse,
)
from .objects import parse_graphai_object, parse_object_with_references

load_dotenv()

app = FastAPI(
    title="GraphAI Visualizer API",
    description="Render GraphAI graphs from YAML, JSON and TypeScript sources as Mermaid flowcharts",
    version="0.1.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["http://localhost:5173", "http://localhost:3000"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Fetched lazily on first use; tests may assign it directly
agent_index: AgentIndex | None = None


async def get_agent_index() -> AgentIndex:
    global agent_index
    if agent_index is None:
        agent_index = await fetch_agent_index(get_settings())
        logger.info("Loaded agent index with %d agents", len(agent_index.agents))
    return agent_index


@app.get("/api/health", response_model=HealthResponse)
def health():
    return HealthResponse(status="ok")


@app.post("/api/mermaid", response_model=MermaidResponse)
def render_mermaid(request: MermaidRequest):
    """Render a YAML or JSON GraphAI document."""
    try:
        mermaid = code_to_mermaid(request.code, request.language)
    except (YAMLError, ValueError) as e:
        raise HTTPException(status_code=400, detail=f"Could not parse {request.language} document: {e}")
    return MermaidResponse(mermaid=mermaid)


@app.post("/api/objects/graph", response_model=GraphObjectResponse)
def render_object_graph(request: ObjectRequest):
    """Render the GraphAI graph literal enclosing the cursor in a TypeScript document."""
    graph_json = parse_graphai_object(request.source, request.position)
    if graph_json is None:
        raise HTTPException(status_code=404, detail="No GraphAI object found at the selection position.")
    return GraphObjectResponse(graph=graph_json, mermaid=code_to_mermaid(graph_json, "json"))


@app.post("/api/objects/value", response_model=ObjectValueResponse)
def resolve_object_value(request: ObjectRequest):
    """Return the innermost object literal at the cursor with its references resolved."""
    value = parse_object_with_references(request.source, request.position)
    if value is None:
        raise HTTPException(status_code=404, detail="No object found at cursor position.")
    return ObjectValueResponse(value=value)


@app.get("/api/agents", response_model=AgentIndex)
async def list_agents():
    return await get_agent_index()


@app.post("/api/agents/links", response_model=list[AgentLink])
async def agent_links(request: AgentLinksRequest):
    index = await get_agent_index()
    action = request.action or get_settings().agent_click_action
    return find_agent_links(request.text, request.language, index, action=action)


@app.post("/api/agents/hover", response_model=AgentHoverResponse)
async def agent_hover_contents(request: AgentHoverRequest):
    index = await get_agent_index()
    contents = agent_hover(request.text, request.language, request.position, index)
    if contents is None:
        raise HTTPException(status_code=404, detail="No agent at position")
    return AgentHoverResponse(contents=contents)
