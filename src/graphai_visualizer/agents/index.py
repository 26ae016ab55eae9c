"""GraphAI agent reference index: fetched from upstream, with a bundled fallback."""

from __future__ import annotations

import json
from pathlib import Path

import httpx
from pydantic import BaseModel

from ..config import Settings, get_settings
from ..logging import get_logger

logger = get_logger("agents")

LOCAL_AGENT_INDEX = Path(__file__).resolve().parent / "agent_index.json"


class AgentIndexError(Exception):
    """Raised when the upstream agent index cannot be downloaded."""

    def __init__(self, message: str, status_code: int | None = None):
        self.status_code = status_code
        super().__init__(message)


class AgentInfo(BaseModel):
    name: str
    docs: str
    source: str


class AgentIndex(BaseModel):
    """Known agents with their documentation and source links."""

    agents: list[AgentInfo] = []

    def get(self, name: str) -> AgentInfo | None:
        return next((agent for agent in self.agents if agent.name == name), None)

    @property
    def names(self) -> list[str]:
        return [agent.name for agent in self.agents]


def load_local_agent_index(path: Path = LOCAL_AGENT_INDEX) -> AgentIndex:
    """Load the agent index bundled with the package."""
    return AgentIndex.model_validate(json.loads(path.read_text(encoding="utf-8")))


async def _download(client: httpx.AsyncClient, url: str) -> AgentIndex:
    response = await client.get(url)
    if not response.is_success:
        raise AgentIndexError(
            f"Failed to fetch agent index: HTTP {response.status_code}", response.status_code
        )
    return AgentIndex.model_validate(response.json())


async def fetch_agent_index(
    settings: Settings | None = None,
    client: httpx.AsyncClient | None = None,
) -> AgentIndex:
    """Fetch the agent index from upstream, falling back to the bundled copy on any failure."""
    settings = settings or get_settings()
    url = settings.agent_index_url
    try:
        if client is not None:
            return await _download(client, url)
        async with httpx.AsyncClient(timeout=settings.agent_index_timeout) as owned_client:
            return await _download(owned_client, url)
    except (httpx.HTTPError, AgentIndexError, ValueError) as e:
        # ValueError covers malformed JSON and pydantic validation errors
        logger.error("Error fetching agent index from %s: %s", url, e)
        return load_local_agent_index()
