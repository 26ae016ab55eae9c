"""GraphAI agent reference data and document lookups."""

from .index import AgentIndex, AgentIndexError, AgentInfo, fetch_agent_index, load_local_agent_index
from .links import AgentLink, agent_hover, find_agent_links, get_agent_info, get_agent_regex

__all__ = [
    "AgentIndex",
    "AgentIndexError",
    "AgentInfo",
    "AgentLink",
    "agent_hover",
    "fetch_agent_index",
    "find_agent_links",
    "get_agent_info",
    "get_agent_regex",
    "load_local_agent_index",
]
