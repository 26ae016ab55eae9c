"""Locate agent references in YAML, JSON and TypeScript documents."""

from __future__ import annotations

import re
from typing import Literal

from pydantic import BaseModel

from ..objects.source import Position
from .index import AgentIndex, AgentInfo

_AGENT_PATTERNS = {
    "json": r'"agent"\s*:\s*"({names})"',
    "yaml": r"""agent:\s*(?:["']({names})["']|({names}))(?:\s|,|\]|\}|$)""",
    "typescript": r"""agent:\s*["']({names})["']""",
}
_DEFAULT_PATTERN = _AGENT_PATTERNS["typescript"]


class AgentLink(BaseModel):
    """A clickable agent name inside a document."""

    agent: str
    line: int
    start: int
    end: int
    target: str
    tooltip: str


def get_agent_regex(language_id: str, agent_names: list[str]) -> re.Pattern:
    names = "|".join(re.escape(name) for name in agent_names)
    pattern = _AGENT_PATTERNS.get(language_id, _DEFAULT_PATTERN)
    return re.compile(pattern.replace("{names}", names))


def editor_lines(text: str) -> list[str]:
    """Split on newlines only, as editors number lines; a trailing ``\\r`` is dropped."""
    return [line[:-1] if line.endswith("\r") else line for line in text.split("\n")]


def get_agent_info(agent_name: str, index: AgentIndex) -> AgentInfo | None:
    return index.get(agent_name)


def _matched_name(match: re.Match) -> str:
    return next(group for group in match.groups() if group)


def _agent_matches(line: str, pattern: re.Pattern):
    for match in pattern.finditer(line):
        agent_name = _matched_name(match)
        start = match.start() + match.group(0).index(agent_name)
        yield match, agent_name, start, start + len(agent_name)


def find_agent_links(
    text: str,
    language_id: str,
    index: AgentIndex,
    action: Literal["docs", "source"] = "docs",
) -> list[AgentLink]:
    """Every known agent name in ``text``, linked to its docs or source."""
    if not index.agents:
        return []

    pattern = get_agent_regex(language_id, index.names)
    links: list[AgentLink] = []
    for line_number, line in enumerate(editor_lines(text)):
        for _, agent_name, start, end in _agent_matches(line, pattern):
            info = get_agent_info(agent_name, index)
            if info is None:
                continue
            target = info.source if action == "source" else info.docs
            links.append(
                AgentLink(
                    agent=agent_name,
                    line=line_number,
                    start=start,
                    end=end,
                    target=target,
                    tooltip=f"Click to open {'source code' if action == 'source' else 'documentation'} for {agent_name}",
                )
            )
    return links


def agent_hover(text: str, language_id: str, position: Position, index: AgentIndex) -> str | None:
    """Markdown hover for the agent reference under ``position``, if any."""
    if not index.agents:
        return None

    lines = editor_lines(text)
    if position.line >= len(lines):
        return None

    pattern = get_agent_regex(language_id, index.names)
    for match, agent_name, _, _ in _agent_matches(lines[position.line], pattern):
        if not match.start() <= position.character <= match.end():
            continue
        info = get_agent_info(agent_name, index)
        if info is None:
            return None
        return f"**{agent_name}**\n\n[Docs]({info.docs}) | [Source]({info.source})\n\n"
    return None
