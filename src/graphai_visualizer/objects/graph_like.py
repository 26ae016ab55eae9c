"""Detect GraphAI-shaped values and extract them from TypeScript sources."""

from __future__ import annotations

import json
from typing import Any

from ..logging import get_logger
from .converter import ObjectConverter
from .locator import enclosing_objects
from .source import Position, parse_source, position_to_offset

logger = get_logger("objects")

GRAPH_KEYS = ("nodes", "version", "edges")


def looks_like_graph(value: Any) -> bool:
    """Checks if a converted value looks like a GraphAI graph."""
    if not isinstance(value, dict):
        return False

    nodes = value.get("nodes")
    if isinstance(nodes, dict):
        for node in nodes.values():
            if isinstance(node, dict) and ("agent" in node or "value" in node):
                return True

    return any(key in value for key in GRAPH_KEYS)


def parse_graphai_object(source_text: str, position: Position) -> str | None:
    """Parses the GraphAI graph around ``position`` and returns it as JSON text.

    The search starts at the innermost object literal and widens outwards, so
    a cursor placed inside a node definition still finds the whole graph.
    Returns None when nothing graph-shaped encloses the cursor.
    """
    try:
        source = parse_source(source_text)
        candidates = enclosing_objects(source, position_to_offset(source, position))
        if not candidates:
            logger.info("No object found at cursor position (line %d)", position.line)
            return None

        converter = ObjectConverter(source)
        for candidate in candidates:
            value = converter.convert(candidate)
            if looks_like_graph(value):
                return json.dumps(value, indent=2, ensure_ascii=False)
    except Exception:
        logger.exception("Object parsing error")
        return None

    logger.info("The object at cursor position does not appear to be a GraphAI graph")
    return None
