"""Dependency extraction from GraphAI data-source expressions.

A data source is written ``:nodeId`` or ``:nodeId.prop.path``; it may appear
on its own, inside lists and mappings, or embedded in a string template as
``${:nodeId.prop}``. Anything else is a literal value.
"""

from __future__ import annotations

import re
from typing import Any

from .schema import DataSource

_NODE_REFERENCE_RE = re.compile(r":(.*)")
_TEMPLATE_REFERENCE_RE = re.compile(r"\$\{(:[^}]+)\}")
# A dot right after "(" or right before ")" is not a separator
_PROP_SEPARATOR_RE = re.compile(r"(?<!\()\.(?!\))")


def parse_node_name(input_node_id: Any) -> DataSource:
    """Turn a single expression into a DataSource."""
    if isinstance(input_node_id, str):
        match = _NODE_REFERENCE_RE.fullmatch(input_node_id)
        if match:
            parts = _PROP_SEPARATOR_RE.split(match.group(1))
            if len(parts) == 1:
                return DataSource(node_id=parts[0])
            return DataSource(node_id=parts[0], prop_ids=parts[1:])
    return DataSource(value=input_node_id)


def inputs_to_data_sources(inputs: Any) -> list[DataSource]:
    """Flatten an inputs expression into its data sources, in document order."""
    if isinstance(inputs, list):
        return [source for item in inputs for source in inputs_to_data_sources(item)]
    if isinstance(inputs, dict):
        return [source for item in inputs.values() for source in inputs_to_data_sources(item)]
    if isinstance(inputs, str):
        template_refs = _TEMPLATE_REFERENCE_RE.findall(inputs)
        if template_refs:
            return inputs_to_data_sources(template_refs)
    return [parse_node_name(inputs)]
