"""TypeScript object literal extraction."""

from .converter import ObjectConverter, convert_to_json_safe_object, expr_marker, parse_object_with_references
from .graph_like import looks_like_graph, parse_graphai_object
from .locator import enclosing_objects, find_innermost_object, find_object_at_position
from .resolver import ReferenceResolver
from .source import Position, SourceTree, parse_source, position_to_offset

__all__ = [
    "ObjectConverter",
    "Position",
    "ReferenceResolver",
    "SourceTree",
    "convert_to_json_safe_object",
    "enclosing_objects",
    "expr_marker",
    "find_innermost_object",
    "find_object_at_position",
    "looks_like_graph",
    "parse_graphai_object",
    "parse_object_with_references",
    "parse_source",
    "position_to_offset",
]
