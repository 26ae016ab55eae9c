"""Find the object literal enclosing a cursor position."""

from __future__ import annotations

from tree_sitter import Node

from .source import Position, SourceTree, parse_source, position_to_offset

OBJECT_LITERAL = "object"


def _contains(node: Node, offset: int) -> bool:
    return node.start_byte <= offset <= node.end_byte


def find_innermost_object(node: Node, offset: int) -> Node | None:
    """Depth-first search, only descending into subtrees whose span contains ``offset``."""
    if not _contains(node, offset):
        return None
    for child in node.children:
        found = find_innermost_object(child, offset)
        if found is not None:
            return found
    return node if node.type == OBJECT_LITERAL else None


def enclosing_objects(source: SourceTree, offset: int) -> list[Node]:
    """Every object literal containing ``offset``, innermost first."""
    objects: list[Node] = []
    node = find_innermost_object(source.root, offset)
    while node is not None:
        if node.type == OBJECT_LITERAL:
            objects.append(node)
        node = node.parent
    return objects


def find_object_at_position(source_text: str, position: Position) -> Node | None:
    """Searches for the innermost object literal that includes the cursor position."""
    source = parse_source(source_text)
    return find_innermost_object(source.root, position_to_offset(source, position))
