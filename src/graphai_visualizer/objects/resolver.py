"""Name-based lookup of identifier definitions in a TypeScript source tree."""

from __future__ import annotations

from tree_sitter import Node

from .source import SourceTree


class ReferenceResolver:
    """Finds the first definition of a name in document order.

    Matches, in a pre-order walk of the whole file:
      - ``const name = <value>`` (any variable declarator with an initializer)
      - ``name: <value>`` inside any object literal
      - ``export default name`` / ``export = name``

    Lexical scoping and shadowing are ignored: a same-named binding in an
    unrelated function can win if it appears first.
    """

    def __init__(self, source: SourceTree):
        self.source = source
        self._cache: dict[str, Node | None] = {}

    def resolve(self, name: str) -> Node | None:
        if name not in self._cache:
            self._cache[name] = self._search(name)
        return self._cache[name]

    def _search(self, name: str) -> Node | None:
        stack = [self.source.root]
        while stack:
            node = stack.pop()
            definition = self._definition_in(node, name)
            if definition is not None:
                return definition
            stack.extend(reversed(node.children))
        return None

    def _definition_in(self, node: Node, name: str) -> Node | None:
        if node.type == "variable_declarator":
            declared = node.child_by_field_name("name")
            value = node.child_by_field_name("value")
            if value is not None and self._is_identifier(declared, name):
                return value

        elif node.type == "object":
            for prop in node.named_children:
                if prop.type != "pair":
                    continue
                key = prop.child_by_field_name("key")
                if key is not None and key.type == "property_identifier" and self.source.text_of(key) == name:
                    return prop.child_by_field_name("value")

        elif node.type == "export_statement":
            exported = node.child_by_field_name("value")
            if exported is None and any(child.type == "=" for child in node.children):
                exported = node.named_children[-1] if node.named_children else None
            if self._is_identifier(exported, name):
                return exported

        return None

    def _is_identifier(self, node: Node | None, name: str) -> bool:
        return node is not None and node.type == "identifier" and self.source.text_of(node) == name
