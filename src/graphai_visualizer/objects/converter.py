"""Convert TypeScript object/array literals into JSON-safe Python values.

Identifiers are followed to their definitions; anything that cannot be
reduced to plain data is kept as an ``<expr>...</expr>`` marker string.
"""

from __future__ import annotations

import math
from enum import Enum
from typing import Any

from tree_sitter import Node

from ..logging import get_logger
from .locator import find_innermost_object
from .resolver import ReferenceResolver
from .source import Position, SourceTree, parse_source, position_to_offset

logger = get_logger("objects")

ANONYMOUS_FUNCTION_AGENT = "AnonymousFunctionAgent"
FUNCTION_TYPES = {"function", "function_expression", "arrow_function", "generator_function"}

_SIMPLE_ESCAPES = {
    "n": "\n",
    "t": "\t",
    "r": "\r",
    "b": "\b",
    "f": "\f",
    "v": "\v",
    "0": "\0",
}


def expr_marker(text: str) -> str:
    return f"<expr>{text}</expr>"


class LiteralKind(str, Enum):
    OBJECT = "object"
    ARRAY = "array"
    IDENTIFIER = "identifier"
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    NULL = "null"
    UNDEFINED = "undefined"
    TEMPLATE = "template"
    OTHER = "other"


_KINDS_BY_NODE_TYPE = {
    "object": LiteralKind.OBJECT,
    "array": LiteralKind.ARRAY,
    "identifier": LiteralKind.IDENTIFIER,
    "string": LiteralKind.STRING,
    "number": LiteralKind.NUMBER,
    "true": LiteralKind.BOOLEAN,
    "false": LiteralKind.BOOLEAN,
    "null": LiteralKind.NULL,
    "undefined": LiteralKind.UNDEFINED,
    "template_string": LiteralKind.TEMPLATE,
}


def literal_kind(node: Node) -> LiteralKind:
    return _KINDS_BY_NODE_TYPE.get(node.type, LiteralKind.OTHER)


def _decode_escape(sequence: str) -> str:
    body = sequence[1:]
    if body.startswith("u{"):
        return chr(int(body[2:-1], 16))
    if body[:1] in ("x", "u") and len(body) > 1:
        return chr(int(body[1:], 16))
    if body[:1] in ("\r", "\n", "\u2028", "\u2029"):
        # line continuation
        return ""
    return _SIMPLE_ESCAPES.get(body, body)


def _to_number(text: str) -> int | float | None:
    cleaned = text.replace("_", "").lower()
    if cleaned.endswith("n"):
        return None
    try:
        if cleaned.startswith(("0x", "0o", "0b")):
            return int(cleaned, 0)
        value = float(cleaned)
    except ValueError:
        return None
    if not math.isfinite(value):
        return None
    if value.is_integer() and abs(value) < 2**53:
        return int(value)
    return value


class ObjectConverter:
    """Turns literal expression nodes of one source file into plain values."""

    def __init__(self, source: SourceTree | None = None, resolver: ReferenceResolver | None = None):
        self.source = source
        self.resolver = resolver
        if self.resolver is None and source is not None:
            self.resolver = ReferenceResolver(source)
        self._handlers = {
            LiteralKind.OBJECT: self._convert_object,
            LiteralKind.ARRAY: self._convert_array,
            LiteralKind.IDENTIFIER: self._convert_identifier,
            LiteralKind.STRING: lambda node, active: self.string_value(node),
            LiteralKind.NUMBER: self._convert_number,
            LiteralKind.BOOLEAN: lambda node, active: node.type == "true",
            LiteralKind.NULL: lambda node, active: None,
            LiteralKind.UNDEFINED: lambda node, active: expr_marker("undefined"),
            LiteralKind.TEMPLATE: lambda node, active: expr_marker(self.text_of(node)),
            LiteralKind.OTHER: lambda node, active: expr_marker(self.text_of(node)),
        }

    def convert(self, node: Node, active: frozenset[str] = frozenset()) -> Any:
        """Convert ``node``; ``active`` holds the names being resolved above this call."""
        return self._handlers[literal_kind(node)](node, active)

    def text_of(self, node: Node) -> str:
        if self.source is not None:
            return self.source.text_of(node)
        return node.text.decode("utf-8")

    def string_value(self, node: Node) -> str:
        parts = []
        for child in node.children:
            if child.type == "string_fragment":
                parts.append(self.text_of(child))
            elif child.type == "escape_sequence":
                parts.append(_decode_escape(self.text_of(child)))
        # Recombine surrogate pairs written as two \u escapes; lone surrogates become U+FFFD
        return "".join(parts).encode("utf-16", "surrogatepass").decode("utf-16", "replace")

    def property_name(self, key: Node) -> str:
        if key.type == "string":
            return self.string_value(key)
        return self.text_of(key)

    def resolve_reference(self, name: str, active: frozenset[str]) -> Any:
        """Convert the definition of ``name``, or mark it as an unresolved expression."""
        if self.resolver is None or name in active:
            return expr_marker(name)
        definition = self.resolver.resolve(name)
        if definition is None:
            logger.debug("No definition found for %s", name)
            return expr_marker(name)
        return self.convert(definition, active | {name})

    def _convert_object(self, node: Node, active: frozenset[str]) -> dict[str, Any]:
        result: dict[str, Any] = {}
        for member in node.named_children:
            if member.type == "pair":
                key_node = member.child_by_field_name("key")
                value = member.child_by_field_name("value")
                if key_node is None or value is None:
                    # incomplete pair left by parser error recovery
                    continue
                key = self.property_name(key_node)
                if value.type == "identifier":
                    result[key] = self.resolve_reference(self.text_of(value), active)
                elif value.type in FUNCTION_TYPES:
                    result[key] = expr_marker(ANONYMOUS_FUNCTION_AGENT)
                else:
                    result[key] = self.convert(value, active)

            elif member.type == "shorthand_property_identifier":
                name = self.text_of(member)
                result[name] = self.resolve_reference(name, active)

            elif member.type == "spread_element":
                result.update(self._spread_entries(member, active))

            elif member.type == "method_definition":
                key = self.property_name(member.child_by_field_name("name"))
                result[key] = expr_marker(ANONYMOUS_FUNCTION_AGENT)

        return result

    def _spread_entries(self, member: Node, active: frozenset[str]) -> dict[str, Any]:
        target = member.named_children[0]
        target_text = self.text_of(target)
        if target.type == "identifier" and self.resolver is not None and target_text not in active:
            definition = self.resolver.resolve(target_text)
            if definition is not None and definition.type == "object":
                return self._convert_object(definition, active | {target_text})
        return {f"...{target_text}": expr_marker(target_text)}

    def _convert_array(self, node: Node, active: frozenset[str]) -> list[Any]:
        items = []
        for element in node.named_children:
            if element.type == "comment":
                continue
            if element.type == "identifier":
                items.append(self.resolve_reference(self.text_of(element), active))
            else:
                items.append(self.convert(element, active))
        return items

    def _convert_identifier(self, node: Node, active: frozenset[str]) -> Any:
        return self.resolve_reference(self.text_of(node), active)

    def _convert_number(self, node: Node, active: frozenset[str]) -> Any:
        text = self.text_of(node)
        value = _to_number(text)
        return expr_marker(text) if value is None else value


def convert_to_json_safe_object(node: Node, source: SourceTree | None = None) -> Any:
    """Converts a literal expression node to a JSON-safe value.

    With ``source`` supplied, variable references are looked up in it and
    replaced by the converted definition.
    """
    return ObjectConverter(source).convert(node)


def parse_object_with_references(source_text: str, position: Position) -> Any:
    """Parses the object literal at ``position`` with all references resolved, or None."""
    source = parse_source(source_text)
    node = find_innermost_object(source.root, position_to_offset(source, position))
    if node is None:
        return None
    return convert_to_json_safe_object(node, source)
